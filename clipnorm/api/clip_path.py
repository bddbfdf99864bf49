"""POST /api/clip-path and /api/normalize-path — shape normalization endpoints."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from clipnorm.config import Settings
from clipnorm.dependencies import get_pipeline_config, get_settings
from clipnorm.engine.config import PipelineConfig
from clipnorm.engine.errors import ClipPathError, MalformedPathData
from clipnorm.engine.pipeline import create_pipeline
from clipnorm.models.requests import ClipPathRequest, NormalizePathRequest
from clipnorm.models.responses import ClipPathResponse, NormalizePathResponse
from clipnorm.svg.document import convert_document, convert_shape

router = APIRouter()
logger = logging.getLogger(__name__)


def _unprocessable(error: ClipPathError) -> HTTPException:
    return HTTPException(status_code=422, detail={"error": error.kind, "message": str(error)})


@router.post("/clip-path", response_model=ClipPathResponse)
async def clip_path(
    req: ClipPathRequest,
    settings: Settings = Depends(get_settings),
    config: PipelineConfig = Depends(get_pipeline_config),
) -> ClipPathResponse:
    start = time.perf_counter()

    try:
        result = convert_document(
            req.svg,
            clip_path_id=req.clip_path_id or settings.clip_path_id,
            config=config,
        )
    except ClipPathError as e:
        logger.info("clip-path request rejected: %s", e)
        raise _unprocessable(e) from e

    elapsed = (time.perf_counter() - start) * 1000

    return ClipPathResponse(
        svg=result.svg,
        paths=result.paths,
        skipped=result.skipped,
        errors=result.errors,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/normalize-path", response_model=NormalizePathResponse)
async def normalize_path(
    req: NormalizePathRequest,
    config: PipelineConfig = Depends(get_pipeline_config),
) -> NormalizePathResponse:
    ctx = convert_shape("path", {"d": req.d}, pipeline=create_pipeline(config))

    if ctx.output is None:
        raise _unprocessable(MalformedPathData("; ".join(ctx.errors.values()) or "Unparsable path data"))

    return NormalizePathResponse(
        d=ctx.output,
        bbox=ctx.bbox.as_tuple() if ctx.bbox is not None else None,
        segment_count=ctx.features.get("segment_count", 0),
    )
