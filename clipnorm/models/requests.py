"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ClipPathRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    clip_path_id: str | None = Field(
        default=None,
        description="id for a newly created <clipPath> (defaults to the configured id)",
    )


class NormalizePathRequest(BaseModel):
    d: str = Field(..., description="Path data to normalize into objectBoundingBox units")
