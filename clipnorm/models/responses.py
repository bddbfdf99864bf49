"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class ClipPathResponse(BaseModel):
    svg: str
    paths: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)
    processing_time_ms: float = 0.0


class NormalizePathResponse(BaseModel):
    d: str
    # (min_x, min_y, max_x, max_y) of the input; None for empty geometry
    bbox: tuple[float, float, float, float] | None = None
    segment_count: int = 0
