"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from clipnorm.config import Settings, settings
from clipnorm.engine.config import PipelineConfig


def get_settings() -> Settings:
    return settings


def get_pipeline_config(current: Settings = Depends(get_settings)) -> PipelineConfig:
    """Numeric policy for one request, built from the configured defaults."""
    return PipelineConfig(
        precision=current.path_precision,
        arc_max_sweep_degrees=current.arc_max_sweep_degrees,
    )
