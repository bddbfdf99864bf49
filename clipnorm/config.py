"""Application configuration from environment variables (and `.env`)."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    clipnorm_env: str = "development"
    clipnorm_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Conversion defaults, overridable per request / CLI run
    clip_path_id: str = "clip"
    path_precision: int = 6
    arc_max_sweep_degrees: float = 90.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
