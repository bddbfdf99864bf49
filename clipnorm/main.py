"""FastAPI app factory for the clipPath normalization service."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clipnorm import __version__
from clipnorm.config import settings
from clipnorm.engine.pipeline import load_transforms
from clipnorm.engine.registry import get_registry

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.clipnorm_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    # Stages register themselves on import; the routers only see the registry
    load_transforms()
    logger.info("clipnorm %s (%s): %d transforms loaded", __version__, settings.clipnorm_env, get_registry().count)

    production = settings.clipnorm_env == "production"
    app = FastAPI(
        title="clipnorm",
        description="SVG shapes → clipPath in objectBoundingBox units",
        version=__version__,
        docs_url=None if production else "/api/docs",
        openapi_url=None if production else "/api/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    from clipnorm.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
