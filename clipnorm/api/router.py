"""Everything is served under /api."""

from __future__ import annotations

from fastapi import APIRouter

from clipnorm.api import clip_path, health

api_router = APIRouter(prefix="/api")

for module in (health, clip_path):
    api_router.include_router(module.router)
