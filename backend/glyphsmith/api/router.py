"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from glyphsmith.api import glyphs, health, visual

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(glyphs.router)
api_router.include_router(visual.router)
