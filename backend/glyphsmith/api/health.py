"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from glyphsmith.config import Settings
from glyphsmith.dependencies import get_glyph_cache, get_settings
from glyphsmith.engine.cache import GlyphCache
from glyphsmith.engine.registry import get_registry
from glyphsmith.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(
    cache: GlyphCache = Depends(get_glyph_cache),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        environment=settings.glyphsmith_env,
        layer_generators=get_registry().count,
        cached_glyphs=len(cache),
    )
