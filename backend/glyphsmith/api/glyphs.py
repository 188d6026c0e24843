"""/api/glyphs — render, batch and inspect glyphs."""

from __future__ import annotations

from urllib.parse import unquote

from fastapi import APIRouter, Depends, Response

from glyphsmith.dependencies import get_glyph_cache
from glyphsmith.engine.cache import GlyphCache
from glyphsmith.engine.config import GlyphConfig
from glyphsmith.engine.generator import generate_batch, generate_image
from glyphsmith.engine.summary import summarize_glyph
from glyphsmith.models.requests import BatchRequest, GlyphRequest
from glyphsmith.models.responses import (
    AttractorModel,
    BatchGlyph,
    BatchResponse,
    GlyphResponse,
    InspectResponse,
)
from glyphsmith.svg.serializer import DATA_URL_PREFIX

router = APIRouter(prefix="/glyphs")


def _config(req: GlyphRequest) -> GlyphConfig:
    return GlyphConfig.from_options(req.options.as_options()).with_seed(req.seed)


@router.post("", response_model=GlyphResponse)
async def create_glyph(req: GlyphRequest) -> GlyphResponse:
    image = generate_image(_config(req))
    return GlyphResponse(
        seed=image.config.seed,
        svg=image.svg,
        data_url=image.data_url,
        symmetry=image.symmetry.value,
        layer_count=image.layer_count,
        attractors=[AttractorModel(angle=a.angle, strength=a.strength) for a in image.attractors],
    )


@router.post("/batch", response_model=BatchResponse)
async def create_batch(req: BatchRequest) -> BatchResponse:
    glyphs = generate_batch(req.seeds, req.options.as_options())
    return BatchResponse(glyphs=[BatchGlyph(seed=seed, data_url=url) for seed, url in glyphs.items()])


@router.post("/inspect", response_model=InspectResponse)
async def inspect_glyph(req: GlyphRequest) -> InspectResponse:
    return InspectResponse(**summarize_glyph(generate_image(_config(req))))


@router.get("/{seed}.svg")
async def glyph_svg(seed: str, cache: GlyphCache = Depends(get_glyph_cache)) -> Response:
    """Word glyph from the shared cache, served as an SVG document."""
    data_url = cache.get_or_generate(seed)
    svg = unquote(data_url[len(DATA_URL_PREFIX):])
    return Response(content=svg, media_type="image/svg+xml")
