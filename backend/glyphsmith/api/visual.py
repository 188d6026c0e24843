"""POST /api/visual/transform — subject words → inline glyphs."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from glyphsmith.dependencies import get_visual_transformer
from glyphsmith.models.requests import VisualTransformRequest
from glyphsmith.models.responses import VisualTransformResponse
from glyphsmith.visual.transform import VisualTransformer

router = APIRouter(prefix="/visual")


@router.post("/transform", response_model=VisualTransformResponse)
async def transform(
    req: VisualTransformRequest,
    transformer: VisualTransformer = Depends(get_visual_transformer),
) -> VisualTransformResponse:
    return VisualTransformResponse(html=transformer.transform(req.value, req.visual_mode))
