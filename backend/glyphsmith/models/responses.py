"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = "development"
    layer_generators: int = 0
    cached_glyphs: int = 0


class AttractorModel(BaseModel):
    angle: float
    strength: float


class GlyphResponse(BaseModel):
    seed: str | int | float
    svg: str
    data_url: str
    symmetry: str
    layer_count: int
    attractors: list[AttractorModel] = Field(default_factory=list)


class BatchGlyph(BaseModel):
    seed: str | int | float
    data_url: str


class BatchResponse(BaseModel):
    # A list, not an object: 1 and "1" are distinct seeds with distinct glyphs.
    glyphs: list[BatchGlyph] = Field(default_factory=list)


class LayerSummary(BaseModel):
    index: int
    kind: str
    points: int
    closed: bool
    symmetry: str
    folds: int
    smoothing: int
    uses_attractors: bool
    stroke_width: float
    opacity: float
    bbox: list[float]
    centroid: list[float]
    hull_area: float


class InspectResponse(BaseModel):
    seed: str | int | float
    size: float
    symmetry: str
    attractors: list[AttractorModel] = Field(default_factory=list)
    spokes: int = 0
    dots: int = 0
    layers: list[LayerSummary] = Field(default_factory=list)


class VisualTransformResponse(BaseModel):
    html: str
