"""API request models."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field

SeedValue = Union[str, int, float]


class GlyphOptions(BaseModel):
    """Recognised glyph options. Unset fields fall back to engine defaults."""

    size: float | None = Field(default=None, description="viewBox width/height")
    stroke_width: float | None = None
    stroke_color: str | None = Field(default=None, description="Stroke/fill colour")
    background: str | None = Field(default=None, description="Background fill, empty for none")
    complexity: int | None = Field(default=None, description="1..10, drives the layer count")
    symmetry: str | None = Field(default=None, description="none, bilateral or radial")
    attractor_strength: float | None = Field(default=None, description="0..1 activation probability")
    attractor_influence: float | None = Field(default=None, description="0..1 pull magnitude")

    def as_options(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class GlyphRequest(BaseModel):
    seed: SeedValue | None = Field(default=None, description="String or number; empty uses the fallback seed")
    options: GlyphOptions = Field(default_factory=GlyphOptions)


class BatchRequest(BaseModel):
    seeds: list[SeedValue] = Field(..., description="Seeds to render independently")
    options: GlyphOptions = Field(default_factory=GlyphOptions)


class VisualTransformRequest(BaseModel):
    value: str | list[str] | None = Field(default=None, description="Puzzle HTML or list of fragments")
    visual_mode: bool = Field(default=False, description="Replace subjects with glyphs")
