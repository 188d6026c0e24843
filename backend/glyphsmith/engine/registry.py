"""Layer registry — every layer kind is a standalone generator registered via decorator.

Usage:
    @layer_generator(kind=LayerKind.BLOB, cutoff=0.30)
    def blob(ctx: GlyphContext, index: int, use_attractors: bool) -> Layer:
        ...

A layer-choice draw selects the first kind (in LayerKind order) whose cutoff
exceeds the draw. Cutoffs are cumulative and the last kind catches the rest,
so a given seed always yields the same sequence of layer kinds.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from glyphsmith.engine import glyph_constants as gc

if TYPE_CHECKING:
    from glyphsmith.engine.context import GlyphContext, Layer

logger = logging.getLogger(__name__)

DEFAULT_OPACITY = (gc.STROKE_OPACITY_MIN, gc.STROKE_OPACITY_MIN + gc.STROKE_OPACITY_SPAN)


class LayerKind(enum.IntEnum):
    BLOB = 0
    POLYLINE = 1
    HATCH = 2


LayerFn = Callable[["GlyphContext", int, bool], "Layer"]


@dataclass
class LayerSpec:
    kind: LayerKind
    fn: LayerFn
    cutoff: float
    opacity: tuple[float, float] = DEFAULT_OPACITY
    # Blob and polyline layers may be followed by accent dots
    accents: bool = False
    description: str = ""


class LayerRegistry:
    """Registry of layer generators keyed by kind."""

    def __init__(self) -> None:
        self._specs: dict[LayerKind, LayerSpec] = {}

    def register(self, spec: LayerSpec) -> None:
        if spec.kind in self._specs:
            raise ValueError(f"Duplicate layer kind: {spec.kind.name}")
        self._specs[spec.kind] = spec
        logger.debug("Registered layer %s (cutoff %.2f)", spec.kind.name, spec.cutoff)

    def get(self, kind: LayerKind) -> LayerSpec:
        return self._specs[kind]

    def all(self) -> list[LayerSpec]:
        return sorted(self._specs.values(), key=lambda s: s.kind)

    def choose(self, draw: float) -> LayerSpec:
        specs = self.all()
        if not specs:
            raise LookupError("No layer generators registered")
        for spec in specs:
            if draw < spec.cutoff:
                return spec
        return specs[-1]

    @property
    def count(self) -> int:
        return len(self._specs)


# Module-level singleton
_registry = LayerRegistry()


def get_registry() -> LayerRegistry:
    return _registry


def layer_generator(
    *,
    kind: LayerKind,
    cutoff: float,
    opacity: tuple[float, float] = DEFAULT_OPACITY,
    accents: bool = False,
    description: str = "",
):
    """Decorator to register a layer generator."""

    def decorator(fn: LayerFn):
        _registry.register(
            LayerSpec(
                kind=kind,
                fn=fn,
                cutoff=cutoff,
                opacity=opacity,
                accents=accents,
                description=description,
            )
        )
        return fn

    return decorator
