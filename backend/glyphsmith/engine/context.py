"""GlyphContext — the single mutable state object flowing through one generation.

Per-layer results → Layer
Glyph-wide results → GlyphContext.* (attractors, symmetry, elements)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from glyphsmith.engine.attractors import AttractorField
from glyphsmith.engine.config import GlyphConfig, Symmetry
from glyphsmith.engine.prng import Mulberry32
from glyphsmith.engine.registry import LayerKind


@dataclass(eq=False)
class Layer:
    """One stroked primitive of the composite glyph."""

    kind: LayerKind
    index: int
    # Path vertices: Nx2 array. Hatch layers keep their endpoints here too
    # (segment i = points[2i], points[2i + 1]).
    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    closed: bool = False
    stroke_width: float = 1.0
    opacity: float = 1.0
    uses_attractors: bool = False
    symmetry: Symmetry = Symmetry.NONE
    folds: int = 0
    smoothing: int = 0

    @property
    def segments(self) -> NDArray[np.float64]:
        """Kx2x2 view of hatch segments."""
        return self.points.reshape(-1, 2, 2)


@dataclass
class Dot:
    cx: float
    cy: float
    r: float
    opacity: float
    layer_index: int


@dataclass
class GlyphContext:
    """Shared state for one glyph."""

    config: GlyphConfig
    rng: Mulberry32
    attractors: AttractorField = field(default_factory=AttractorField)
    symmetry: Symmetry = Symmetry.NONE
    layer_count: int = 0
    layers: list[Layer] = field(default_factory=list)
    dots: list[Dot] = field(default_factory=list)
    # Serializable element dicts in paint order
    elements: list[dict[str, Any]] = field(default_factory=list)
    spokes: int = 0

    @property
    def size(self) -> float:
        return self.config.size

    @property
    def center(self) -> float:
        return self.config.center
