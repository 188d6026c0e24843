"""Per-layer geometry summaries for a generated glyph."""

from __future__ import annotations

from typing import Any

from shapely.geometry import MultiPoint

from glyphsmith.engine.context import Layer
from glyphsmith.engine.generator import GlyphImage
from glyphsmith.utils.geometry import bbox, centroid


def summarize_layer(layer: Layer) -> dict[str, Any]:
    """Kind, size and extent of one layer. Hull area is 0 for degenerate sets."""
    pts = layer.points
    hull_area = 0.0
    if len(pts) >= 3:
        hull_area = float(MultiPoint([tuple(p) for p in pts]).convex_hull.area)
    cx, cy = centroid(pts)
    return {
        "index": layer.index,
        "kind": layer.kind.name.lower(),
        "points": int(len(pts)),
        "closed": layer.closed,
        "symmetry": layer.symmetry.value,
        "folds": layer.folds,
        "smoothing": layer.smoothing,
        "uses_attractors": layer.uses_attractors,
        "stroke_width": round(layer.stroke_width, 2),
        "opacity": round(layer.opacity, 2),
        "bbox": [round(v, 2) for v in bbox(pts)],
        "centroid": [round(cx, 2), round(cy, 2)],
        "hull_area": round(hull_area, 2),
    }


def summarize_glyph(image: GlyphImage) -> dict[str, Any]:
    return {
        "seed": image.config.seed,
        "size": image.config.size,
        "symmetry": image.symmetry.value,
        "attractors": [
            {"angle": round(a.angle, 4), "strength": round(a.strength, 4)} for a in image.attractors
        ],
        "spokes": image.spokes,
        "dots": len(image.dots),
        "layers": [summarize_layer(layer) for layer in image.layers],
    }
