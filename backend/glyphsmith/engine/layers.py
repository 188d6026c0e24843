"""Shape layer generators — blobs, polyline rings, hatches — plus accents.

Every generator consumes the context's stream in a fixed order; reordering
any draw below changes the glyph for every seed.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from glyphsmith.engine import glyph_constants as gc
from glyphsmith.engine.config import Symmetry
from glyphsmith.engine.context import Dot, GlyphContext, Layer
from glyphsmith.engine.prng import jitter, rand_int
from glyphsmith.engine.registry import LayerKind, layer_generator
from glyphsmith.svg.serializer import path_from, segments_path
from glyphsmith.utils.geometry import as_points, chaikin, mirror_bilateral, mirror_radial, polar_point

TAU = math.pi * 2


def apply_symmetry(
    ctx: GlyphContext,
    points: NDArray[np.float64],
    draw_folds: Callable[[], int],
) -> tuple[NDArray[np.float64], int]:
    """Mirror or fold a layer per the glyph's resolved symmetry.

    Radial folds are drawn only when radial symmetry is in effect.
    """
    if ctx.symmetry is Symmetry.BILATERAL:
        return mirror_bilateral(points, ctx.size), 2
    if ctx.symmetry is Symmetry.RADIAL:
        folds = draw_folds()
        return mirror_radial(points, folds, ctx.center), folds
    return points, 0


@layer_generator(
    kind=LayerKind.BLOB,
    cutoff=0.30,
    accents=True,
    description="Closed jittered ring relaxed with Chaikin smoothing",
)
def blob(ctx: GlyphContext, index: int, use_attractors: bool) -> Layer:
    rng, size, center = ctx.rng, ctx.size, ctx.center

    verts = rand_int(rng, gc.BLOB_MIN_VERTS, gc.BLOB_MAX_VERTS)
    radius = size * (gc.BLOB_RADIUS_MIN + rng() * gc.BLOB_RADIUS_SPAN)

    ring: list[tuple[float, float]] = []
    for i in range(verts):
        angle = i / verts * TAU
        r = radius * (gc.BLOB_VERTEX_MIN + rng() * gc.BLOB_VERTEX_SPAN)
        pt = polar_point(center, angle, r)
        if use_attractors:
            pt = ctx.attractors.attract(pt, radius)
        ring.append(pt)

    smoothing = gc.BLOB_MIN_SMOOTHING + rand_int(rng, 0, gc.BLOB_EXTRA_SMOOTHING)
    points = chaikin(as_points(ring), smoothing, closed=True)
    points, folds = apply_symmetry(
        ctx, points, lambda: gc.BLOB_MIN_FOLDS + rand_int(rng, 0, gc.BLOB_EXTRA_FOLDS)
    )

    growth = index / ctx.layer_count * gc.BLOB_WIDTH_GROWTH if ctx.layer_count else 0.0
    return Layer(
        kind=LayerKind.BLOB,
        index=index,
        points=points,
        closed=True,
        stroke_width=ctx.config.stroke_width * (gc.BLOB_WIDTH_MIN + growth),
        uses_attractors=use_attractors,
        symmetry=ctx.symmetry,
        folds=folds,
        smoothing=smoothing,
    )


@layer_generator(
    kind=LayerKind.POLYLINE,
    cutoff=0.65,
    accents=True,
    description="Open concentric rings with positional jitter",
)
def polyline(ctx: GlyphContext, index: int, use_attractors: bool) -> Layer:
    rng, size, center = ctx.rng, ctx.size, ctx.center

    rings = 1 + rand_int(rng, 1, 2)
    verts = rand_int(rng, gc.POLY_MIN_VERTS, gc.POLY_MAX_VERTS)
    base = size * gc.POLY_BASE_MIN + rng() * size * gc.POLY_BASE_SPAN

    raw: list[tuple[float, float]] = []
    for ring in range(rings):
        radius = base + (ring * (size / 2 - base)) / rings
        for i in range(verts):
            angle = i / verts * TAU + rng() * gc.POLY_ANGLE_JITTER
            r = radius * (gc.POLY_RADIUS_MIN + rng() * gc.POLY_RADIUS_SPAN)
            pt = polar_point(center, angle, r)
            if use_attractors:
                pt = ctx.attractors.attract(pt, radius)
            raw.append(pt)

    jittered = [
        (jitter(rng, x, gc.POLY_POINT_JITTER), jitter(rng, y, gc.POLY_POINT_JITTER))
        for x, y in raw
    ]
    points, folds = apply_symmetry(
        ctx, as_points(jittered), lambda: gc.POLY_FOLD_BASE + rand_int(rng, -1, 2)
    )

    return Layer(
        kind=LayerKind.POLYLINE,
        index=index,
        points=points,
        closed=False,
        stroke_width=ctx.config.stroke_width * gc.POLY_WIDTH,
        uses_attractors=use_attractors,
        symmetry=ctx.symmetry,
        folds=folds,
    )


@layer_generator(
    kind=LayerKind.HATCH,
    cutoff=1.0,
    description="Independent short strokes, unaffected by attractors and symmetry",
)
def hatch(ctx: GlyphContext, index: int, use_attractors: bool) -> Layer:
    rng, size = ctx.rng, ctx.size

    count = rand_int(rng, gc.HATCH_MIN_SEGMENTS, gc.HATCH_MAX_SEGMENTS)
    ends: list[tuple[float, float]] = []
    for _ in range(count):
        x1 = rng() * size
        y1 = rng() * size
        length = size * (gc.HATCH_LENGTH_MIN + rng() * gc.HATCH_LENGTH_SPAN)
        angle = rng() * TAU
        ends.append((x1, y1))
        ends.append((x1 + math.cos(angle) * length, y1 + math.sin(angle) * length))

    return Layer(
        kind=LayerKind.HATCH,
        index=index,
        points=as_points(ends),
        closed=False,
        stroke_width=ctx.config.stroke_width * gc.HATCH_WIDTH,
        uses_attractors=False,
    )


def layer_element(layer: Layer, color: str) -> dict[str, Any]:
    d = segments_path(layer.segments) if layer.kind is LayerKind.HATCH else path_from(
        layer.points, closed=layer.closed
    )
    return {
        "tag": "path",
        "d": d,
        "fill": "none",
        "stroke": color,
        "stroke-opacity": f"{layer.opacity:.2f}",
        "stroke-width": f"{layer.stroke_width:.2f}",
    }


def add_accent_dots(ctx: GlyphContext, layer: Layer) -> None:
    """Maybe scatter 2-6 dots in the annulus, optionally clustered on attractors."""
    rng, size, center = ctx.rng, ctx.size, ctx.center
    if rng() >= gc.DOT_PROBABILITY:
        return

    attractors = ctx.attractors.attractors
    inner = size * gc.DOT_RING_INNER
    outer = size * gc.DOT_RING_OUTER
    for _ in range(rand_int(rng, gc.MIN_DOTS, gc.MAX_DOTS)):
        radius = inner + rng() * (outer - inner)
        angle = rng() * TAU
        if layer.uses_attractors and rng() < gc.DOT_BIAS_PROBABILITY:
            att = attractors[math.floor(rng() * len(attractors))]
            angle = att.angle + (rng() - 0.5) * gc.DOT_BIAS_WINDOW
        x, y = polar_point(center, angle, radius)
        dot = Dot(
            cx=x,
            cy=y,
            r=gc.DOT_RADIUS_MIN + rng() * (size * gc.DOT_RADIUS_SPAN),
            opacity=gc.DOT_OPACITY_MIN + rng() * gc.DOT_OPACITY_SPAN,
            layer_index=layer.index,
        )
        ctx.dots.append(dot)
        ctx.elements.append({
            "tag": "circle",
            "cx": f"{dot.cx:.1f}",
            "cy": f"{dot.cy:.1f}",
            "r": f"{dot.r:.2f}",
            "fill": ctx.config.stroke_color,
            "fill-opacity": f"{dot.opacity:.2f}",
        })


def add_spokes(ctx: GlyphContext) -> None:
    """Short radial strokes along some attractor directions."""
    rng, size, center = ctx.rng, ctx.size, ctx.center
    if not ctx.attractors.active or rng() >= gc.SPOKE_PROBABILITY:
        return

    alpha = f"{gc.SPOKE_OPACITY_MIN + rng() * gc.SPOKE_OPACITY_SPAN:.2f}"
    width = f"{ctx.config.stroke_width * gc.SPOKE_WIDTH:.2f}"
    for att in ctx.attractors.attractors:
        if rng() >= gc.SPOKE_PER_ATTRACTOR:
            continue
        start = size * (gc.SPOKE_START_MIN + rng() * gc.SPOKE_START_SPAN)
        end = size * (gc.SPOKE_END_MIN + rng() * gc.SPOKE_END_SPAN)
        x1, y1 = polar_point(center, att.angle, start)
        x2, y2 = polar_point(center, att.angle, end)
        ctx.spokes += 1
        ctx.elements.append({
            "tag": "path",
            "d": f"M{x1:.1f} {y1:.1f} L{x2:.1f} {y2:.1f}",
            "fill": "none",
            "stroke": ctx.config.stroke_color,
            "stroke-opacity": alpha,
            "stroke-width": width,
        })
