"""Glyph generator — seed + options → deterministic abstract SVG.

The stream is a single strictly-ordered cursor. Draws happen in this order:

1. Layer-count jitter: ``rand_int(-1, 2)`` added to ``complexity``, clamped to [2, 12].
2. Attractor field (see ``AttractorField.build``): the activation roll is
   always drawn; the selection draws follow only when active.
3. Symmetry coin flip, skipped entirely when the requested mode is ``none``.
4. Spokes, only when the field is non-empty: spoke roll, opacity, then per
   attractor a roll and (when kept) start and end radii.
5. Per layer: kind choice, stroke opacity, attractor opt-in roll (only when
   the field is non-empty), the kind's own draws (layers.py), then for blob
   and polyline layers the accent-dot roll and its dots.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from glyphsmith.engine import glyph_constants as gc
from glyphsmith.engine.attractors import Attractor, AttractorField
from glyphsmith.engine.config import GlyphConfig, Symmetry
from glyphsmith.engine.context import Dot, GlyphContext, Layer
from glyphsmith.engine.layers import add_accent_dots, add_spokes, layer_element
from glyphsmith.engine.prng import Mulberry32, rand_int, seed_to_int
from glyphsmith.engine.registry import LayerRegistry, get_registry
from glyphsmith.svg.serializer import encode_as_embeddable, fmt_size, serialize_svg

logger = logging.getLogger(__name__)

Seed = str | int | float


@dataclass(frozen=True)
class GlyphImage:
    """A finished glyph. Never mutated after creation."""

    svg: str
    config: GlyphConfig
    symmetry: Symmetry
    layers: tuple[Layer, ...]
    attractors: tuple[Attractor, ...]
    dots: tuple[Dot, ...]
    spokes: int = 0

    @property
    def data_url(self) -> str:
        return encode_as_embeddable(self.svg)

    @property
    def layer_count(self) -> int:
        return len(self.layers)


def resolve_symmetry(rng: Mulberry32, requested: Symmetry) -> Symmetry:
    """Keep the requested mode half the time, otherwise force bilateral."""
    if requested is Symmetry.NONE:
        return Symmetry.NONE
    return requested if rng() < gc.KEEP_REQUESTED_SYMMETRY else Symmetry.BILATERAL


def generate_image(
    config: GlyphConfig | Mapping[str, Any] | None = None,
    registry: LayerRegistry | None = None,
) -> GlyphImage:
    """Run one full generation. Pure: same config → byte-identical SVG."""
    start = time.perf_counter()
    cfg = config if isinstance(config, GlyphConfig) else GlyphConfig.from_options(config)
    registry = registry or get_registry()

    rng = Mulberry32(seed_to_int(cfg.seed))
    ctx = GlyphContext(config=cfg, rng=rng)

    ctx.layer_count = max(
        gc.MIN_LAYERS,
        min(gc.MAX_LAYERS, cfg.complexity + rand_int(rng, gc.LAYER_JITTER_MIN, gc.LAYER_JITTER_MAX)),
    )
    ctx.attractors = AttractorField.build(rng, cfg)

    if cfg.background:
        s = fmt_size(cfg.size)
        ctx.elements.append({
            "tag": "rect",
            "x": "0",
            "y": "0",
            "width": s,
            "height": s,
            "fill": cfg.background,
        })

    ctx.symmetry = resolve_symmetry(rng, cfg.symmetry)
    add_spokes(ctx)

    for i in range(ctx.layer_count):
        spec = registry.choose(rng())
        lo, hi = spec.opacity
        opacity = lo + rng() * (hi - lo)
        use_attractors = ctx.attractors.active and rng() < gc.LAYER_ATTRACTOR_PROBABILITY

        layer = spec.fn(ctx, i, use_attractors)
        layer.opacity = opacity
        ctx.layers.append(layer)
        ctx.elements.append(layer_element(layer, cfg.stroke_color))

        if spec.accents:
            add_accent_dots(ctx, layer)

    svg = serialize_svg(ctx.elements, cfg.size)
    logger.debug(
        "Glyph %r: %d layers, %d attractors, %s symmetry, %d draws in %.2fms",
        cfg.seed,
        ctx.layer_count,
        len(ctx.attractors),
        ctx.symmetry.value,
        rng.draws,
        (time.perf_counter() - start) * 1000,
    )
    return GlyphImage(
        svg=svg,
        config=cfg,
        symmetry=ctx.symmetry,
        layers=tuple(ctx.layers),
        attractors=ctx.attractors.attractors,
        dots=tuple(ctx.dots),
        spokes=ctx.spokes,
    )


def generate_svg(options: GlyphConfig | Mapping[str, Any] | None = None) -> str:
    return generate_image(options).svg


def generate_embeddable_for_seed(seed: Seed | None, options: Mapping[str, Any] | None = None) -> str:
    """Seed merged into options, rendered, percent-encoded."""
    cfg = GlyphConfig.from_options(options).with_seed(seed)
    return encode_as_embeddable(generate_image(cfg).svg)


def generate_batch(
    seeds: Iterable[Seed],
    options: Mapping[str, Any] | None = None,
) -> dict[Seed, str]:
    """Each seed rendered independently; duplicate seeds collapse to one key."""
    base = GlyphConfig.from_options(options)
    out: dict[Seed, str] = {}
    for seed in seeds:
        if seed in out:
            continue
        out[seed] = encode_as_embeddable(generate_image(base.with_seed(seed)).svg)
    return out
