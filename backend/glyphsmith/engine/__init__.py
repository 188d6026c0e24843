"""GlyphSmith deterministic glyph engine."""

from glyphsmith.engine.attractors import Attractor, AttractorField
from glyphsmith.engine.cache import GlyphCache, normalize_seed
from glyphsmith.engine.config import GlyphConfig, Symmetry
from glyphsmith.engine.generator import (
    GlyphImage,
    generate_batch,
    generate_embeddable_for_seed,
    generate_image,
    generate_svg,
)
from glyphsmith.engine.registry import LayerKind, get_registry
from glyphsmith.svg.serializer import encode_as_embeddable

__all__ = [
    "Attractor",
    "AttractorField",
    "GlyphCache",
    "normalize_seed",
    "GlyphConfig",
    "Symmetry",
    "GlyphImage",
    "generate_batch",
    "generate_embeddable_for_seed",
    "generate_image",
    "generate_svg",
    "LayerKind",
    "get_registry",
    "encode_as_embeddable",
]
