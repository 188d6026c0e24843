"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from glyphsmith.config import settings
from glyphsmith.engine.cache import GlyphCache
from glyphsmith.visual.transform import VisualTransformer
from glyphsmith.visual.vocabulary import GlyphVocabulary


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_glyph_cache() -> GlyphCache:
    return GlyphCache(settings.glyph_options())


@lru_cache(maxsize=1)
def get_vocabulary() -> GlyphVocabulary:
    return GlyphVocabulary.build(settings.glyph_vocabulary, settings.glyph_options())


@lru_cache(maxsize=1)
def get_visual_transformer() -> VisualTransformer:
    return VisualTransformer(cache=get_glyph_cache(), vocabulary=get_vocabulary())
