"""Swap subject words in puzzle HTML for inline glyph images.

Subjects are marked up as ``<span class="subject">word</span>``. In visual
mode each span's text becomes an ``<img>`` whose source is the word's glyph.
A word whose glyph cannot be produced stays as plain text.
"""

from __future__ import annotations

import html
import logging
import re
from collections.abc import Mapping
from typing import Any

from glyphsmith.engine.cache import GlyphCache
from glyphsmith.visual.vocabulary import GlyphVocabulary

logger = logging.getLogger(__name__)

_SUBJECT_SPAN = re.compile(r'(<span class="subject">)(.*?)(</span>)', re.DOTALL)
_TAG = re.compile(r"<[^>]+>")

IMG_STYLE = "display: inline-block; width: 1.2em; height: 1.2em; vertical-align: middle; margin: 0 2px;"

# Word glyphs are small inline symbols.
WORD_GLYPH_OPTIONS: dict[str, Any] = {
    "size": 24,
    "stroke_width": 1.5,
    "stroke_color": "currentColor",
    "complexity": 4,
    "symmetry": "radial",
}


def _text_content(fragment: str) -> str:
    return html.unescape(_TAG.sub("", fragment)).strip()


class VisualTransformer:
    """Replaces subject spans with glyph images, memoized per lower-cased word."""

    def __init__(
        self,
        cache: GlyphCache | None = None,
        vocabulary: GlyphVocabulary | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        self.cache = cache if cache is not None else GlyphCache(options or WORD_GLYPH_OPTIONS)
        self.vocabulary = vocabulary if vocabulary is not None else GlyphVocabulary()
        self._images: dict[str, str] = {}

    def transform(self, value: str | list[str] | None, visual_mode: bool = False) -> str:
        text = " ".join(value) if isinstance(value, list) else (value or "")
        if not text or not visual_mode:
            return text
        try:
            return _SUBJECT_SPAN.sub(self._replace_span, text)
        except Exception as e:
            logger.warning("Visual transform failed, returning original text: %s", e)
            return text

    def glyph_image(self, word: str) -> str | None:
        """``<img>`` markup for a word, or None when its glyph cannot be made."""
        key = word.lower()
        cached = self._images.get(key)
        if cached is not None:
            return cached
        try:
            src = self.vocabulary.lookup(word) or self.cache.get_or_generate(word)
        except Exception as e:
            logger.warning("Glyph generation failed for %r: %s", word, e)
            return None
        img = (
            f'<img src="{html.escape(src, quote=True)}" alt="{html.escape(word, quote=True)}"'
            f' style="{IMG_STYLE}" class="glyph-symbol" />'
        )
        self._images[key] = img
        return img

    def _replace_span(self, match: re.Match[str]) -> str:
        word = _text_content(match.group(2))
        if not word:
            return match.group(0)
        img = self.glyph_image(word)
        if img is None:
            return match.group(0)
        return f"{match.group(1)}{img}{match.group(3)}"
