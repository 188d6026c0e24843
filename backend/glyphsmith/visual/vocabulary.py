"""Read-only word → glyph table built once from a static vocabulary."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from glyphsmith.engine.cache import normalize_seed
from glyphsmith.engine.generator import generate_batch

logger = logging.getLogger(__name__)


class GlyphVocabulary(Mapping[str, str]):
    """Immutable mapping from lower-cased word to data URL."""

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries = MappingProxyType(dict(entries or {}))

    @classmethod
    def build(cls, words: Iterable[str], options: Mapping[str, Any] | None = None) -> GlyphVocabulary:
        keys = [str(normalize_seed(w.strip())) for w in words if w and w.strip()]
        vocab = cls(generate_batch(keys, options))
        logger.info("Glyph vocabulary built: %d words", len(vocab))
        return vocab

    def lookup(self, word: str) -> str | None:
        return self._entries.get(str(normalize_seed(word.strip())))

    def __getitem__(self, word: str) -> str:
        return self._entries[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
