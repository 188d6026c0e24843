"""Glyph cache — memoizes embeddable glyphs per normalized seed.

One cache instance is meant to serve one fixed set of options. Entries are
never evicted or invalidated: generation is a pure function of (seed,
options), so a stored entry is always the right answer for that instance.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from glyphsmith.engine.config import normalize_seed_value
from glyphsmith.engine.generator import Seed, generate_embeddable_for_seed

logger = logging.getLogger(__name__)

GlyphFn = Callable[[Seed, Mapping[str, Any]], str]


def normalize_seed(seed: Seed | None) -> Seed:
    """Case-insensitive string form, or the numeric value; empty → fallback seed."""
    value = normalize_seed_value(seed)
    return value.lower() if isinstance(value, str) else value


class GlyphCache:
    """Thread-safe get-or-generate memo keyed by normalized seed."""

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        generator: GlyphFn = generate_embeddable_for_seed,
    ) -> None:
        self.options: dict[str, Any] = dict(options or {})
        self._generator = generator
        self._entries: dict[Seed, str] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get_or_generate(self, seed: Seed | None) -> str:
        """Return the cached glyph for ``seed``, generating it on first use.

        The canonical glyph is rendered from the normalized seed, so "Apple"
        and "apple" share one image regardless of which is asked for first.
        """
        key = normalize_seed(seed)
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self.hits += 1
                return cached
            self.misses += 1
            result = self._generator(key, self.options)
            self._entries[key] = result
            logger.debug("Cached glyph for %r (%d entries)", key, len(self._entries))
            return result

    def get_many(self, seeds: Iterable[Seed]) -> dict[Seed, str]:
        """Batch path through the cache; keys are the seeds as given."""
        return {seed: self.get_or_generate(seed) for seed in seeds}

    def __contains__(self, seed: object) -> bool:
        return normalize_seed(seed) in self._entries  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._entries)
