"""Shared test fixtures."""

from __future__ import annotations

import pytest

from glyphsmith.engine.config import GlyphConfig
from glyphsmith.engine.context import GlyphContext
from glyphsmith.engine.prng import Mulberry32

# Inline word-glyph options, as used for puzzle text
WORD_OPTIONS = {
    "size": 24,
    "stroke_width": 1.5,
    "stroke_color": "currentColor",
    "complexity": 4,
    "symmetry": "radial",
}

PUZZLE_HTML = (
    'All <span class="subject">Apple</span> is '
    '<span class="is-negated">not</span> <span class="subject">Banana</span>'
)


@pytest.fixture
def word_options() -> dict:
    return dict(WORD_OPTIONS)


@pytest.fixture
def puzzle_html() -> str:
    return PUZZLE_HTML


@pytest.fixture
def make_context():
    """Fresh context over a seeded stream with no attractors."""

    def _make(seed: int = 7, layer_count: int = 4, **options) -> GlyphContext:
        cfg = GlyphConfig.from_options(options)
        ctx = GlyphContext(config=cfg, rng=Mulberry32(seed))
        ctx.layer_count = layer_count
        return ctx

    return _make
