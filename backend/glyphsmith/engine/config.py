"""Glyph configuration — recognised options, defaults and sanitising merge."""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

logger = logging.getLogger(__name__)

FALLBACK_SEED = "0"


class Symmetry(str, enum.Enum):
    NONE = "none"
    BILATERAL = "bilateral"
    RADIAL = "radial"


@dataclass(frozen=True)
class GlyphConfig:
    """Every option has a default; instances never carry unresolved values."""

    # Square viewBox / image size
    size: float = 128.0
    stroke_width: float = 1.8
    stroke_color: str = "currentColor"
    # Empty string = transparent background
    background: str = ""
    # 1..10, drives the layer count
    complexity: int = 6
    symmetry: Symmetry = Symmetry.RADIAL
    seed: str | int | float = FALLBACK_SEED
    # Probability the attractor field is active at all
    attractor_strength: float = 0.6
    # Magnitude of the pull an active attractor exerts
    attractor_influence: float = 0.4

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None, **overrides: Any) -> GlyphConfig:
        """Overlay recognised options on the defaults. Bad values fall back, never raise."""
        merged: dict[str, Any] = {}
        for source in (options or {}, overrides):
            for key, value in source.items():
                name = _ALIASES.get(key, key)
                if name not in _FIELD_NAMES:
                    logger.debug("Ignoring unknown glyph option %r", key)
                    continue
                if value is None:
                    continue
                merged[name] = value
        return _sanitize(merged)

    def with_seed(self, seed: str | int | float | None) -> GlyphConfig:
        return replace(self, seed=normalize_seed_value(seed))

    @property
    def center(self) -> float:
        return self.size / 2


_FIELD_NAMES = {f.name for f in fields(GlyphConfig)}

# camelCase keys used by browser callers
_ALIASES = {
    "strokeWidth": "stroke_width",
    "fg": "stroke_color",
    "strokeColor": "stroke_color",
    "bg": "background",
    "backgroundColor": "background",
    "canvasSize": "size",
    "symmetryMode": "symmetry",
    "attractorStrength": "attractor_strength",
    "attractorInfluence": "attractor_influence",
}

DEFAULTS = GlyphConfig()


def normalize_seed_value(seed: Any) -> str | int | float:
    """Empty or absent seeds map to the fallback seed; numbers and strings pass through."""
    if seed is None:
        return FALLBACK_SEED
    if isinstance(seed, (int, float)) and not isinstance(seed, bool):
        return seed if math.isfinite(seed) else FALLBACK_SEED
    text = str(seed)
    return text if text else FALLBACK_SEED


def _positive(value: Any, default: float) -> float:
    try:
        num = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(num) or num <= 0:
        return default
    return num


def _unit(value: Any, default: float) -> float:
    try:
        num = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(num):
        return default
    return min(1.0, max(0.0, num))


def _complexity(value: Any, default: int) -> int:
    try:
        num = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(num):
        return default
    return int(min(10, max(1, round(num))))


def _symmetry(value: Any, default: Symmetry) -> Symmetry:
    if isinstance(value, Symmetry):
        return value
    try:
        return Symmetry(str(value).lower())
    except ValueError:
        logger.debug("Unknown symmetry %r, using %s", value, default.value)
        return default


def _sanitize(raw: dict[str, Any]) -> GlyphConfig:
    d = DEFAULTS
    return GlyphConfig(
        size=_positive(raw.get("size", d.size), d.size),
        stroke_width=_positive(raw.get("stroke_width", d.stroke_width), d.stroke_width),
        stroke_color=str(raw.get("stroke_color") or d.stroke_color),
        background=str(raw.get("background") or ""),
        complexity=_complexity(raw.get("complexity", d.complexity), d.complexity),
        symmetry=_symmetry(raw.get("symmetry", d.symmetry), d.symmetry),
        seed=normalize_seed_value(raw.get("seed", d.seed)),
        attractor_strength=_unit(raw.get("attractor_strength", d.attractor_strength), d.attractor_strength),
        attractor_influence=_unit(
            raw.get("attractor_influence", d.attractor_influence), d.attractor_influence
        ),
    )
