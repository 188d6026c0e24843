"""Attractor field — angular directions that pull nearby points toward them."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from glyphsmith.engine import glyph_constants as gc
from glyphsmith.engine.config import GlyphConfig
from glyphsmith.engine.prng import Mulberry32, rand_int, shuffle
from glyphsmith.utils.geometry import angular_distance, polar_point, signed_arc, to_polar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attractor:
    angle: float  # radians
    strength: float


@dataclass(frozen=True)
class AttractorField:
    attractors: tuple[Attractor, ...] = ()
    center: float = 64.0
    influence: float = 0.4

    @classmethod
    def build(cls, rng: Mulberry32, config: GlyphConfig) -> AttractorField:
        """Roll for activation, then pick cardinal and diagonal attractors.

        Draw order: activation roll, then (only when active) cardinal count,
        cardinal shuffle, diagonal roll, [diagonal count], diagonal shuffle,
        one strength per chosen angle.
        """
        empty = cls(center=config.center, influence=config.attractor_influence)
        if rng() >= config.attractor_strength:
            return empty

        num_cardinals = rand_int(rng, gc.MIN_CARDINALS, gc.MAX_CARDINALS)
        cardinals = shuffle(rng, gc.CARDINAL_ANGLES)[:num_cardinals]

        num_diagonals = (
            rand_int(rng, gc.MIN_DIAGONALS, gc.MAX_DIAGONALS)
            if rng() < gc.DIAGONAL_PROBABILITY
            else 0
        )
        # The diagonal shuffle is drawn even when none are kept.
        diagonals = shuffle(rng, gc.DIAGONAL_ANGLES)[:num_diagonals]

        attractors = tuple(
            Attractor(angle=angle, strength=gc.ATTRACTOR_STRENGTH_MIN + rng() * gc.ATTRACTOR_STRENGTH_SPAN)
            for angle in [*cardinals, *diagonals]
        )
        logger.debug(
            "Attractor field: %d cardinal, %d diagonal", len(cardinals), len(diagonals)
        )
        return cls(attractors=attractors, center=config.center, influence=config.attractor_influence)

    @property
    def active(self) -> bool:
        return len(self.attractors) > 0

    def __len__(self) -> int:
        return len(self.attractors)

    def nearest(self, angle: float) -> tuple[Attractor | None, float]:
        """Closest attractor by wrap-aware angular distance (first wins ties)."""
        best: Attractor | None = None
        best_diff = math.pi * 2
        for att in self.attractors:
            diff = angular_distance(angle, att.angle)
            if diff < best_diff:
                best_diff = diff
                best = att
        return best, best_diff

    def attract(self, point: tuple[float, float], base_radius: float) -> tuple[float, float]:
        """Pull a point toward its nearest attractor. Pure; no draws."""
        if not self.attractors:
            return point

        x, y = point
        angle, radius = to_polar(x, y, self.center)
        att, diff = self.nearest(angle)
        if att is None or diff >= gc.ATTRACTOR_RANGE:
            return point

        pull = self.influence * att.strength * (1 - diff / gc.ATTRACTOR_RANGE)
        target_radius = base_radius + (radius - base_radius) * (1 + pull * gc.RADIAL_PUSH)
        target_angle = angle + signed_arc(angle, att.angle) * pull * gc.ANGULAR_PULL
        return polar_point(self.center, target_angle, target_radius)

