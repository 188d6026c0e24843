"""Seed expansion and the pseudo-random stream. No engine imports.

All arithmetic emulates unsigned 32-bit integers: every multiply and add is
masked back to 32 bits so the stream is identical on every platform.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_TWO_POW_32 = 4294967296.0

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
MULBERRY_INCREMENT = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a * b."""
    return (a * b) & _MASK32


def hash_seed(text: str) -> int:
    """32-bit FNV-1a over the UTF-16 code units of ``text``."""
    h = FNV_OFFSET_BASIS
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = _imul(h, FNV_PRIME)
    return h


def seed_to_int(seed: str | int | float) -> int:
    """Numbers are used directly (wrapped to 32 bits); anything else is hashed."""
    if isinstance(seed, bool):
        return int(seed)
    if isinstance(seed, int):
        return seed & _MASK32
    if isinstance(seed, float):
        if not math.isfinite(seed):
            return 0
        # Floor, not trunc: the stream adds its increment before truncating,
        # so -1.5 must land on the same state as -2.
        return math.floor(seed) & _MASK32
    return hash_seed(str(seed))


class Mulberry32:
    """Mulberry32 generator. Calling the instance returns the next float in [0, 1)."""

    __slots__ = ("_state", "draws")

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK32
        self.draws = 0

    def __call__(self) -> float:
        self._state = (self._state + MULBERRY_INCREMENT) & _MASK32
        self.draws += 1
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32

    @property
    def state(self) -> int:
        return self._state


def rand_int(rng: Mulberry32, lo: int, hi: int) -> int:
    """Uniform integer in [lo, hi], one draw."""
    return math.floor(rng() * (hi - lo + 1)) + lo


def shuffle(rng: Mulberry32, items: Sequence[T]) -> list[T]:
    """Fisher-Yates from the end. Returns a new list; len(items) - 1 draws."""
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = math.floor(rng() * (i + 1))
        out[i], out[j] = out[j], out[i]
    return out


def jitter(rng: Mulberry32, value: float, amount: float) -> float:
    return value + (rng() * 2 - 1) * amount
