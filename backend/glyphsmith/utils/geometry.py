"""Leaf-node geometry helpers. No engine imports.

Point sets are Nx2 float64 arrays of (x, y) in canvas coordinates.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def as_points(points: NDArray[np.float64] | list[tuple[float, float]]) -> NDArray[np.float64]:
    """Coerce to an Nx2 float64 array (empty input → shape (0, 2))."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)


def chaikin(
    points: NDArray[np.float64],
    iterations: int,
    closed: bool = False,
) -> NDArray[np.float64]:
    """Chaikin corner cutting.

    Each consecutive pair (P0, P1) is replaced by Q = 0.75·P0 + 0.25·P1 and
    R = 0.25·P0 + 0.75·P1. For a closed ring the pair (P[n-1], P[0]) is
    included, so n points become n·2^k after k iterations. An open polyline
    of n points becomes 2(n-1) per iteration.
    """
    pts = as_points(points)
    for _ in range(max(0, iterations)):
        if len(pts) < 2:
            break
        if closed:
            p0 = pts
            p1 = np.roll(pts, -1, axis=0)
        else:
            p0 = pts[:-1]
            p1 = pts[1:]
        out = np.empty((2 * len(p0), 2))
        out[0::2] = 0.75 * p0 + 0.25 * p1
        out[1::2] = 0.25 * p0 + 0.75 * p1
        pts = out
    return pts


def mirror_bilateral(points: NDArray[np.float64], size: float) -> NDArray[np.float64]:
    """Append the reflection across the vertical centerline, reversed.

    Output has 2n points and out[2n-1-i] == (size - x_i, y_i), so the path
    stays continuous through the seam.
    """
    pts = as_points(points)
    mirrored = pts.copy()
    mirrored[:, 0] = size - mirrored[:, 0]
    return np.vstack([pts, mirrored[::-1]])


def mirror_radial(points: NDArray[np.float64], folds: int, center: float) -> NDArray[np.float64]:
    """Concatenate ``folds`` copies rotated by k·2π/folds about (center, center)."""
    pts = as_points(points)
    if folds < 1:
        return pts
    dx = pts[:, 0] - center
    dy = pts[:, 1] - center
    step = (math.pi * 2) / folds
    copies = []
    for k in range(folds):
        a = k * step
        cos, sin = math.cos(a), math.sin(a)
        rotated = np.empty_like(pts)
        rotated[:, 0] = center + dx * cos - dy * sin
        rotated[:, 1] = center + dx * sin + dy * cos
        copies.append(rotated)
    return np.vstack(copies)


def polar_point(center: float, angle: float, radius: float) -> tuple[float, float]:
    return (center + math.cos(angle) * radius, center + math.sin(angle) * radius)


def to_polar(x: float, y: float, center: float) -> tuple[float, float]:
    """(angle, radius) of a point relative to (center, center)."""
    dx = x - center
    dy = y - center
    return math.atan2(dy, dx), math.sqrt(dx * dx + dy * dy)


def angular_distance(a: float, b: float) -> float:
    """Shorter arc between two angles, in [0, π]."""
    diff = abs(a - b) % (math.pi * 2)
    return min(diff, math.pi * 2 - diff)


def signed_arc(start: float, end: float) -> float:
    """Signed shortest rotation from ``start`` to ``end``, in [-π, π)."""
    return (end - start + math.pi) % (math.pi * 2) - math.pi


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Compute centroid of a point set."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))
