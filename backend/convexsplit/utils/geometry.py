"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def ensure_non_zero(value: float, epsilon: float) -> float:
    """Push ``value`` at least ``epsilon`` away from zero, keeping its sign.

    An exact ``0.0`` becomes ``+epsilon``; ``-0.0`` becomes ``-epsilon``.
    """
    if abs(value) < epsilon:
        return math.copysign(epsilon, value)
    return value


def polygon_area(points: NDArray[np.float64], epsilon: float = 1e-6) -> float:
    """Closed-loop shoelace area with the engine's sign convention.

    Sums ``x_j*y_i - x_i*y_j`` over consecutive pairs, wrapping around.
    Positive = clockwise, negative = counterclockwise (y-up axes).
    The raw sum is clamped away from zero before halving.
    """
    x = points[:, 0]
    y = points[:, 1]
    xj = np.roll(x, -1)
    yj = np.roll(y, -1)
    total = float(np.sum(xj * y - x * yj))
    return ensure_non_zero(total, epsilon) / 2.0


def cross(r: NDArray[np.float64], v: NDArray[np.float64]) -> float:
    """2D cross product ``r.x*v.y - r.y*v.x``."""
    return float(r[0] * v[1] - r[1] * v[0])


def is_strictly_convex(points: NDArray[np.float64]) -> bool:
    """True if every turn of the closed loop is a strict left turn (CCW)."""
    n = len(points)
    if n < 3:
        return False
    for i in range(n):
        a = points[i]
        b = points[(i + 1) % n]
        c = points[(i + 2) % n]
        if cross(b - a, c - b) <= 0.0:
            return False
    return True


def as_point_array(points) -> NDArray[np.float64]:
    """Coerce a sequence of (x, y) pairs into an ``(N, 2)`` float64 array.

    Raises ``ValueError`` / ``TypeError`` for anything that is not a flat list
    of finite 2D coordinates.
    """
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) point list, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("point list contains non-finite coordinates")
    return arr


def readonly(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return a private read-only copy of ``points``."""
    out = np.array(points, dtype=np.float64, copy=True)
    out.flags.writeable = False
    return out
