"""Convex hull via gift wrapping, with degenerate-case rejection.

Input is at most ``max_polygon_vertices`` points in physics units. The points
are welded with the fixed hull-time threshold, then wrapped starting from the
right-most (lowest on ties) point. The result is counterclockwise and strictly
convex: collinear runs resolve to their outermost point.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from convexsplit.engine.buffer import VertexBuffer
from convexsplit.engine.config import DEFAULT_CONFIG, DecompositionConfig
from convexsplit.engine.errors import HullConstructionFailure
from convexsplit.engine.welding import hull_weld_threshold, weld_into_buffer
from convexsplit.utils.geometry import cross

logger = logging.getLogger(__name__)


def _start_index(ps: NDArray[np.float64]) -> int:
    """Right-most point; ties go to the smallest y."""
    i0 = 0
    x0 = ps[0, 0]
    for i in range(1, len(ps)):
        x = ps[i, 0]
        if x > x0 or (x == x0 and ps[i, 1] < ps[i0, 1]):
            i0 = i
            x0 = x
    return i0


def gift_wrap(ps: NDArray[np.float64], max_vertices: int) -> list[int]:
    """Indices into ``ps`` of the hull, counterclockwise from the start point."""
    n = len(ps)
    i0 = _start_index(ps)

    hull: list[int] = []
    ih = i0
    while True:
        if len(hull) >= max_vertices:
            raise HullConstructionFailure(
                f"hull needs more than {max_vertices} vertices"
            )
        hull.append(ih)
        p = ps[ih]

        ie = 0
        for j in range(1, n):
            if ie == ih:
                ie = j
                continue

            r = ps[ie] - p
            v = ps[j] - p
            c = cross(r, v)
            if c < 0.0:
                ie = j

            # Collinear: keep the farther point
            if c == 0.0 and float(v @ v) > float(r @ r):
                ie = j

        ih = ie
        if ie == i0:
            break

    return hull


def build_convex_hull(
    points: NDArray[np.float64],
    config: DecompositionConfig = DEFAULT_CONFIG,
    weld_threshold: float | None = None,
) -> NDArray[np.float64]:
    """Weld, wrap and validate. Returns an ``(m, 2)`` array, ``3 <= m <= max``.

    Raises ``HullConstructionFailure`` when fewer than 3 points survive the
    weld, when the wrap overflows, or when the hull is degenerate.
    """
    if weld_threshold is None:
        weld_threshold = hull_weld_threshold(config)
    max_vertices = config.max_polygon_vertices

    welded = weld_into_buffer(points, weld_threshold, max_vertices)
    if len(welded) < 3:
        raise HullConstructionFailure(
            f"polygon has too few vertices after welding: {len(welded)}"
        )

    ps = welded.view()
    hull = gift_wrap(ps, max_vertices)
    if len(hull) < 3:
        raise HullConstructionFailure(
            f"polygon is degenerate, convex hull has {len(hull)} vertices"
        )

    out = VertexBuffer(max_vertices)
    for idx in hull:
        out.append(ps[idx])
    logger.debug("Hull of %d welded points has %d vertices", len(ps), len(out))
    return out.to_array()
