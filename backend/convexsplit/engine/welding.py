"""Vertex welding - drop points closer than a threshold to one already kept.

Two thresholds, one per call site:

* ingestion time, in world units: ``0.5 * linear_slop * scaling_factor``
* hull time, in physics units: ``0.5 * linear_slop``
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from convexsplit.engine.buffer import VertexBuffer
from convexsplit.engine.config import DEFAULT_CONFIG, DecompositionConfig


def ingestion_weld_threshold(
    scaling_factor: float,
    config: DecompositionConfig = DEFAULT_CONFIG,
) -> float:
    return 0.5 * config.linear_slop * scaling_factor


def hull_weld_threshold(config: DecompositionConfig = DEFAULT_CONFIG) -> float:
    return 0.5 * config.linear_slop


def weld_points(points: NDArray[np.float64], threshold: float) -> NDArray[np.float64]:
    """Order-sensitive O(n²) weld. First occurrence wins."""
    limit = threshold * threshold
    kept: list[NDArray[np.float64]] = []
    for v in points:
        if all(float(np.sum((v - k) ** 2)) >= limit for k in kept):
            kept.append(v)
    if not kept:
        return np.empty((0, 2), dtype=np.float64)
    return np.array(kept, dtype=np.float64)


def weld_into_buffer(
    points: NDArray[np.float64],
    threshold: float,
    capacity: int,
) -> VertexBuffer:
    """Same weld as :func:`weld_points`, but only the first ``capacity``
    points are read and the survivors land in a fixed-size buffer."""
    limit = threshold * threshold
    buf = VertexBuffer(capacity)
    for v in points[:capacity]:
        unique = True
        for j in range(len(buf)):
            if float(np.sum((v - buf[j]) ** 2)) < limit:
                unique = False
                break
        if unique:
            buf.append(v)
    return buf
