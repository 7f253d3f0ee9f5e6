"""Boundary segmentation - cut a long boundary into engine-sized polygons.

Chunks are carved greedily from the start. When a full chunk would leave a
small tail (1..remainder_threshold points), the chunk gives back
``remainder_threshold`` vertices so the tail is large enough on its own.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from convexsplit.engine.config import DEFAULT_CONFIG, DecompositionConfig
from convexsplit.engine.errors import SegmentationFailure
from convexsplit.utils.geometry import readonly

logger = logging.getLogger(__name__)

MIN_POLYGON_VERTICES = 3


def segment_sizes(n: int, config: DecompositionConfig = DEFAULT_CONFIG) -> list[int]:
    """Chunk sizes the segmentation rule produces for ``n`` points."""
    sizes: list[int] = []
    i = 0
    while i < n:
        size = min(config.max_polygon_vertices, n - i)
        remaining = n - (i + size)
        if 0 < remaining <= config.remainder_threshold:
            size -= config.remainder_threshold
        if size <= 0:
            raise SegmentationFailure(
                f"cannot segment {n} points: chunk at index {i} collapsed to {size}"
            )
        sizes.append(size)
        i += size
    return sizes


def segment_boundary(
    points: NDArray[np.float64],
    config: DecompositionConfig = DEFAULT_CONFIG,
) -> tuple[NDArray[np.float64], ...]:
    """Split ``points`` into contiguous read-only chunks of 3..max vertices.

    Raises ``SegmentationFailure`` if any chunk falls outside that range;
    nothing is returned in that case.
    """
    n = len(points)
    sizes = segment_sizes(n, config)

    polygons: list[NDArray[np.float64]] = []
    i = 0
    for size in sizes:
        if not MIN_POLYGON_VERTICES <= size <= config.max_polygon_vertices:
            raise SegmentationFailure(
                f"chunk at index {i} has {size} vertices "
                f"(allowed {MIN_POLYGON_VERTICES}..{config.max_polygon_vertices})"
            )
        polygons.append(readonly(points[i : i + size]))
        i += size

    logger.debug("Segmented %d points into %d polygons %s", n, len(polygons), sizes)
    return tuple(polygons)
