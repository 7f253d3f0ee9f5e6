"""Orientation normalization - make every boundary counterclockwise."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from convexsplit.engine.config import DEFAULT_CONFIG, DecompositionConfig
from convexsplit.utils.geometry import polygon_area

logger = logging.getLogger(__name__)


def make_counterclockwise(
    points: NDArray[np.float64],
    config: DecompositionConfig = DEFAULT_CONFIG,
) -> NDArray[np.float64]:
    """Return ``points`` in counterclockwise order.

    A positive area under the engine convention means the input wound
    clockwise, so the order is reversed. Zero-area input is clamped to
    ``+area_epsilon`` and therefore also reversed.
    """
    area = polygon_area(points, config.area_epsilon)
    if area > 0:
        logger.debug("Boundary of %d points is clockwise (area %.4g), reversing", len(points), area)
        return points[::-1].copy()
    return points.copy()
