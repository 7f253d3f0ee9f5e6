"""Skin offset - pull vertices in by half the engine's polygon radius.

The engine pads every polygon outward; shrinking the authored geometry first
keeps the collision silhouette where the author drew it.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from convexsplit.engine.config import DEFAULT_CONFIG, DecompositionConfig
from convexsplit.engine.errors import DegenerateSkinOffset


def skin_radius(scaling_factor: float, config: DecompositionConfig = DEFAULT_CONFIG) -> float:
    """Engine polygon radius expressed in world units."""
    return config.polygon_radius * scaling_factor


def remove_polygon_skin(points: NDArray[np.float64], radius: float) -> NDArray[np.float64]:
    """Scale each point toward the origin by ``(|p| - radius/2) / |p|``."""
    lengths = np.hypot(points[:, 0], points[:, 1])
    if np.any(lengths == 0.0):
        idx = int(np.flatnonzero(lengths == 0.0)[0])
        raise DegenerateSkinOffset(f"vertex {idx} sits on the shape origin")
    factors = (lengths - radius / 2.0) / lengths
    return points * factors[:, np.newaxis]
