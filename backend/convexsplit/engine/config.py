"""Decomposition configuration - physics engine limits and tolerances."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DecompositionConfig:
    """Engine constants the pipeline is tuned against (physics units, meters)."""

    # Native polygon vertex limit
    max_polygon_vertices: int = 8

    # Collision tolerance of the engine
    linear_slop: float = 0.005

    # Implicit skin the engine pads around every polygon
    polygon_radius: float = 2 * 0.005

    # A chunk leaving this many points or fewer gives 4 back
    remainder_threshold: int = 4

    # Zero-area clamp for orientation detection
    area_epsilon: float = 1e-6

    # Smallest area a native polygon may have (physics units²)
    polygon_area_epsilon: float = 1e-9


DEFAULT_CONFIG = DecompositionConfig()
