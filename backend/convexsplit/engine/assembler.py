"""Shape assembly - transform a stored polygon and hand it to the engine."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon

from convexsplit.engine.config import DEFAULT_CONFIG, DecompositionConfig
from convexsplit.engine.errors import NativeConstructionRejected
from convexsplit.engine.hull import build_convex_hull
from convexsplit.engine.native import NativeShapeFactory, get_default_factory
from convexsplit.engine.transform import Transform2D
from convexsplit.utils.geometry import is_strictly_convex

logger = logging.getLogger(__name__)


def to_physics_units(points: NDArray[np.float64], scaling_factor: float) -> NDArray[np.float64]:
    return points / scaling_factor


def transformed_hull(
    points: NDArray[np.float64],
    transform: Transform2D,
    scaling_factor: float,
    config: DecompositionConfig = DEFAULT_CONFIG,
) -> NDArray[np.float64]:
    """Caller transform, then world → physics units, then hull."""
    world = transform.xform(points)
    return build_convex_hull(to_physics_units(world, scaling_factor), config)


def validate_hull(hull: NDArray[np.float64], config: DecompositionConfig = DEFAULT_CONFIG) -> None:
    """The checks the engine applies before accepting a polygon."""
    if not 3 <= len(hull) <= config.max_polygon_vertices:
        raise NativeConstructionRejected(f"engine polygon cannot have {len(hull)} vertices")
    poly = Polygon(hull)
    if not poly.is_valid:
        raise NativeConstructionRejected("hull is not a valid simple polygon")
    if poly.area <= config.polygon_area_epsilon:
        raise NativeConstructionRejected(f"hull area {poly.area:.3g} is too small")
    if not is_strictly_convex(hull):
        raise NativeConstructionRejected("hull is not strictly convex and counterclockwise")


def assemble_polygon(
    hull: NDArray[np.float64],
    config: DecompositionConfig = DEFAULT_CONFIG,
    factory: NativeShapeFactory | None = None,
) -> Any:
    """Build the native polygon or raise ``NativeConstructionRejected``.

    Anything the factory produced before failing is released.
    """
    factory = factory or get_default_factory()
    validate_hull(hull, config)

    try:
        shape = factory.polygon(hull, config.polygon_radius)
    except Exception as e:
        raise NativeConstructionRejected(f"native polygon construction failed: {e}") from e
    if shape is None:
        raise NativeConstructionRejected("native polygon construction returned nothing")

    if not _matches(shape, hull):
        factory.release(shape)
        raise NativeConstructionRejected("native polygon dropped vertices")
    return shape


def _matches(shape: Any, hull: NDArray[np.float64]) -> bool:
    """The engine kept every vertex we gave it (pymunk re-hulls silently)."""
    get_vertices = getattr(shape, "get_vertices", None)
    if get_vertices is None:
        return True
    return len(get_vertices()) == len(hull)
