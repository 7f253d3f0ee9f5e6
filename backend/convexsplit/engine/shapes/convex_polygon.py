"""Convex polygon shape - an authored point loop split into engine polygons.

Reconfiguration (``set_data``) runs orientation, coarse welding and
segmentation, then swaps in the new immutable polygon tuple in one
assignment. Queries (``get_transformed_shape``) only read that tuple.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from convexsplit.config import settings
from convexsplit.engine.assembler import assemble_polygon, transformed_hull
from convexsplit.engine.config import DEFAULT_CONFIG, DecompositionConfig
from convexsplit.engine.errors import IngestionError, InvalidInputType, QueryError, TooFewPoints
from convexsplit.engine.native import NativeShapeFactory
from convexsplit.engine.orientation import make_counterclockwise
from convexsplit.engine.registry import ShapeKind, shape_kind
from convexsplit.engine.segmentation import segment_boundary
from convexsplit.engine.skin import remove_polygon_skin, skin_radius
from convexsplit.engine.transform import Transform2D
from convexsplit.engine.welding import ingestion_weld_threshold, weld_points
from convexsplit.utils.geometry import as_point_array, readonly

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Committed:
    points: NDArray[np.float64]
    polygons: tuple[NDArray[np.float64], ...]
    # Indices already warned about; lives and dies with this snapshot.
    reported: set[int] = field(default_factory=set, compare=False)


def _empty() -> _Committed:
    return _Committed(points=readonly(np.empty((0, 2))), polygons=())


@shape_kind(ShapeKind.CONVEX_POLYGON, description="Point loop split into convex polygons of at most 8 vertices")
class ConvexPolygonShape:
    def __init__(
        self,
        scaling_factor: float | None = None,
        config: DecompositionConfig = DEFAULT_CONFIG,
        factory: NativeShapeFactory | None = None,
    ) -> None:
        self._scaling_factor = scaling_factor
        self.config = config
        self.factory = factory
        self._state = _empty()
        self._write_lock = threading.Lock()
        self._report_lock = threading.Lock()

    @property
    def scaling_factor(self) -> float:
        if self._scaling_factor is not None:
            return self._scaling_factor
        return settings.scaling_factor

    @property
    def polygons(self) -> tuple[NDArray[np.float64], ...]:
        return self._state.polygons

    # --- Reconfiguration ---

    def set_data(self, data: Any) -> None:
        """Replace the shape with a new boundary.

        Raises an ``IngestionError`` and keeps the previous polygons when
        the boundary cannot be decomposed.
        """
        try:
            committed = self._decompose(data)
        except IngestionError as e:
            logger.error("Rejected convex polygon data (%s): %s", e.kind, e)
            raise

        with self._write_lock:
            self._state = committed
        logger.debug(
            "Convex polygon configured: %d points, %d polygons",
            len(committed.points),
            len(committed.polygons),
        )

    def _decompose(self, data: Any) -> _Committed:
        if isinstance(data, (str, bytes)):
            raise InvalidInputType("expected a sequence of 2D points, got text")
        try:
            points = as_point_array(data)
        except (TypeError, ValueError) as e:
            raise InvalidInputType(str(e)) from e
        if len(points) < 3:
            raise TooFewPoints(f"need at least 3 points, got {len(points)}")

        points = make_counterclockwise(points, self.config)
        points = weld_points(points, ingestion_weld_threshold(self.scaling_factor, self.config))
        if len(points) < 3:
            raise TooFewPoints(f"only {len(points)} points left after welding")

        polygons = segment_boundary(points, self.config)
        return _Committed(points=readonly(points), polygons=polygons)

    def get_data(self) -> list[tuple[float, float]]:
        return [(float(x), float(y)) for x, y in self._state.points]

    def get_shape_count(self, is_static: bool = False) -> int:
        if is_static:
            return 1
        return len(self._state.polygons)
    # --- Queries ---

    def hull(self, index: int, transform: Transform2D | None = None) -> NDArray[np.float64]:
        """Engine-ready hull of polygon ``index`` in physics units.

        Raises a ``QueryError`` when the polygon cannot become a valid hull.
        """
        return self._hull(self._state, index, transform)

    def _hull(
        self,
        state: _Committed,
        index: int,
        transform: Transform2D | None,
    ) -> NDArray[np.float64]:
        polygons = state.polygons
        if not 0 <= index < len(polygons):
            raise IndexError(f"polygon index {index} out of range ({len(polygons)})")
        skinned = remove_polygon_skin(polygons[index], skin_radius(self.scaling_factor, self.config))
        return transformed_hull(
            skinned,
            transform or Transform2D.identity(),
            self.scaling_factor,
            self.config,
        )

    def get_transformed_shape(self, index: int, transform: Transform2D | None = None) -> Any | None:
        """Native polygon for ``index`` under ``transform``, or ``None``."""
        state = self._state
        try:
            hull = self._hull(state, index, transform)
            return assemble_polygon(hull, self.config, self.factory)
        except IndexError as e:
            self._report(state, index, "index_out_of_range", e)
            return None
        except QueryError as e:
            self._report(state, index, e.kind, e)
            return None

    def _report(self, state: _Committed, index: int, kind: str, error: Exception) -> None:
        """Warn once per index until the next reconfiguration."""
        with self._report_lock:
            first = index not in state.reported
            state.reported.add(index)
        if first:
            logger.warning("Polygon %d produced no shape (%s): %s", index, kind, error)
        else:
            logger.debug("Polygon %d still failing (%s)", index, kind)
