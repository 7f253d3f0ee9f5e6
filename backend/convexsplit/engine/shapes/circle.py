"""Circle shape - a single native circle, no decomposition."""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any

from convexsplit.config import settings
from convexsplit.engine.errors import InvalidInputType
from convexsplit.engine.native import NativeShapeFactory, get_default_factory
from convexsplit.engine.registry import ShapeKind, shape_kind
from convexsplit.engine.transform import Transform2D

logger = logging.getLogger(__name__)


def _parse_radius(data: Any) -> float:
    if isinstance(data, bool) or not isinstance(data, numbers.Real):
        raise InvalidInputType(f"circle radius must be a number, got {type(data).__name__}")
    radius = float(data)
    if not math.isfinite(radius) or radius <= 0.0:
        raise InvalidInputType(f"circle radius must be positive, got {radius}")
    return radius


@shape_kind(ShapeKind.CIRCLE, description="Single circle of a given radius")
class CircleShape:
    def __init__(
        self,
        scaling_factor: float | None = None,
        factory: NativeShapeFactory | None = None,
    ) -> None:
        self._scaling_factor = scaling_factor
        self.factory = factory
        self.radius: float | None = None

    @property
    def scaling_factor(self) -> float:
        if self._scaling_factor is not None:
            return self._scaling_factor
        return settings.scaling_factor

    def set_data(self, data: Any) -> None:
        try:
            self.radius = _parse_radius(data)
        except InvalidInputType as e:
            logger.error("Rejected circle data (%s): %s", e.kind, e)
            raise

    def get_data(self) -> float | None:
        return self.radius

    def get_shape_count(self, is_static: bool = False) -> int:
        return 1

    def get_transformed_shape(self, index: int, transform: Transform2D | None = None) -> Any | None:
        if index != 0 or self.radius is None:
            logger.warning("Circle query failed: index %d, configured=%s", index, self.radius is not None)
            return None
        transform = transform or Transform2D.identity()
        sf = self.scaling_factor
        radius = self.radius * transform.basis_scale() / sf
        offset = (transform.origin[0] / sf, transform.origin[1] / sf)
        if radius <= 0.0:
            logger.warning("Circle produced no shape: transformed radius %.3g", radius)
            return None
        factory = self.factory or get_default_factory()
        return factory.circle(radius, offset)
