"""Shape kind registry - each collision shape kind is registered via decorator.

Usage:
    @shape_kind(ShapeKind.CONVEX_POLYGON, description="Convex decomposition of a point loop")
    class ConvexPolygonShape:
        ...

A shape kind is anything satisfying :class:`CollisionShape`; there is no
common base class.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from convexsplit.engine.transform import Transform2D

logger = logging.getLogger(__name__)


class ShapeKind(str, enum.Enum):
    CONVEX_POLYGON = "convex_polygon"
    CIRCLE = "circle"


class CollisionShape(Protocol):
    kind: ShapeKind

    def set_data(self, data: Any) -> None: ...

    def get_data(self) -> Any: ...

    def get_shape_count(self, is_static: bool = False) -> int: ...

    def get_transformed_shape(self, index: int, transform: Transform2D) -> Any | None: ...


@dataclass
class ShapeKindSpec:
    kind: ShapeKind
    factory: Callable[..., CollisionShape]
    description: str = ""


class ShapeRegistry:
    """Registry of shape kinds."""

    def __init__(self) -> None:
        self._kinds: dict[ShapeKind, ShapeKindSpec] = {}

    def register(self, spec: ShapeKindSpec) -> None:
        if spec.kind in self._kinds:
            raise ValueError(f"Duplicate shape kind: {spec.kind.value}")
        self._kinds[spec.kind] = spec
        logger.debug("Registered shape kind %s", spec.kind.value)

    def get(self, kind: ShapeKind | str) -> ShapeKindSpec:
        return self._kinds[ShapeKind(kind)]

    def create(self, kind: ShapeKind | str, **kwargs: Any) -> CollisionShape:
        return self.get(kind).factory(**kwargs)

    def all(self) -> list[ShapeKindSpec]:
        return sorted(self._kinds.values(), key=lambda s: s.kind.value)

    @property
    def count(self) -> int:
        return len(self._kinds)


# Module-level singleton
_registry = ShapeRegistry()


def get_registry() -> ShapeRegistry:
    return _registry


def shape_kind(kind: ShapeKind, *, description: str = ""):
    """Class decorator registering a shape kind."""

    def decorator(cls):
        cls.kind = kind
        _registry.register(ShapeKindSpec(kind=kind, factory=cls, description=description))
        return cls

    return decorator
