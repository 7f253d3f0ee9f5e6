"""ConvexSplit geometry engine - boundary normalization and convex decomposition."""

from convexsplit.engine.config import DecompositionConfig
from convexsplit.engine.registry import CollisionShape, ShapeKind, get_registry, shape_kind
from convexsplit.engine.transform import Transform2D
from convexsplit.engine.shapes.circle import CircleShape
from convexsplit.engine.shapes.convex_polygon import ConvexPolygonShape

__all__ = [
    "DecompositionConfig",
    "CollisionShape",
    "ShapeKind",
    "get_registry",
    "shape_kind",
    "Transform2D",
    "CircleShape",
    "ConvexPolygonShape",
]
