"""Shared test fixtures."""

from __future__ import annotations

import math

import numpy as np
import pytest


# Clockwise in y-up axes; the engine wants it reversed
SQUARE_CW = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)]
SQUARE_CCW = [(10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0)]

# Square around the local origin, so every vertex survives the skin offset
CENTERED_SQUARE = [(-50.0, -50.0), (-50.0, 50.0), (50.0, 50.0), (50.0, -50.0)]


def regular_polygon(n: int, radius: float = 100.0, center=(0.0, 0.0)) -> np.ndarray:
    """``n`` points on a circle, counterclockwise, starting at angle 0."""
    angles = [2 * math.pi * k / n for k in range(n)]
    return np.array(
        [(center[0] + radius * math.cos(a), center[1] + radius * math.sin(a)) for a in angles]
    )


class FakeShape:
    def __init__(self, vertices) -> None:
        self.vertices = [tuple(v) for v in vertices]
        self.body = None

    def get_vertices(self):
        return self.vertices


class RecordingFactory:
    """Native factory stand-in that records every call."""

    def __init__(self, reject: bool = False, drop_vertex: bool = False) -> None:
        self.reject = reject
        self.drop_vertex = drop_vertex
        self.polygons: list[tuple[np.ndarray, float]] = []
        self.circles: list[tuple[float, tuple[float, float]]] = []
        self.released: list[object] = []

    def polygon(self, vertices, radius):
        self.polygons.append((np.array(vertices), radius))
        if self.reject:
            raise RuntimeError("engine refused polygon")
        return FakeShape(vertices[:-1] if self.drop_vertex else vertices)

    def circle(self, radius, offset):
        self.circles.append((radius, offset))
        return ("circle", radius, offset)

    def release(self, shape) -> None:
        self.released.append(shape)


@pytest.fixture
def factory() -> RecordingFactory:
    return RecordingFactory()


@pytest.fixture
def square_cw() -> list[tuple[float, float]]:
    return list(SQUARE_CW)


@pytest.fixture
def centered_square() -> list[tuple[float, float]]:
    return list(CENTERED_SQUARE)
