"""2D affine transform supplied per shape query."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Transform2D:
    """Basis columns ``x`` and ``y`` plus a translation ``origin``.

    ``xform(p) = x * p.x + y * p.y + origin``
    """

    x: tuple[float, float] = (1.0, 0.0)
    y: tuple[float, float] = (0.0, 1.0)
    origin: tuple[float, float] = (0.0, 0.0)

    @classmethod
    def identity(cls) -> Transform2D:
        return cls()

    @classmethod
    def from_components(
        cls,
        rotation: float = 0.0,
        scale: tuple[float, float] = (1.0, 1.0),
        translation: tuple[float, float] = (0.0, 0.0),
    ) -> Transform2D:
        """Build from a rotation (radians), per-axis scale and translation."""
        c, s = math.cos(rotation), math.sin(rotation)
        return cls(
            x=(c * scale[0], s * scale[0]),
            y=(-s * scale[1], c * scale[1]),
            origin=(float(translation[0]), float(translation[1])),
        )

    @property
    def matrix(self) -> NDArray[np.float64]:
        """2x2 basis with ``x`` and ``y`` as columns."""
        return np.array([[self.x[0], self.y[0]], [self.x[1], self.y[1]]], dtype=np.float64)

    def xform(self, points: NDArray[np.float64]) -> NDArray[np.float64]:
        """Apply to an ``(N, 2)`` array."""
        return points @ self.matrix.T + np.asarray(self.origin, dtype=np.float64)

    def basis_scale(self) -> float:
        """Geometric mean of the axis lengths (uniform scale estimate)."""
        return math.sqrt(abs(float(np.linalg.det(self.matrix))))
