"""Native shape construction seam.

The engine-facing factory turns a validated vertex list into a physics shape.
``PymunkShapeFactory`` is the default; tests swap in their own.
"""

from __future__ import annotations

from typing import Any, Protocol

import numpy as np
import pymunk
from numpy.typing import NDArray


class NativeShapeFactory(Protocol):
    def polygon(self, vertices: NDArray[np.float64], radius: float) -> Any: ...

    def circle(self, radius: float, offset: tuple[float, float]) -> Any: ...

    def release(self, shape: Any) -> None: ...


class PymunkShapeFactory:
    """Builds body-less pymunk shapes; the caller attaches them to a body."""

    def polygon(self, vertices: NDArray[np.float64], radius: float) -> pymunk.Poly:
        return pymunk.Poly(None, [(float(x), float(y)) for x, y in vertices], radius=radius)

    def circle(self, radius: float, offset: tuple[float, float]) -> pymunk.Circle:
        return pymunk.Circle(None, radius, offset=offset)

    def release(self, shape: Any) -> None:
        """Detach ``shape`` from its space and body.

        Shapes fresh from :meth:`polygon` have neither, so this is a no-op
        for them and garbage collection frees the shape.
        """
        if shape.space is not None:
            shape.space.remove(shape)
        if shape.body is not None:
            shape.body = None


_default_factory: NativeShapeFactory = PymunkShapeFactory()


def get_default_factory() -> NativeShapeFactory:
    return _default_factory
