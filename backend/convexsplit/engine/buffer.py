"""Fixed-capacity vertex buffer used on the per-query hot path."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from convexsplit.engine.errors import HullConstructionFailure


class VertexBuffer:
    """Preallocated ``(capacity, 2)`` array plus a fill count.

    Appending past capacity raises instead of growing.
    """

    __slots__ = ("_data", "_count")

    def __init__(self, capacity: int) -> None:
        self._data = np.empty((capacity, 2), dtype=np.float64)
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, index: int) -> NDArray[np.float64]:
        if not 0 <= index < self._count:
            raise IndexError(f"vertex index {index} out of range ({self._count})")
        return self._data[index]

    def append(self, point: NDArray[np.float64]) -> None:
        if self._count >= len(self._data):
            raise HullConstructionFailure(
                f"vertex buffer overflow (capacity {len(self._data)})"
            )
        self._data[self._count] = point
        self._count += 1

    def view(self) -> NDArray[np.float64]:
        """The filled part of the buffer (shares memory)."""
        return self._data[: self._count]

    def to_array(self) -> NDArray[np.float64]:
        return self._data[: self._count].copy()
