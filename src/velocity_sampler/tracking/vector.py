"""Three-component vector used for sampled positions and velocities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D float vector with component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vector3:
        """Return the zero vector."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_planar(cls, point: Sequence[float]) -> Vector3:
        """Lift a planar (x, y) point onto the z = 0 plane."""
        x, y = point
        return cls(float(x), float(y), 0.0)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vector3:
        """Build a vector from the first three entries of an array."""
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> np.ndarray:
        """Return the components as a float64 array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @property
    def xy(self) -> tuple[float, float]:
        """Projection onto the x/y plane."""
        return self.x, self.y

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> Vector3:
        return Vector3(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Vector3:
        return Vector3(self.x / scale, self.y / scale, self.z / scale)
