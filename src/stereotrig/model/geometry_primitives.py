"""
Geometric Primitives for the scene.

Coordinate frame (same as the rendered world):
    X: lateral, positive = right of the vehicle centerline
    Y: up
    Z: forward, along the road
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector3:
    """
    An immutable position / displacement in 3D space.
    """
    x: float
    y: float
    z: float

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vector3:
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    @property
    def horizontal_magnitude(self) -> float:
        """Length of the projection onto the ground (XZ) plane."""
        return math.sqrt(self.x**2 + self.z**2)

    def with_xz(self, x: float, z: float) -> Vector3:
        """Copy with a new ground position, keeping the height."""
        return Vector3(x, self.y, z)

    def mirrored_x(self) -> Vector3:
        """Reflection across the x = 0 plane."""
        return Vector3(-self.x, self.y, self.z)

    def distance_to(self, other: Vector3) -> float:
        return (other - self).magnitude

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_tuple(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z
