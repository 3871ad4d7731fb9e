from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from flatray.utils.tolerance import eq, eq_0
from flatray.utils.vector_operations import (
    normalize_vector,
    rotate90_ccw,
    rotate90_cw,
    vector_cross,
    vector_dot,
    vector_length,
    vector_slope,
)


@dataclass(frozen=True, slots=True)
class Vector:
    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def from_array(values: np.ndarray) -> "Vector":
        return Vector(float(values[0]), float(values[1]))

    @staticmethod
    def from_points(start, end) -> "Vector":
        return Vector(float(end.x) - float(start.x), float(end.y) - float(start.y))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def clone(self) -> "Vector":
        return Vector(self.x, self.y)

    @property
    def length(self) -> float:
        return vector_length(self.as_array())

    @property
    def slope(self) -> float:
        return vector_slope(self.as_array())

    def is_zero(self) -> bool:
        return eq_0(self.x) and eq_0(self.y)

    def equal_to(self, other: "Vector") -> bool:
        return eq(self.x, other.x) and eq(self.y, other.y)

    def dot(self, other: "Vector") -> float:
        return vector_dot(self.as_array(), other.as_array())

    def cross(self, other: "Vector") -> float:
        return vector_cross(self.as_array(), other.as_array())

    def normalize(self) -> "Vector":
        return Vector.from_array(normalize_vector(self.as_array()))

    def multiply(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar)

    def invert(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def rotate90_cw(self) -> "Vector":
        return Vector.from_array(rotate90_cw(self.as_array()))

    def rotate90_ccw(self) -> "Vector":
        return Vector.from_array(rotate90_ccw(self.as_array()))

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector":
        return self.invert()

    def __mul__(self, scalar: float) -> "Vector":
        return self.multiply(scalar)

    __rmul__ = __mul__
