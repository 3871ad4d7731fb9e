from __future__ import annotations

import math
from dataclasses import dataclass

from flatray.typings.vector import Vector
from flatray.utils.tolerance import eq, lt


@dataclass(frozen=True, slots=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def clone(self) -> "Point":
        return Point(self.x, self.y)

    def equal_to(self, other: "Point") -> bool:
        return eq(self.x, other.x) and eq(self.y, other.y)

    def less_than(self, other: "Point") -> bool:
        """Lexicographic order: x first, y breaks ties."""
        if lt(self.x, other.x):
            return True
        return eq(self.x, other.x) and lt(self.y, other.y)

    def translate(self, vector: Vector) -> "Point":
        return Point(self.x + vector.x, self.y + vector.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def projection_on(self, line) -> "Point":
        offset = line.norm.dot(self - line.pt)
        return self.translate(line.norm.multiply(-offset))

    def on(self, shape) -> bool:
        return shape.contains(self)

    def __sub__(self, other: "Point") -> Vector:
        return Vector.from_points(other, self)

    def __add__(self, vector: Vector) -> "Point":
        return self.translate(vector)
