from __future__ import annotations

from typing import List

from flatray.errors import DegenerateGeometryError, InvalidArgumentError, UnsupportedShapeError
from flatray.typings.point import Point
from flatray.typings.vector import Vector
from flatray.utils.tolerance import eq_0


class Line:
    """Infinite line through ``pt`` perpendicular to the unit normal ``norm``."""

    __slots__ = ("pt", "norm")

    def __init__(self, pt: Point, norm: Vector) -> None:
        if not isinstance(pt, Point) or not isinstance(norm, Vector):
            raise InvalidArgumentError("Line requires a Point and a normal Vector")
        if norm.is_zero():
            raise DegenerateGeometryError("Line normal must not be the zero vector")
        self.pt: Point = pt.clone()
        self.norm: Vector = norm.normalize()

    @staticmethod
    def through(start: Point, end: Point) -> "Line":
        direction = end - start
        if direction.is_zero():
            raise DegenerateGeometryError("Cannot build a line through coincident points")
        return Line(start, direction.rotate90_ccw())

    def clone(self) -> "Line":
        return Line(self.pt, self.norm)

    @property
    def slope(self) -> float:
        return self.norm.rotate90_cw().slope

    def contains(self, point: Point) -> bool:
        if self.pt.equal_to(point):
            return True
        return eq_0(self.norm.dot(point - self.pt))

    def intersect(self, shape) -> List[Point]:
        if isinstance(shape, Line):
            return self._intersect_line(shape)
        intersected_by_line = getattr(shape, "intersected_by_line", None)
        if intersected_by_line is None:
            raise UnsupportedShapeError(f"Cannot intersect a line with {type(shape).__name__}")
        return intersected_by_line(self)

    def _intersect_line(self, other: "Line") -> List[Point]:
        # Both lines as n . X = c; parallel and coincident lines give no single point.
        determinant = self.norm.cross(other.norm)
        if eq_0(determinant):
            return []
        offset_self = self.norm.dot(Vector(self.pt.x, self.pt.y))
        offset_other = other.norm.dot(Vector(other.pt.x, other.pt.y))
        x = (offset_self * other.norm.y - offset_other * self.norm.y) / determinant
        y = (self.norm.x * offset_other - other.norm.x * offset_self) / determinant
        return [Point(x, y)]
