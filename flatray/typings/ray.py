from __future__ import annotations

import math
from typing import List

from flatray.errors import DegenerateGeometryError, InvalidArgumentError, UnsupportedShapeError
from flatray.typings.box import Box
from flatray.typings.point import Point
from flatray.typings.vector import Vector
from flatray.utils.tolerance import eq_0, ge

ORIGIN = Point(0.0, 0.0)
HORIZONTAL_NORMAL = Vector(0.0, 1.0)


class Ray:
    """Half-infinite line starting at ``pt``.

    The ray travels 90 degrees clockwise from its normal ``norm``: the default
    normal (0, 1) makes a horizontal ray pointing toward +x. A missing start
    point defaults to the origin. Only the direction of the normal matters,
    containment tests use its unit copy.
    """

    __slots__ = ("pt", "norm")

    def __init__(self, pt: Point = ORIGIN, norm: Vector = HORIZONTAL_NORMAL) -> None:
        if not isinstance(pt, Point):
            raise InvalidArgumentError(f"Ray start must be a Point, got {type(pt).__name__}")
        if not isinstance(norm, Vector):
            raise InvalidArgumentError(f"Ray normal must be a Vector, got {type(norm).__name__}")
        if norm.is_zero():
            raise DegenerateGeometryError("Ray normal must not be the zero vector")
        self.pt: Point = pt.clone()
        self.norm: Vector = norm.clone()

    def clone(self) -> "Ray":
        return Ray(self.pt, self.norm)

    @property
    def start(self) -> Point:
        return self.pt

    @property
    def slope(self) -> float:
        """Angle between the travel direction and the x axis, in [0, 2*pi)."""
        return self.norm.rotate90_cw().slope

    @property
    def box(self) -> Box:
        """Half-infinite bounding box, pinned at the start on the sides the ray leaves from."""
        slope = self.slope
        return Box(
            -math.inf if math.pi / 2 < slope < 3 * math.pi / 2 else self.pt.x,
            self.pt.y if 0 <= slope <= math.pi else -math.inf,
            self.pt.x if math.pi / 2 <= slope <= 3 * math.pi / 2 else math.inf,
            self.pt.y if math.pi <= slope <= 2 * math.pi or slope == 0 else math.inf,
        )

    def contains(self, point: Point) -> bool:
        if self.pt.equal_to(point):
            return True
        # On the ray when orthogonal to the normal and not behind the start.
        unit_normal = self.norm.normalize()
        vector_to_point = point - self.pt
        return eq_0(unit_normal.dot(vector_to_point)) and ge(vector_to_point.cross(unit_normal), 0.0)

    def intersect(self, shape) -> List[Point]:
        intersected_by_ray = getattr(shape, "intersected_by_ray", None)
        if intersected_by_ray is None:
            raise UnsupportedShapeError(f"Cannot intersect a ray with {type(shape).__name__}")
        return intersected_by_ray(self)

    def __repr__(self) -> str:
        return f"Ray(({self.pt.x}, {self.pt.y}), normal=({self.norm.x}, {self.norm.y}))"
