from __future__ import annotations

from typing import List

from flatray.errors import InvalidArgumentError
from flatray.typings.box import Box
from flatray.typings.point import Point
from flatray.utils.intersections import intersect_line_to_segment, intersect_ray_to_segment
from flatray.utils.tolerance import eq_0


class Segment:
    def __init__(self, ps: Point, pe: Point) -> None:
        if not isinstance(ps, Point) or not isinstance(pe, Point):
            raise InvalidArgumentError("Segment requires two Points")
        self.ps: Point = ps.clone()
        self.pe: Point = pe.clone()

    @property
    def start(self) -> Point:
        return self.ps

    @property
    def end(self) -> Point:
        return self.pe

    @property
    def length(self) -> float:
        return self.ps.distance_to(self.pe)

    @property
    def box(self) -> Box:
        return Box(
            min(self.ps.x, self.pe.x),
            min(self.ps.y, self.pe.y),
            max(self.ps.x, self.pe.x),
            max(self.ps.y, self.pe.y),
        )

    def clone(self) -> "Segment":
        return Segment(self.ps, self.pe)

    def distance_to(self, point: Point) -> float:
        direction = self.pe - self.ps
        squared_length = direction.dot(direction)
        if eq_0(squared_length):
            return self.ps.distance_to(point)
        t = direction.dot(point - self.ps) / squared_length
        t = min(1.0, max(0.0, t))
        closest_point = self.ps.translate(direction.multiply(t))
        return closest_point.distance_to(point)

    def contains(self, point: Point) -> bool:
        return eq_0(self.distance_to(point))

    def intersected_by_line(self, line) -> List[Point]:
        return intersect_line_to_segment(line, self)

    def intersected_by_ray(self, ray) -> List[Point]:
        return intersect_ray_to_segment(ray, self)

    def __repr__(self) -> str:
        return f"Segment(({self.ps.x}, {self.ps.y}), ({self.pe.x}, {self.pe.y}))"
