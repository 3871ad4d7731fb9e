from __future__ import annotations

import math
from typing import List

from flatray.errors import DegenerateGeometryError, InvalidArgumentError
from flatray.typings.box import Box
from flatray.typings.point import Point
from flatray.utils.intersections import intersect_line_to_arc, intersect_ray_to_arc
from flatray.utils.tolerance import eq, gt, le, lt
from flatray.utils.vector_operations import TWO_PI


class Arc:
    """Circular arc around ``pc`` from ``start_angle`` to ``end_angle`` (radians).

    Counterclockwise arcs sweep by increasing angle, clockwise ones by
    decreasing angle. Angles differing by a full turn describe a whole circle.
    """

    def __init__(
        self,
        pc: Point,
        r: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = True,
    ) -> None:
        if not isinstance(pc, Point):
            raise InvalidArgumentError(f"Arc center must be a Point, got {type(pc).__name__}")
        if not float(r) > 0.0:
            raise DegenerateGeometryError(f"Arc radius must be positive, got {r}")
        self.pc: Point = pc.clone()
        self.r: float = float(r)
        self.start_angle: float = float(start_angle)
        self.end_angle: float = float(end_angle)
        self.counter_clockwise: bool = bool(counter_clockwise)

    def clone(self) -> "Arc":
        return Arc(self.pc, self.r, self.start_angle, self.end_angle, self.counter_clockwise)

    def _point_at(self, angle: float) -> Point:
        return Point(self.pc.x + self.r * math.cos(angle), self.pc.y + self.r * math.sin(angle))

    @property
    def start(self) -> Point:
        return self._point_at(self.start_angle)

    @property
    def end(self) -> Point:
        return self._point_at(self.end_angle)

    @property
    def sweep(self) -> float:
        if eq(self.start_angle, self.end_angle):
            return 0.0
        if eq(abs(self.start_angle - self.end_angle), TWO_PI):
            return TWO_PI

        if self.counter_clockwise:
            sweep = self.end_angle - self.start_angle
            if not gt(self.end_angle, self.start_angle):
                sweep += TWO_PI
        else:
            sweep = self.start_angle - self.end_angle
            if not gt(self.start_angle, self.end_angle):
                sweep += TWO_PI

        if gt(sweep, TWO_PI):
            sweep -= TWO_PI
        if lt(sweep, 0.0):
            sweep += TWO_PI
        return sweep

    @property
    def length(self) -> float:
        return abs(self.sweep * self.r)

    @property
    def box(self) -> Box:
        # Endpoints plus whichever axis extremes of the circle the sweep passes.
        extremes = [
            Point(self.pc.x + self.r, self.pc.y),
            Point(self.pc.x, self.pc.y + self.r),
            Point(self.pc.x - self.r, self.pc.y),
            Point(self.pc.x, self.pc.y - self.r),
        ]
        points = [self.start, self.end]
        points.extend(point for point in extremes if self.contains(point))
        return Box.from_points(points)

    def contains(self, point: Point) -> bool:
        if not eq(self.pc.distance_to(point), self.r):
            return False
        if point.equal_to(self.start):
            return True
        angle = (point - self.pc).slope
        partial_arc = Arc(self.pc, self.r, self.start_angle, angle, self.counter_clockwise)
        return le(partial_arc.length, self.length)

    def intersected_by_line(self, line) -> List[Point]:
        return intersect_line_to_arc(line, self)

    def intersected_by_ray(self, ray) -> List[Point]:
        return intersect_ray_to_arc(ray, self)

    def __repr__(self) -> str:
        direction = "ccw" if self.counter_clockwise else "cw"
        return (
            f"Arc(({self.pc.x}, {self.pc.y}), r={self.r}, "
            f"{self.start_angle:.6g}->{self.end_angle:.6g} {direction})"
        )
