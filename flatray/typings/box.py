from __future__ import annotations

from typing import Iterable

from flatray.errors import DegenerateGeometryError, InvalidArgumentError
from flatray.typings.interval_key import join_keys
from flatray.typings.point import Point


class Box:
    """Axis-aligned bounding box.

    Either all four bounds are set or none is. A box with no bounds is the
    empty box: it intersects nothing and is absorbed by ``merge``.

    Besides bounding shapes, a box is a key for an interval tree: ``low`` and
    ``high`` are its endpoints, ``merge`` is the join used to fold children
    extents into a node and ``less_than`` is a strict total order.
    """

    __slots__ = ("xmin", "ymin", "xmax", "ymax")

    def __init__(
        self,
        xmin: float | None = None,
        ymin: float | None = None,
        xmax: float | None = None,
        ymax: float | None = None,
    ) -> None:
        self.set(xmin, ymin, xmax, ymax)

    @staticmethod
    def empty() -> "Box":
        return Box()

    @staticmethod
    def from_points(points: Iterable[Point]) -> "Box":
        box = Box.empty()
        for point in points:
            box = box.merge(Box(point.x, point.y, point.x, point.y))
        return box

    @staticmethod
    def from_boxes(boxes: Iterable["Box"]) -> "Box":
        return join_keys(boxes, Box.empty())

    @property
    def is_empty(self) -> bool:
        return self.xmin is None

    def set(
        self,
        xmin: float | None,
        ymin: float | None,
        xmax: float | None,
        ymax: float | None,
    ) -> None:
        bounds = (xmin, ymin, xmax, ymax)
        unset_count = sum(1 for bound in bounds if bound is None)
        if unset_count == 4:
            self.xmin = self.ymin = self.xmax = self.ymax = None
            return
        if unset_count:
            raise InvalidArgumentError(f"Box bounds must be all set or all unset, got {bounds}")
        self.xmin = float(xmin)
        self.ymin = float(ymin)
        self.xmax = float(xmax)
        self.ymax = float(ymax)

    def clone(self) -> "Box":
        return Box(self.xmin, self.ymin, self.xmax, self.ymax)

    @property
    def low(self) -> Point:
        if self.is_empty:
            raise DegenerateGeometryError("Empty box has no low corner")
        return Point(self.xmin, self.ymin)

    @property
    def high(self) -> Point:
        if self.is_empty:
            raise DegenerateGeometryError("Empty box has no high corner")
        return Point(self.xmax, self.ymax)

    @property
    def max(self) -> "Box":
        # The widest extent under a tree node is the box itself.
        return self.clone()

    def not_intersect(self, other: "Box") -> bool:
        if self.is_empty or other.is_empty:
            return True
        return (
            self.xmax < other.xmin
            or self.xmin > other.xmax
            or self.ymax < other.ymin
            or self.ymin > other.ymax
        )

    def intersect(self, other: "Box") -> bool:
        return not self.not_intersect(other)

    def merge(self, other: "Box") -> "Box":
        if self.is_empty:
            return other.clone()
        if other.is_empty:
            return self.clone()
        return Box(
            min(self.xmin, other.xmin),
            min(self.ymin, other.ymin),
            max(self.xmax, other.xmax),
            max(self.ymax, other.ymax),
        )

    def less_than(self, other: "Box") -> bool:
        if self.is_empty or other.is_empty:
            return self.is_empty and not other.is_empty
        if self.low.less_than(other.low):
            return True
        return self.low.equal_to(other.low) and self.high.less_than(other.high)

    def equal_to(self, other: "Box") -> bool:
        if self.is_empty or other.is_empty:
            return self.is_empty and other.is_empty
        return self.low.equal_to(other.low) and self.high.equal_to(other.high)

    def output(self) -> "Box":
        return self.clone()

    def maximal_val(self, box1: "Box", box2: "Box") -> "Box":
        return box1.merge(box2)

    def val_less_than(self, pt1: Point, pt2: Point) -> bool:
        return pt1.less_than(pt2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self.equal_to(other)

    def __lt__(self, other: "Box") -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self.less_than(other)

    __hash__ = None

    def __repr__(self) -> str:
        if self.is_empty:
            return "Box()"
        return f"Box(xmin={self.xmin}, ymin={self.ymin}, xmax={self.xmax}, ymax={self.ymax})"
