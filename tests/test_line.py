import math

import pytest

from flatray.errors import DegenerateGeometryError, InvalidArgumentError, UnsupportedShapeError
from flatray.shapes.arc import Arc
from flatray.shapes.segment import Segment
from flatray.typings.line import Line
from flatray.typings.point import Point
from flatray.typings.vector import Vector

HORIZONTAL = Line(Point(0.0, 0.0), Vector(0.0, 1.0))


def test_normal_is_normalized():
    line = Line(Point(1.0, 1.0), Vector(0.0, 5.0))
    assert line.norm == Vector(0.0, 1.0)


def test_zero_normal_rejected():
    with pytest.raises(DegenerateGeometryError):
        Line(Point(), Vector(0.0, 0.0))


def test_wrong_argument_types_rejected():
    with pytest.raises(InvalidArgumentError):
        Line((0.0, 0.0), Vector(0.0, 1.0))


def test_through_coincident_points_rejected():
    with pytest.raises(DegenerateGeometryError):
        Line.through(Point(1.0, 1.0), Point(1.0, 1.0))


def test_contains():
    assert HORIZONTAL.contains(Point(-100.0, 0.0))
    assert HORIZONTAL.contains(Point(3.0, 1e-9))
    assert not HORIZONTAL.contains(Point(3.0, 0.1))


def test_slope():
    assert HORIZONTAL.slope == pytest.approx(0.0)
    assert Line.through(Point(0.0, 0.0), Point(1.0, 1.0)).slope == pytest.approx(math.pi / 4)


def test_line_line_intersection():
    vertical = Line(Point(2.0, 7.0), Vector(1.0, 0.0))
    points = HORIZONTAL.intersect(vertical)
    assert len(points) == 1
    assert points[0].equal_to(Point(2.0, 0.0))


def test_parallel_lines_do_not_intersect():
    assert HORIZONTAL.intersect(Line(Point(0.0, 3.0), Vector(0.0, -1.0))) == []


def test_line_crosses_segment():
    points = HORIZONTAL.intersect(Segment(Point(1.0, -1.0), Point(3.0, 1.0)))
    assert len(points) == 1
    assert points[0].equal_to(Point(2.0, 0.0))


def test_line_misses_segment():
    assert HORIZONTAL.intersect(Segment(Point(1.0, 1.0), Point(3.0, 2.0))) == []


def test_segment_endpoint_on_line():
    points = HORIZONTAL.intersect(Segment(Point(1.0, 0.0), Point(3.0, 2.0)))
    assert points == [Point(1.0, 0.0)]


def test_collinear_segment_returns_both_endpoints():
    points = HORIZONTAL.intersect(Segment(Point(-5.0, 0.0), Point(5.0, 0.0)))
    assert points == [Point(-5.0, 0.0), Point(5.0, 0.0)]


def test_line_secant_to_arc():
    circle = Arc(Point(0.0, 0.0), 2.0, 0.0, 2 * math.pi)
    points = HORIZONTAL.intersect(circle)
    assert len(points) == 2
    assert any(point.equal_to(Point(2.0, 0.0)) for point in points)
    assert any(point.equal_to(Point(-2.0, 0.0)) for point in points)


def test_line_keeps_only_points_on_arc():
    upper_half = Arc(Point(0.0, 0.0), 2.0, 0.0, math.pi)
    line = Line(Point(0.0, 0.0), Vector(1.0, 0.0))
    points = line.intersect(upper_half)
    assert len(points) == 1
    assert points[0].equal_to(Point(0.0, 2.0))


def test_line_tangent_to_arc():
    circle = Arc(Point(0.0, 0.0), 2.0, 0.0, 2 * math.pi)
    points = Line(Point(0.0, 2.0), Vector(0.0, 1.0)).intersect(circle)
    assert len(points) == 1
    assert points[0].equal_to(Point(0.0, 2.0))


def test_line_misses_arc():
    circle = Arc(Point(0.0, 0.0), 2.0, 0.0, 2 * math.pi)
    assert Line(Point(0.0, 3.0), Vector(0.0, 1.0)).intersect(circle) == []


def test_unsupported_shape():
    with pytest.raises(UnsupportedShapeError):
        HORIZONTAL.intersect(object())
