from __future__ import annotations

import logging
from typing import List

import numpy as np

from flatray.typings.line import Line
from flatray.typings.point import Point
from flatray.utils.tolerance import eq

logger = logging.getLogger(__name__)


def intersect_line_to_segment(line: Line, segment) -> List[Point]:
    """Returns 0, 1 or 2 points. A collinear segment yields both of its endpoints."""
    intersection_points: List[Point] = []
    if segment.start.on(line):
        intersection_points.append(segment.start)
    if segment.end.on(line) and not segment.end.equal_to(segment.start):
        intersection_points.append(segment.end)
    if intersection_points:
        return intersection_points

    if segment.start.equal_to(segment.end):
        return intersection_points

    for point in line.intersect(Line.through(segment.start, segment.end)):
        if point.on(segment):
            intersection_points.append(point)
    return intersection_points


def intersect_line_to_arc(line: Line, arc) -> List[Point]:
    """Intersects the line with the arc's circle, then keeps the points lying on the arc."""
    circle_center = arc.pc
    center_projection = circle_center.projection_on(line)
    center_distance = circle_center.distance_to(center_projection)

    candidate_points: List[Point] = []
    if eq(center_distance, arc.r):
        candidate_points.append(center_projection)
    elif center_distance < arc.r:
        half_chord = float(np.sqrt(arc.r * arc.r - center_distance * center_distance))
        chord_offset = line.norm.rotate90_ccw().multiply(half_chord)
        candidate_points.append(center_projection.translate(chord_offset))
        candidate_points.append(center_projection.translate(chord_offset.invert()))

    return [point for point in candidate_points if point.on(arc)]


def intersect_ray_to_segment(ray, segment) -> List[Point]:
    if ray.box.not_intersect(segment.box):
        logger.debug("Ray %r rejected %r by bounding box", ray, segment)
        return []

    line = Line(ray.start, ray.norm)
    line_points = line.intersect(segment)
    ray_points = [point for point in line_points if ray.contains(point)]

    # Two line points but one kept: the ray starts inside the collinear overlap,
    # so its start is the other end of the shared part. The last clause is an
    # addition to that rule: a ray starting on the far endpoint already kept
    # its start, so it is not reported twice.
    if (
        len(line_points) == 2
        and len(ray_points) == 1
        and ray.start.on(line)
        and not ray_points[0].equal_to(ray.start)
    ):
        logger.debug("Ray %r starts inside collinear %r, adding its start point", ray, segment)
        ray_points.append(ray.start)

    return ray_points


def intersect_ray_to_arc(ray, arc) -> List[Point]:
    if ray.box.not_intersect(arc.box):
        logger.debug("Ray %r rejected %r by bounding box", ray, arc)
        return []

    line = Line(ray.start, ray.norm)
    return [point for point in line.intersect(arc) if ray.contains(point)]
