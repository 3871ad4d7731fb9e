from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List

from flatray.errors import UnsupportedShapeError
from flatray.typings.point import Point
from flatray.typings.ray import Ray

logger = logging.getLogger(__name__)

_PROFILE_COUNTERS: Dict[str, int] = {
    "rays_cast": 0,
    "shapes_tested": 0,
    "shapes_pruned": 0,
    "hits": 0,
}


@dataclass(frozen=True, slots=True)
class RayHit:
    distance: float
    point: Point
    shape: object


def reset_profile_counters() -> None:
    for key in _PROFILE_COUNTERS:
        _PROFILE_COUNTERS[key] = 0


def get_profile_counters() -> Dict[str, int]:
    return dict(_PROFILE_COUNTERS)


def cast_ray(ray: Ray, shapes: Iterable[object], max_distance: float = float("inf")) -> List[RayHit]:
    """
    Intersects the ray with every shape whose bounding box overlaps the ray's box.
    Hits farther than max_distance from the ray start are dropped; the rest are
    returned nearest first.
    """
    _PROFILE_COUNTERS["rays_cast"] += 1
    ray_box = ray.box
    hits: List[RayHit] = []
    pruned_count = 0

    for shape in shapes:
        shape_box = getattr(shape, "box", None)
        if shape_box is None:
            raise UnsupportedShapeError(f"{type(shape).__name__} has no bounding box")
        if ray_box.not_intersect(shape_box):
            pruned_count += 1
            continue

        _PROFILE_COUNTERS["shapes_tested"] += 1
        for point in ray.intersect(shape):
            distance = ray.start.distance_to(point)
            if distance > max_distance:
                continue
            hits.append(RayHit(distance=distance, point=point, shape=shape))

    hits.sort(key=lambda hit: hit.distance)
    _PROFILE_COUNTERS["shapes_pruned"] += pruned_count
    _PROFILE_COUNTERS["hits"] += len(hits)
    logger.debug("Cast %r: %d shapes pruned, %d hits", ray, pruned_count, len(hits))
    return hits


def find_closest_hit(ray: Ray, shapes: Iterable[object], max_distance: float = float("inf")) -> RayHit | None:
    """Nearest intersection of the ray with any of the shapes, or None."""
    hits = cast_ray(ray, shapes, max_distance)
    if not hits:
        return None
    return hits[0]
