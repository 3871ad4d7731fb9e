import argparse
import logging
import math
import time
from typing import List, Sequence

from flatray.errors import GeometryError
from flatray.shapes.arc import Arc
from flatray.shapes.segment import Segment
from flatray.typings.point import Point
from flatray.typings.ray import Ray
from flatray.typings.vector import Vector
from flatray.utils.ray_casting import cast_ray, find_closest_hit, get_profile_counters, reset_profile_counters
from flatray.utils.tolerance import DEFAULT_EPSILON, ToleranceSettings, configure_tolerance

logger = logging.getLogger(__name__)


def build_shapes(args: argparse.Namespace) -> List[object]:
    shapes: List[object] = []
    for x1, y1, x2, y2 in args.segment or []:
        shapes.append(Segment(Point(x1, y1), Point(x2, y2)))
    for cx, cy, radius, start_deg, end_deg in args.arc or []:
        shapes.append(Arc(Point(cx, cy), radius, math.radians(start_deg), math.radians(end_deg), True))
    for cx, cy, radius, start_deg, end_deg in args.cw_arc or []:
        shapes.append(Arc(Point(cx, cy), radius, math.radians(start_deg), math.radians(end_deg), False))
    return shapes


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Cast a planar ray against segments and arcs')
    parser.add_argument('--origin', type=float, nargs=2, default=[0.0, 0.0], metavar=('X', 'Y'), help='Ray start point')
    parser.add_argument(
        '--normal',
        type=float,
        nargs=2,
        default=[0.0, 1.0],
        metavar=('NX', 'NY'),
        help='Ray normal; the ray travels 90 degrees clockwise from it',
    )
    parser.add_argument(
        '--segment',
        type=float,
        nargs=4,
        action='append',
        metavar=('X1', 'Y1', 'X2', 'Y2'),
        help='Segment to intersect (repeatable)',
    )
    parser.add_argument(
        '--arc',
        type=float,
        nargs=5,
        action='append',
        metavar=('CX', 'CY', 'R', 'START', 'END'),
        help='Counterclockwise arc, angles in degrees (repeatable)',
    )
    parser.add_argument(
        '--cw-arc',
        type=float,
        nargs=5,
        action='append',
        metavar=('CX', 'CY', 'R', 'START', 'END'),
        help='Clockwise arc, angles in degrees (repeatable)',
    )
    parser.add_argument('--epsilon', type=float, default=DEFAULT_EPSILON, help='Tolerance for geometric comparisons')
    parser.add_argument('--closest', action='store_true', help='Print only the nearest hit')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log pruning and timing details')
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='[%(levelname)s] %(name)s: %(message)s',
    )

    def log_phase(label: str, seconds: float) -> None:
        logger.debug("[phase] %s: %.4fs", label, seconds)

    try:
        configure_tolerance(ToleranceSettings(epsilon=args.epsilon))
        build_start = time.perf_counter()
        ray = Ray(Point(*args.origin), Vector(*args.normal))
        shapes = build_shapes(args)
        log_phase("build_shapes", time.perf_counter() - build_start)

        reset_profile_counters()
        cast_start = time.perf_counter()
        if args.closest:
            closest_hit = find_closest_hit(ray, shapes)
            hits = [closest_hit] if closest_hit is not None else []
        else:
            hits = cast_ray(ray, shapes)
        log_phase("cast_ray", time.perf_counter() - cast_start)
    except (GeometryError, ValueError) as error:
        logger.error("%s", error)
        return 2

    for hit in hits:
        # + 0.0 folds negative zero
        print(f"{hit.point.x + 0.0:.6g} {hit.point.y + 0.0:.6g} {hit.distance:.6g}")

    counters = get_profile_counters()
    logger.debug(
        "[stats] rays={rays_cast}, tested={shapes_tested}, pruned={shapes_pruned}, hits={hits}".format(**counters)
    )
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
