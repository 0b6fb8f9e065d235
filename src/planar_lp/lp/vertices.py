from __future__ import annotations

import logging
import math
from typing import Iterator, List, Optional, Sequence

from ..schemas import Constraint, Point, SolveOptions
from .feasibility import is_feasible

logger = logging.getLogger(__name__)

ORIGIN = Point(x=0.0, y=0.0)


def line_intersection(first: Constraint, second: Constraint) -> Optional[Point]:
    """Intersect the boundary lines of two constraints; None when parallel or coincident."""

    det = first.a * second.b - second.a * first.b
    if det == 0:
        return None
    x = (first.value * second.b - second.value * first.b) / det
    y = (first.a * second.value - second.a * first.value) / det
    return Point(x=x, y=y)


def axis_intersections(constraint: Constraint) -> List[Point]:
    """Return the y-axis crossing (0, value/b) followed by the x-axis crossing (value/a, 0)."""

    points: List[Point] = []
    if constraint.b != 0:
        points.append(Point(x=0.0, y=constraint.value / constraint.b))
    if constraint.a != 0:
        points.append(Point(x=constraint.value / constraint.a, y=0.0))
    return points


def candidate_points(constraints: Sequence[Constraint]) -> Iterator[Point]:
    """
    Enumerate every candidate vertex, unfiltered.

    Order: the origin, then for each constraint i its intersections with every
    later constraint j > i, then its own axis intersections. The optimizer keeps
    the first of several equally good points, so this order decides ties.
    """

    yield ORIGIN
    for i, first in enumerate(constraints):
        for second in constraints[i + 1 :]:
            point = line_intersection(first, second)
            if point is not None:
                yield point
        yield from axis_intersections(first)


def _is_finite(point: Point) -> bool:
    return math.isfinite(point.x) and math.isfinite(point.y)


def find_vertices(constraints: Sequence[Constraint], options: SolveOptions | None = None) -> List[Point]:
    opts = options or SolveOptions()
    vertices: List[Point] = []
    for point in candidate_points(constraints):
        if opts.drop_non_finite and not _is_finite(point):
            logger.debug("dropping non-finite candidate (%s, %s)", point.x, point.y)
            continue
        if not is_feasible(point, constraints, opts.tol):
            logger.debug("dropping infeasible candidate (%s, %s)", point.x, point.y)
            continue
        vertices.append(point)
    return vertices
