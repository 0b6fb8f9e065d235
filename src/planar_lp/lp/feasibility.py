from __future__ import annotations

from typing import List, Optional, Sequence

from ..schemas import Constraint, Point


def satisfies(point: Point, constraint: Constraint, tol: float = 0.0) -> bool:
    """
    Check a single constraint at ``point``.

    Only "<=" is tested as an upper bound; every other relation, "=" included,
    is tested as ``lhs >= value``.
    """

    lhs = constraint.lhs(point)
    if constraint.relation == "<=":
        return lhs <= constraint.value + tol
    return lhs >= constraint.value - tol


def is_feasible(point: Optional[Point], constraints: Sequence[Constraint], tol: float = 0.0) -> bool:
    if point is None:
        return False
    if point.x < 0 or point.y < 0:
        return False
    return all(satisfies(point, cons, tol) for cons in constraints)


def violated_constraints(point: Point, constraints: Sequence[Constraint], tol: float = 0.0) -> List[int]:
    return [idx for idx, cons in enumerate(constraints) if not satisfies(point, cons, tol)]
