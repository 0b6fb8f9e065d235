from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from ..schemas import NO_SOLUTION_MESSAGE, Constraint, Objective, Point, Problem, Solution, SolveOptions
from .vertices import find_vertices

logger = logging.getLogger(__name__)


def format_message(point: Point, value: float, precision: int = 2) -> str:
    # adding 0.0 prints -0.0 as 0.00
    x, y, value = point.x + 0.0, point.y + 0.0, value + 0.0
    return (
        f"Optimal solution found at ({x:.{precision}f}, {y:.{precision}f}) "
        f"with value {value:.{precision}f}"
    )


def no_solution() -> Solution:
    return Solution(point=None, value=0.0, message=NO_SOLUTION_MESSAGE)


def optimize(points: Sequence[Point], objective: Objective, precision: int = 2) -> Solution:
    """Scan the feasible points and keep the first strict improvement of the objective."""

    if not points:
        return no_solution()

    maximize = objective.direction == "max"
    best_value = -math.inf if maximize else math.inf
    best_point: Optional[Point] = None

    for point in points:
        value = objective.evaluate(point)
        if maximize and value > best_value:
            best_value, best_point = value, point
        elif not maximize and value < best_value:
            best_value, best_point = value, point

    if best_point is None:
        # every candidate evaluated to NaN
        return no_solution()

    return Solution(point=best_point, value=best_value, message=format_message(best_point, best_value, precision))


def solve(
    problem: Problem | Objective,
    constraints: Sequence[Constraint] | None = None,
    options: SolveOptions | None = None,
) -> Solution:
    """
    Solve a two-variable LP over x >= 0, y >= 0 by vertex enumeration.

    Accepts either a Problem snapshot or an Objective plus its constraints.
    Pure: nothing is kept between calls.
    """

    opts = options or SolveOptions()
    if isinstance(problem, Problem):
        objective = problem.objective
        cons: List[Constraint] = list(problem.constraints)
    else:
        objective = problem
        cons = list(constraints or [])

    vertices = find_vertices(cons, opts)
    solution = optimize(vertices, objective, opts.precision)
    logger.debug("%d feasible vertices from %d constraints: %s", len(vertices), len(cons), solution.message)
    return solution
