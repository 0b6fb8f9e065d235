"""Line derivations and sampled series for drawing a problem and its optimum."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..schemas import Constraint, Objective, Problem, Solution

DEFAULT_DOMAIN: Tuple[float, float] = (0.0, 20.0)


def constraint_line(constraint: Constraint) -> Optional[Dict[str, float]]:
    """Boundary of a constraint as y = intercept + slope * x, or None when b == 0."""

    if constraint.b == 0:
        return None
    return {
        "intercept": constraint.value / constraint.b,
        "slope": -constraint.a / constraint.b,
    }


def objective_line(objective: Objective) -> Optional[Dict[str, float]]:
    """Level line y = (-a/b) * x through the origin; None when b == 0."""

    if objective.b == 0:
        return None
    return {"intercept": 0.0, "slope": -objective.a / objective.b}


def _sample(line: Dict[str, float], xs: np.ndarray) -> List[List[float]]:
    ys = line["intercept"] + line["slope"] * xs
    return np.column_stack((xs, ys)).tolist()


def _vertical(x: float, domain: Tuple[float, float]) -> List[List[float]]:
    return [[x, domain[0]], [x, domain[1]]]


def plot_series(
    problem: Problem,
    solution: Solution | None = None,
    domain: Tuple[float, float] = DEFAULT_DOMAIN,
    samples: int = 101,
    precision: int = 2,
) -> Dict[str, Any]:
    xs = np.linspace(domain[0], domain[1], samples)
    constraint_series: List[Dict[str, Any]] = []
    for idx, cons in enumerate(problem.constraints):
        line = constraint_line(cons)
        if line is not None:
            points = _sample(line, xs)
        elif cons.a != 0:
            points = _vertical(cons.value / cons.a, domain)
        else:
            # 0x + 0y has no boundary to draw
            points = []
        constraint_series.append({"index": idx, "line": line, "points": points})

    obj_line = objective_line(problem.objective)
    series: Dict[str, Any] = {
        "domain": list(domain),
        "constraints": constraint_series,
        "objective": {
            "line": obj_line,
            "points": _sample(obj_line, xs) if obj_line is not None else _vertical(0.0, domain),
        },
        "optimum": None,
    }

    if solution is not None and solution.point is not None:
        px, py = solution.point.x + 0.0, solution.point.y + 0.0
        series["optimum"] = {
            "point": [px, py],
            "label": f"({px:.{precision}f}, {py:.{precision}f})",
        }
    return series
