from __future__ import annotations

from typing import Any, Dict, List

from ..schemas import Problem, SolveOptions
from .feasibility import violated_constraints
from .solver import solve
from .vertices import ORIGIN


def analyze_infeasibility(problem: Problem, options: SolveOptions | None = None) -> Dict[str, Any]:
    """Very small IIS-style heuristic: drop each constraint and re-solve."""

    opts = options or SolveOptions()
    solution = solve(problem, options=opts)
    if solution.found:
        return {
            "status": "feasible",
            "message": solution.message,
            "conflicting_constraints": [],
            "violated_at_origin": [],
            "suggestions": [],
        }

    conflicts: List[int] = []
    for idx in range(len(problem.constraints)):
        trimmed = problem.constraints[:idx] + problem.constraints[idx + 1 :]
        sub_problem = problem.model_copy(update={"constraints": trimmed})
        if solve(sub_problem, options=opts).found:
            conflicts.append(idx)

    suggestions = []
    if conflicts:
        suggestions.append("Relax or inspect the conflicting constraints above.")
    else:
        suggestions.append(
            "No single constraint explains the infeasibility; check right-hand sides "
            "against x >= 0, y >= 0 or remove several constraints at once."
        )

    return {
        "status": "infeasible",
        "message": "Detected infeasibility; listed constraints critical to infeasibility.",
        "conflicting_constraints": conflicts,
        "violated_at_origin": violated_constraints(ORIGIN, problem.constraints, opts.tol),
        "suggestions": suggestions,
    }
