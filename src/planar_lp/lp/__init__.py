"""Two-variable linear programming by vertex enumeration."""

from .diagnostics import analyze_infeasibility
from .feasibility import is_feasible
from .lines import plot_series
from .parser import parse_problem
from .solver import optimize, solve
from .vertices import find_vertices

__all__ = [
    "analyze_infeasibility",
    "find_vertices",
    "is_feasible",
    "optimize",
    "parse_problem",
    "plot_series",
    "solve",
]
