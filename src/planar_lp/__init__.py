"""Planar LP: two-variable linear programs solved by vertex enumeration."""

from .lp import analyze_infeasibility, find_vertices, parse_problem, plot_series, solve
from .schemas import Constraint, Objective, Point, Problem, Solution, SolveOptions

__all__ = [
    "Constraint",
    "Objective",
    "Point",
    "Problem",
    "Solution",
    "SolveOptions",
    "analyze_infeasibility",
    "find_vertices",
    "parse_problem",
    "plot_series",
    "solve",
]
