from __future__ import annotations

import json
import logging
import os
import sys

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from .schemas import Problem, SolveOptions
from .lp.solver import solve
from .lp.parser import parse_problem
from .lp.diagnostics import analyze_infeasibility as _analyze_infeasibility
from .lp.lines import plot_series

logger = logging.getLogger("planar_lp.server")

mcp = FastMCP("Planar LP")


@mcp.tool()
def solve_lp(problem: Problem, options: SolveOptions | None = None) -> dict:
    "Solve a two-variable LP over x, y >= 0 and return {point, value, message}."
    solution = solve(problem, options=options or SolveOptions())
    logger.info(json.dumps({"event": "solve", "constraints": len(problem.constraints), "found": solution.found}))
    return solution.as_dict()


@mcp.tool()
def parse_nl_to_lp(spec: str) -> dict:
    "Parse a small natural-language spec into a structured Problem JSON."
    try:
        return parse_problem(spec).model_dump()
    except ValueError as exc:
        logger.info(json.dumps({"event": "parse_failed", "error": str(exc)}))
        return {"error": f"Failed to parse problem: {exc}"}


@mcp.tool()
def solve_word_problem(spec: str, options: SolveOptions | None = None) -> dict:
    "Parse a natural-language spec and solve it in one call."
    try:
        problem = parse_problem(spec)
    except ValueError as exc:
        return {"error": f"Failed to parse problem: {exc}", "problem": None, "solution": None}
    solution = solve(problem, options=options or SolveOptions())
    return {"problem": problem.model_dump(), "solution": solution.as_dict()}


@mcp.tool()
def analyze_infeasibility(problem: Problem) -> dict:
    "Return basic infeasibility diagnostics (constraints whose removal restores a solution)."
    return _analyze_infeasibility(problem)


@mcp.tool()
def plot_data(problem: Problem, x_max: float = 20.0, samples: int = 101) -> dict:
    "Return sampled constraint/objective lines and the optimum for drawing."
    solution = solve(problem)
    return plot_series(problem, solution, domain=(0.0, x_max), samples=samples)


def main() -> None:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "stdio" or "--stdio" in sys.argv:
        mcp.run(transport="stdio")
    else:
        port = int(os.environ.get("PORT", "8081"))
        mcp.settings.host = "0.0.0.0"
        mcp.settings.port = port
        mcp.settings.streamable_http_path = "/mcp"
        mcp.settings.transport_security = TransportSecuritySettings(
            enable_dns_rebinding_protection=False,
            allowed_hosts=["*"],
            allowed_origins=["*"],
        )
        mcp.run(transport="streamable-http")


if __name__ == "__main__":
    main()
