#!/usr/bin/env python3
import json
import time
from pathlib import Path

from planar_lp.lp.solver import solve
from planar_lp.lp.vertices import find_vertices
from planar_lp.schemas import Problem, SolveOptions
from scripts.generate_instances import generate_random_problem


def load_example(name: str) -> Problem:
    path = Path(__file__).resolve().parent.parent / "examples" / name
    return Problem.model_validate(json.loads(path.read_text()))


def main() -> None:
    opts = SolveOptions()
    cases = [("examples/small_lp.json", load_example("small_lp.json"))]
    for seed, size in enumerate((3, 10, 50, 200)):
        cases.append((f"random-{size}", generate_random_problem(size, seed)))

    print("name,constraints,vertices,value,time_ms")
    for name, problem in cases:
        start = time.perf_counter()
        solution = solve(problem, options=opts)
        elapsed_ms = (time.perf_counter() - start) * 1000
        vertices = len(find_vertices(problem.constraints, opts))
        print(f"{name},{len(problem.constraints)},{vertices},{solution.value},{elapsed_ms:.2f}")


if __name__ == "__main__":
    main()
