#!/usr/bin/env python3
import argparse
import json
import random
from pathlib import Path
from typing import List, Optional

from planar_lp.schemas import Constraint, Objective, Problem


def generate_random_problem(num_constraints: int, seed: Optional[int] = None, direction: str = "max") -> Problem:
    rng = random.Random(seed)
    constraints: List[Constraint] = []
    for _ in range(num_constraints):
        constraints.append(
            Constraint(
                a=rng.uniform(0.5, 5.0),
                b=rng.uniform(0.5, 5.0),
                relation="<=",
                value=rng.uniform(4.0, 12.0),
            )
        )
    objective = Objective(a=rng.uniform(1.0, 4.0), b=rng.uniform(1.0, 4.0), direction=direction)
    return Problem(name="random-lp", objective=objective, constraints=constraints)


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random feasible two-variable LP instances.")
    parser.add_argument("--constraints", type=int, default=3, help="Number of constraints")
    parser.add_argument("--direction", choices=["max", "min"], default="max", help="Objective direction")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of instances")
    parser.add_argument("--out", type=Path, default=None, help="Optional output file")
    args = parser.parse_args()

    instances = [
        generate_random_problem(args.constraints, (args.seed or 0) + idx, args.direction)
        for idx in range(args.count)
    ]
    payload = [instance.model_dump() for instance in instances]

    if args.out:
        Path(args.out).write_text(json.dumps(payload, indent=2))
    else:
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
