#!/usr/bin/env python3
import time

from graphlp.graph.reference import cross_check
from graphlp.graph.solver import solve
from scripts.generate_instances import generate_random_instance

TEXTBOOK = {
    "c1": 3.0,
    "c2": 5.0,
    "constraints": ["2x + 3y <= 18", "x + y <= 10", "x <= 6", "y <= 7"],
}


def main() -> None:
    cases = [("textbook", TEXTBOOK)]
    for seed in range(5):
        cases.append((f"random-{seed}", generate_random_instance(6, seed)))

    print("name,feasible,vertices,objective,highs_status,highs_objective,time_ms")
    for name, instance in cases:
        start = time.perf_counter()
        solution = solve(instance["c1"], instance["c2"], instance["constraints"])
        elapsed_ms = (time.perf_counter() - start) * 1000
        reference = cross_check(solution)
        objective = solution.best.z if solution.best else None
        print(
            f"{name},{solution.feasible},{len(solution.vertices)},{objective},"
            f"{reference.status},{reference.objective_value},{elapsed_ms:.2f}"
        )


if __name__ == "__main__":
    main()
