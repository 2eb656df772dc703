#!/usr/bin/env python3
import argparse
import json
import random
from pathlib import Path
from typing import Dict, List, Optional


def generate_random_instance(num_constraints: int, seed: Optional[int] = None) -> Dict[str, object]:
    """Random two-variable model whose <= rows keep the origin feasible."""
    rng = random.Random(seed)
    lines: List[str] = []
    for _ in range(num_constraints):
        a = rng.uniform(0.5, 5.0)
        b = rng.uniform(0.5, 5.0)
        rhs = rng.uniform(4.0, 30.0)
        lines.append(f"{a:.2f}x + {b:.2f}y <= {rhs:.2f}")
    if rng.random() < 0.5:
        lines.append(f"x + y >= {rng.uniform(0.5, 2.0):.2f}")
    return {
        "c1": round(rng.uniform(-4.0, 4.0), 2),
        "c2": round(rng.uniform(-4.0, 4.0), 2),
        "constraints": lines,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random two-variable LP instances.")
    parser.add_argument("--constraints", type=int, default=4, help="Number of <= constraints")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of instances")
    parser.add_argument("--out", type=Path, default=None, help="Optional output file")
    args = parser.parse_args()

    payload = [
        generate_random_instance(args.constraints, (args.seed or 0) + idx)
        for idx in range(args.count)
    ]

    if args.out:
        Path(args.out).write_text(json.dumps(payload, indent=2))
    else:
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
