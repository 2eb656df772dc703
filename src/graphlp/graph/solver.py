from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..schemas import Constraint, Point, Solution, SolveOptions, Vertex
from .geometry import line_intersection
from .parser import parse_constraints

logger = logging.getLogger(__name__)

NON_NEGATIVITY = (
    Constraint(a=-1.0, b=0.0, op="<=", rhs=0.0),  # x >= 0
    Constraint(a=0.0, b=-1.0, op="<=", rhs=0.0),  # y >= 0
)


def solve(
    c1: float,
    c2: float,
    lines: Iterable[str],
    options: Optional[SolveOptions] = None,
) -> Solution:
    """
    Minimise ``c1*x + c2*y`` over the constraint lines plus x, y >= 0.

    Every feasible intersection of two boundary lines is a vertex; the vertex
    list is returned sorted by objective value with the minimum as ``best``.
    Malformed lines are dropped and listed in ``Solution.rejected``.
    """

    opts = options or SolveOptions()
    parsed, rejected = parse_constraints(lines)
    constraints = build_constraint_set(parsed)

    points = enumerate_vertices(constraints, opts)
    logger.debug(
        f"{len(constraints)} constraints, {len(rejected)} rejected lines, {len(points)} vertices"
    )

    if not points:
        return Solution(
            feasible=False,
            vertices=[],
            best=None,
            constraints=constraints,
            c1=c1,
            c2=c2,
            rejected=rejected,
        )

    evaluated = [Vertex(x=p.x, y=p.y, z=c1 * p.x + c2 * p.y) for p in points]
    # sorted() is stable, so equal objective values keep discovery order
    evaluated = sorted(evaluated, key=_objective_key)

    return Solution(
        feasible=True,
        vertices=evaluated,
        best=evaluated[0],
        constraints=constraints,
        c1=c1,
        c2=c2,
        rejected=rejected,
    )


def build_constraint_set(constraints: Iterable[Constraint]) -> List[Constraint]:
    return list(constraints) + list(NON_NEGATIVITY)


def enumerate_vertices(constraints: List[Constraint], opts: SolveOptions) -> List[Point]:
    A, rhs, is_le = constraint_arrays(constraints)
    tol = opts.feasibility_tol
    vertices: List[Point] = []

    for i in range(len(constraints)):
        ci = constraints[i]
        for j in range(i + 1, len(constraints)):
            cj = constraints[j]
            p = line_intersection(ci.a, ci.b, ci.rhs, cj.a, cj.b, cj.rhs, opts.parallel_tol)
            if p is None:
                continue
            if not is_feasible(A, rhs, is_le, p.x, p.y, tol):
                continue
            if p.x < -tol or p.y < -tol:
                continue

            candidate = Point(x=max(0.0, p.x), y=max(0.0, p.y))
            if any(math.hypot(q.x - candidate.x, q.y - candidate.y) < opts.dedup_tol for q in vertices):
                continue
            vertices.append(candidate)

    return vertices


def constraint_arrays(constraints: List[Constraint]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    if constraints:
        A = np.array([[c.a, c.b] for c in constraints], dtype=float)
    else:
        A = np.empty((0, 2))
    rhs = np.array([c.rhs for c in constraints], dtype=float)
    is_le = np.array([c.op == "<=" for c in constraints], dtype=bool)
    return A, rhs, is_le


def is_feasible(
    A: np.ndarray,
    rhs: np.ndarray,
    is_le: np.ndarray,
    x: float,
    y: float,
    tol: float,
) -> bool:
    lhs = A[:, 0] * x + A[:, 1] * y
    ok = np.where(is_le, lhs <= rhs + tol, lhs >= rhs - tol)
    return bool(np.all(ok))


def _objective_key(vertex: Vertex) -> float:
    return vertex.z
