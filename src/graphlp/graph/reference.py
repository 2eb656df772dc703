from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np
from scipy.optimize import linprog

from ..schemas import Constraint, Point, ReferenceResult, Solution


def reference_solve(c1: float, c2: float, constraints: List[Constraint]) -> ReferenceResult:
    """
    Solve the same two-variable model with SciPy's HiGHS backend.

    Used to cross-check the vertex enumeration and to get an exact verdict on
    unboundedness.
    """

    if not (math.isfinite(c1) and math.isfinite(c2)):
        raise ValueError(f"Objective coefficients must be finite, got c1={c1}, c2={c2}")

    A_ub, b_ub, A_eq, b_eq = _build_constraint_matrices(constraints)
    res = linprog(
        np.array([c1, c2], dtype=float),
        A_ub=A_ub if A_ub.size else None,
        b_ub=b_ub if b_ub.size else None,
        A_eq=A_eq if A_eq.size else None,
        b_eq=b_eq if b_eq.size else None,
        bounds=[(0, None), (0, None)],
        method="highs",
    )

    if not res.success:
        return ReferenceResult(
            status=_map_status(res.status),
            objective_value=None,
            x=None,
            message=res.message,
        )

    return ReferenceResult(
        status="optimal",
        objective_value=float(res.fun),
        x=Point(x=float(res.x[0]), y=float(res.x[1])),
        message=res.message or "",
    )


def cross_check(solution: Solution) -> ReferenceResult:
    return reference_solve(solution.c1, solution.c2, solution.constraints)


def _build_constraint_matrices(
    constraints: List[Constraint],
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    A_ub: List[List[float]] = []
    b_ub: List[float] = []
    A_eq: List[List[float]] = []
    b_eq: List[float] = []

    for cons in constraints:
        row = [cons.a, cons.b]
        if cons.op == "<=":
            A_ub.append(row)
            b_ub.append(cons.rhs)
        elif cons.op == ">=":
            A_ub.append([-value for value in row])
            b_ub.append(-cons.rhs)
        else:
            A_eq.append(row)
            b_eq.append(cons.rhs)

    return (
        np.array(A_ub, dtype=float) if A_ub else np.empty((0, 2)),
        np.array(b_ub, dtype=float) if b_ub else np.empty(0),
        np.array(A_eq, dtype=float) if A_eq else np.empty((0, 2)),
        np.array(b_eq, dtype=float) if b_eq else np.empty(0),
    )


def _map_status(code: int) -> str:
    mapping = {
        0: "optimal",
        1: "iteration_limit",
        2: "infeasible",
        3: "unbounded",
    }
    return mapping.get(code, "iteration_limit")
