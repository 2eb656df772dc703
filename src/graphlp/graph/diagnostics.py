from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence

from ..schemas import Advisory, Solution, SolveOptions
from .solver import constraint_arrays, is_feasible, solve

logger = logging.getLogger(__name__)


def likely_unbounded(solution: Solution, options: Optional[SolveOptions] = None) -> bool:
    """
    Walk from the optimum along steepest descent and report whether every step
    stays feasible.

    This is a fixed-horizon probe, not a proof: a region that is unbounded in
    some other direction than -(c1, c2) is not detected.
    """

    if not solution.feasible or solution.best is None:
        return False
    if not solution.objective_valid:
        return False

    opts = options or SolveOptions()
    norm = math.hypot(solution.c1, solution.c2)
    if norm < 1e-12:
        return False  # constant objective
    dx = -solution.c1 / norm
    dy = -solution.c2 / norm

    A, rhs, is_le = constraint_arrays(solution.constraints)
    x, y = solution.best.x, solution.best.y
    for _ in range(opts.probe_steps):
        x += opts.probe_step * dx
        y += opts.probe_step * dy
        if not is_feasible(A, rhs, is_le, x, y, opts.probe_tol):
            return False
        if x < -opts.probe_nonneg_tol or y < -opts.probe_nonneg_tol:
            return False
    return True


def trivial_minimum(solution: Solution, tol: float = 1e-9) -> bool:
    """True when (0, 0) is feasible and c1, c2 >= 0, which makes the origin optimal."""

    if not solution.feasible:
        return False
    if not (solution.c1 >= 0 and solution.c2 >= 0):
        return False
    return all(c.satisfied_by(0.0, 0.0, tol) for c in solution.constraints)


def advise(solution: Solution, options: Optional[SolveOptions] = None) -> Advisory:
    messages: List[str] = []
    if not solution.feasible:
        messages.append("No feasible vertices found; check the constraints.")
    if not solution.objective_valid:
        messages.append("Invalid objective coefficients; the reported optimum cannot be trusted.")

    trivial = trivial_minimum(solution)
    if trivial:
        messages.append(
            "With c1, c2 >= 0 and (0, 0) feasible the minimum is (0, 0); "
            "add a >= or = constraint to avoid it."
        )

    unbounded = likely_unbounded(solution, options)
    if unbounded:
        messages.append("Objective may be unbounded below; check the constraints.")

    return Advisory(
        objective_valid=solution.objective_valid,
        trivial_minimum=trivial,
        likely_unbounded=unbounded,
        messages=messages,
    )


def analyze_infeasibility(
    c1: float,
    c2: float,
    lines: Sequence[str],
    options: Optional[SolveOptions] = None,
) -> Dict[str, object]:
    """Drop each constraint line in turn and report those whose removal restores feasibility."""

    lines = list(lines)
    base = solve(c1, c2, lines, options)
    if base.feasible:
        return {
            "status": "feasible",
            "message": "Model is not infeasible",
            "conflicts": [],
        }

    rejected = {parsed.line for parsed in base.rejected}
    conflicts: List[str] = []
    for idx, line in enumerate(lines):
        if not line.strip() or line in rejected:
            continue
        relaxed = lines[:idx] + lines[idx + 1 :]
        if solve(c1, c2, relaxed, options).feasible:
            conflicts.append(line.strip())

    logger.debug(f"Infeasibility analysis found {len(conflicts)} candidate conflicts")
    return {
        "status": "infeasible",
        "message": "Identified candidate conflicting constraints",
        "conflicts": conflicts,
    }
