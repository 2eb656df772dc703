"""Graphical (two-variable) linear programming engine."""

from .parser import parse_constraint, parse_constraint_line, parse_constraints, expand_equality
from .geometry import nearly_equal, is_finite_number, line_intersection, convex_hull, iso_cost_intercepts
from .solver import solve
from .diagnostics import likely_unbounded, trivial_minimum, advise, analyze_infeasibility
from .reference import reference_solve, cross_check

__all__ = [
    "parse_constraint",
    "parse_constraint_line",
    "parse_constraints",
    "expand_equality",
    "nearly_equal",
    "is_finite_number",
    "line_intersection",
    "convex_hull",
    "iso_cost_intercepts",
    "solve",
    "likely_unbounded",
    "trivial_minimum",
    "advise",
    "analyze_infeasibility",
    "reference_solve",
    "cross_check",
]
