from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple, TypeVar

from ..schemas import Point

P = TypeVar("P", bound=Point)


def nearly_equal(a: float, b: float, eps: float = 1e-9) -> bool:
    return abs(a - b) <= eps


def is_finite_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def line_intersection(
    a1: float,
    b1: float,
    c1: float,
    a2: float,
    b2: float,
    c2: float,
    eps: float = 1e-9,
) -> Optional[Point]:
    """
    Intersect ``a1 x + b1 y = c1`` with ``a2 x + b2 y = c2`` by Cramer's rule.

    Returns None for parallel, coincident or degenerate (a = b = 0) lines and
    whenever the solution is not finite.
    """

    det = a1 * b2 - a2 * b1
    if nearly_equal(det, 0.0, eps):
        return None
    x = (c1 * b2 - c2 * b1) / det
    y = (a1 * c2 - a2 * c1) / det
    if not (is_finite_number(x) and is_finite_number(y)):
        return None
    return Point(x=x, y=y)


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def convex_hull(points: Sequence[P]) -> List[P]:
    """
    Order points into their convex hull, counterclockwise (monotone chain).

    Collinear boundary points are dropped. The result only ever contains the
    input objects themselves.
    """

    if len(points) < 2:
        return list(points)

    pts = sorted(points, key=lambda p: (p.x, p.y))

    lower: List[P] = []
    for p in pts:
        while len(lower) >= 2 and _cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: List[P] = []
    for p in reversed(pts):
        while len(upper) >= 2 and _cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]


def iso_cost_intercepts(
    c1: float, c2: float, z: float, eps: float = 1e-9
) -> Tuple[Optional[Point], Optional[Point]]:
    """Axis intercepts of the iso-cost line ``c1*x + c2*y = z`` as (y-axis, x-axis)."""

    on_y_axis = None
    on_x_axis = None
    if not nearly_equal(c2, 0.0, eps):
        y = z / c2
        if is_finite_number(y):
            on_y_axis = Point(x=0.0, y=y)
    if not nearly_equal(c1, 0.0, eps):
        x = z / c1
        if is_finite_number(x):
            on_x_axis = Point(x=x, y=0.0)
    return on_y_axis, on_x_axis
