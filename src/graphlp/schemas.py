from __future__ import annotations

import math
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Cmp = Literal["<=", ">=", "="]
Inequality = Literal["<=", ">="]


class Constraint(BaseModel):
    model_config = ConfigDict(frozen=True)

    a: float
    b: float
    op: Cmp
    rhs: float
    source: Optional[str] = None

    def lhs(self, x: float, y: float) -> float:
        return self.a * x + self.b * y

    def satisfied_by(self, x: float, y: float, tol: float = 1e-9) -> bool:
        value = self.lhs(x, y)
        if self.op == "<=":
            return value <= self.rhs + tol
        if self.op == ">=":
            return value >= self.rhs - tol
        return abs(value - self.rhs) <= tol


class ParsedLine(BaseModel):
    """Outcome of parsing one raw constraint line."""

    model_config = ConfigDict(frozen=True)

    line: str
    constraint: Optional[Constraint] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.constraint is not None


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Vertex(Point):
    z: Optional[float] = None


class SolveOptions(BaseModel):
    feasibility_tol: float = 1e-9
    parallel_tol: float = 1e-9
    dedup_tol: float = 1e-7
    probe_tol: float = 1e-7
    probe_nonneg_tol: float = 1e-6
    probe_step: float = 0.05
    probe_steps: int = 50


class Solution(BaseModel):
    model_config = ConfigDict(frozen=True)

    feasible: bool
    vertices: List[Vertex] = Field(default_factory=list)
    best: Optional[Vertex] = None
    constraints: List[Constraint] = Field(default_factory=list)
    c1: float
    c2: float
    rejected: List[ParsedLine] = Field(default_factory=list)

    @property
    def objective_valid(self) -> bool:
        return math.isfinite(self.c1) and math.isfinite(self.c2)


class Advisory(BaseModel):
    objective_valid: bool
    trivial_minimum: bool
    likely_unbounded: bool
    messages: List[str] = Field(default_factory=list)


class ReferenceResult(BaseModel):
    status: Literal["optimal", "infeasible", "unbounded", "iteration_limit"]
    objective_value: Optional[float]
    x: Optional[Point]
    message: str = ""
