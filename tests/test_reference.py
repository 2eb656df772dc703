import pytest

from graphlp.graph.solver import solve
from graphlp.graph.reference import cross_check, reference_solve

TEXTBOOK = ["2x+3y<=18", "x+y<=10", "x<=6", "y<=7"]


@pytest.mark.parametrize(
    "c1, c2, lines",
    [
        (3, 5, TEXTBOOK),
        (-1, -2, TEXTBOOK),
        (3, 2, ["x + 2y >= 8", "3x + y >= 6"]),
        (1, 2, ["x + y = 4"]),
        (-2, 1, ["-x + 2y >= 4", "x + y <= 10", "y <= 6"]),
    ],
)
def test_vertex_method_agrees_with_highs(c1, c2, lines):
    solution = solve(c1, c2, lines)
    reference = cross_check(solution)

    assert reference.status == "optimal"
    assert solution.best.z == pytest.approx(reference.objective_value, abs=1e-6)


def test_highs_confirms_unbounded_model():
    solution = solve(-1, -1, [])
    reference = cross_check(solution)

    assert reference.status == "unbounded"
    assert reference.objective_value is None
    assert reference.x is None


def test_highs_confirms_infeasible_model():
    solution = solve(1, 1, ["x + y >= 10", "x + y <= 5"])
    reference = reference_solve(1, 1, solution.constraints)

    assert reference.status == "infeasible"


def test_reference_handles_unexpanded_equalities():
    from graphlp.graph.parser import parse_constraint

    cons = parse_constraint("x + y = 4")
    reference = reference_solve(1, 2, [cons])

    assert reference.status == "optimal"
    assert reference.objective_value == pytest.approx(4.0)
    assert reference.x.x == pytest.approx(4.0)


def test_reference_rejects_non_finite_objective():
    with pytest.raises(ValueError):
        reference_solve(float("nan"), 1, [])
