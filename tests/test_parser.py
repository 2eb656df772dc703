import pytest

from graphlp.graph.parser import (
    expand_equality,
    parse_constraint,
    parse_constraint_line,
    parse_constraints,
)


def coefficients(line: str):
    cons = parse_constraint(line)
    assert cons is not None, line
    return cons.a, cons.b, cons.op, cons.rhs


def test_parses_documented_examples():
    assert coefficients("2x + 3y <= 18") == (2.0, 3.0, "<=", 18.0)
    assert coefficients("-x + 2y >= 4") == (-1.0, 2.0, ">=", 4.0)
    assert coefficients("x <= 6") == (1.0, 0.0, "<=", 6.0)


def test_empty_line_is_no_constraint():
    assert parse_constraint("") is None
    assert parse_constraint("   ") is None


def test_equality_expands_into_two_inequalities():
    cons = parse_constraint("x + y = 10")
    assert cons is not None
    assert cons.op == "="

    lower, upper = expand_equality(cons)
    assert (lower.a, lower.b, lower.op, lower.rhs) == (1.0, 1.0, "<=", 10.0)
    assert (upper.a, upper.b, upper.op, upper.rhs) == (1.0, 1.0, ">=", 10.0)


def test_inequality_passes_through_expansion():
    cons = parse_constraint("x <= 6")
    assert expand_equality(cons) == [cons]


def test_strict_operators_become_non_strict():
    assert coefficients("x < 5")[2] == "<="
    assert coefficients("y > 1")[2] == ">="


def test_unicode_and_alternate_glyphs():
    assert coefficients("2x + 3y ≤ 18") == (2.0, 3.0, "<=", 18.0)
    assert coefficients("2·x + 0,5y ≥ 1,5") == (2.0, 0.5, ">=", 1.5)
    assert coefficients("3×x - y <= 2") == (3.0, -1.0, "<=", 2.0)


def test_signs_decimals_and_case():
    assert coefficients("+x - y <= 3") == (1.0, -1.0, "<=", 3.0)
    assert coefficients("-.5x + 1.5y >= 2") == (-0.5, 1.5, ">=", 2.0)
    assert coefficients("X + Y <= 3") == (1.0, 1.0, "<=", 3.0)
    assert coefficients("2 x + 3 y <= 12") == (2.0, 3.0, "<=", 12.0)
    assert coefficients("2*x + 3*y <= 12") == (2.0, 3.0, "<=", 12.0)


def test_repeated_terms_are_summed_and_constants_move_right():
    assert coefficients("x + x - y <= 4") == (2.0, -1.0, "<=", 4.0)
    assert coefficients("x + 2 <= 5") == (1.0, 0.0, "<=", 3.0)


def test_empty_left_side_is_a_degenerate_constraint():
    assert coefficients("<= 5") == (0.0, 0.0, "<=", 5.0)


@pytest.mark.parametrize(
    "line",
    [
        "x + y",
        "xy <= 5",
        "2x + 3z <= 4",
        "x <= 5 <= 6",
        "x = 3 = 3",
        "x <= abc",
        "x <= inf",
        "x <= nan",
        "x y <= 2",
        "x + <= 2",
        "2 * <= 1",
    ],
)
def test_malformed_lines_are_rejected(line):
    assert parse_constraint(line) is None


def test_rejection_carries_a_reason():
    parsed = parse_constraint_line("xy <= 5")
    assert not parsed.ok
    assert parsed.constraint is None
    assert "unknown variable 'xy'" in parsed.error

    parsed = parse_constraint_line("x + y")
    assert parsed.error == "no comparison operator"


def test_source_keeps_the_original_text():
    cons = parse_constraint("  2x + 3y ≤ 18 ")
    assert cons.source == "2x + 3y ≤ 18"


def test_batch_parse_drops_bad_lines_and_expands_equalities():
    constraints, rejected = parse_constraints(["x <= 1", "", "garbage", "x + y = 2"])

    assert [c.op for c in constraints] == ["<=", "<=", ">="]
    assert len(rejected) == 1
    assert rejected[0].line == "garbage"
