from __future__ import annotations

import logging
import math
import re
from typing import Iterable, List, Optional, Tuple

from ..schemas import Constraint, ParsedLine

logger = logging.getLogger(__name__)

EMPTY_LINE = "empty line"
VARIABLES = ("x", "y")

_GLYPHS = (
    ("·", "*"),  # middle dot
    ("×", "*"),  # multiplication sign
    (",", "."),
    ("≤", "<="),
    ("≥", ">="),
)
_CMP = re.compile(r"(<=|>=|=|<|>)")
_TOKEN = re.compile(
    r"\s*(?:(?P<num>\d+\.?\d*|\.\d+)|(?P<ident>[A-Za-z_]\w*)|(?P<op>[+\-*]))"
)
_STRICT = {"<": "<=", ">": ">="}


class ConstraintSyntaxError(ValueError):
    """Raised by the tokenizer when a constraint line cannot be read."""


def parse_constraint(line: str) -> Optional[Constraint]:
    return parse_constraint_line(line).constraint


def parse_constraint_line(line: str) -> ParsedLine:
    """
    Parse one line such as ``2x + 3y <= 18`` or ``-x + 2y ≥ 4``.

    Failures are reported on the returned ParsedLine, never raised.
    """

    raw = line.strip()
    if not raw:
        return ParsedLine(line=line, error=EMPTY_LINE)
    try:
        constraint = _parse(raw)
    except ConstraintSyntaxError as exc:
        return ParsedLine(line=line, error=str(exc))
    return ParsedLine(line=line, constraint=constraint)


def expand_equality(constraint: Constraint) -> List[Constraint]:
    if constraint.op != "=":
        return [constraint]
    return [
        constraint.model_copy(update={"op": "<="}),
        constraint.model_copy(update={"op": ">="}),
    ]


def parse_constraints(lines: Iterable[str]) -> Tuple[List[Constraint], List[ParsedLine]]:
    """Parse and expand every line; malformed lines come back separately."""

    constraints: List[Constraint] = []
    rejected: List[ParsedLine] = []
    for line in lines:
        parsed = parse_constraint_line(line)
        if parsed.constraint is None:
            if parsed.error != EMPTY_LINE:
                logger.debug(f"Dropping constraint line {line!r}: {parsed.error}")
                rejected.append(parsed)
            continue
        constraints.extend(expand_equality(parsed.constraint))
    return constraints, rejected


def normalize_glyphs(text: str) -> str:
    for glyph, ascii_form in _GLYPHS:
        text = text.replace(glyph, ascii_form)
    return text


def _parse(raw: str) -> Constraint:
    text = normalize_glyphs(raw)

    match = _CMP.search(text)
    if not match:
        raise ConstraintSyntaxError("no comparison operator")
    op = match.group(1)
    parts = text.split(op)
    if len(parts) != 2:
        raise ConstraintSyntaxError(f"expected exactly one '{op}' operator")
    lhs_text, rhs_text = parts

    try:
        rhs = float(rhs_text.strip())
    except ValueError as exc:
        raise ConstraintSyntaxError(f"right-hand side '{rhs_text.strip()}' is not numeric") from exc
    if not math.isfinite(rhs):
        raise ConstraintSyntaxError(f"right-hand side '{rhs_text.strip()}' is not finite")

    coeffs, constant = _parse_expression(lhs_text)
    return Constraint(
        a=coeffs["x"],
        b=coeffs["y"],
        op=_STRICT.get(op, op),
        rhs=rhs - constant,
        source=raw,
    )


def _tokenize(text: str) -> List[Tuple[str, str]]:
    tokens: List[Tuple[str, str]] = []
    pos = 0
    end = len(text.rstrip())
    while pos < end:
        match = _TOKEN.match(text, pos)
        if not match:
            raise ConstraintSyntaxError(f"unexpected character '{text[pos:].strip()[0]}'")
        kind = match.lastgroup
        tokens.append((kind, match.group(kind)))
        pos = match.end()
    return tokens


def _parse_expression(text: str) -> Tuple[dict, float]:
    """Fold ``[sign][coef][*]var`` terms by variable; bare numbers are constants."""

    tokens = _tokenize(text)
    coeffs = {name: 0.0 for name in VARIABLES}
    constant = 0.0
    i = 0
    first = True

    def peek(offset: int = 0) -> Tuple[Optional[str], Optional[str]]:
        idx = i + offset
        return tokens[idx] if idx < len(tokens) else (None, None)

    while i < len(tokens):
        sign = 1.0
        kind, value = peek()
        if kind == "op" and value in "+-":
            sign = -1.0 if value == "-" else 1.0
            i += 1
        elif not first:
            raise ConstraintSyntaxError(f"missing '+' or '-' before '{value}'")
        first = False

        kind, value = peek()
        coef: Optional[float] = None
        if kind == "num":
            coef = float(value)
            i += 1
            if peek() == ("op", "*"):
                i += 1
                if peek()[0] != "ident":
                    raise ConstraintSyntaxError("expected a variable after '*'")
            kind, value = peek()
            if kind != "ident":
                constant += sign * coef
                continue
        if kind != "ident":
            raise ConstraintSyntaxError("expected a term")

        name = value.lower()
        if name not in coeffs:
            raise ConstraintSyntaxError(f"unknown variable '{value}'")
        coeffs[name] += sign * (1.0 if coef is None else coef)
        i += 1

    return coeffs, constant
