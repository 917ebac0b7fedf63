"""Infix arithmetic evaluation with an operator stack (shunting-yard)."""

from __future__ import annotations

import operator
import re
from collections.abc import Callable

_LEXEME = re.compile(r"[0-9]+|\S")
_DIGITS = frozenset("0123456789")


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_BINARY: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}
_UNARY: dict[str, Callable[[int], int]] = {
    "u+": operator.pos,
    "u-": operator.neg,
}
_PRIORITY = {"(": -1, "+": 1, "-": 1, "*": 2, "/": 2, "u+": 3, "u-": 3}


def _apply(operands: list[int], op: str) -> None:
    if op in _UNARY:
        if not operands:
            raise ValueError("unary operator is missing its operand")
        operands.append(_UNARY[op](operands.pop()))
        return
    if op not in _BINARY:
        raise ValueError("unmatched '('")
    if len(operands) < 2:
        raise ValueError(f"operator {op!r} is missing an operand")
    right = operands.pop()
    left = operands.pop()
    operands.append(_BINARY[op](left, right))


def _evaluate(expression: str, allow_unary: bool) -> int:
    operands: list[int] = []
    operators: list[str] = []
    expect_operand = True
    for piece in _LEXEME.findall(expression):
        if piece[0] in _DIGITS:
            operands.append(int(piece))
            expect_operand = False
        elif piece == "(":
            operators.append(piece)
            expect_operand = True
        elif piece == ")":
            while operators and operators[-1] != "(":
                _apply(operands, operators.pop())
            if not operators:
                raise ValueError("unmatched ')'")
            operators.pop()
            expect_operand = False
        elif piece in _BINARY:
            op = "u" + piece if allow_unary and expect_operand else piece
            right_assoc = op in _UNARY
            priority = _PRIORITY[op]
            while operators and (
                _PRIORITY[operators[-1]] > priority
                or (not right_assoc and _PRIORITY[operators[-1]] == priority)
            ):
                _apply(operands, operators.pop())
            operators.append(op)
            expect_operand = True
        else:
            raise ValueError(f"unexpected character {piece!r}")
    while operators:
        _apply(operands, operators.pop())
    if len(operands) != 1:
        raise ValueError("malformed expression")
    return operands[0]


def evaluate(expression: str) -> int:
    """Evaluate an integer expression of ``+ - * /`` and brackets.

    Operators are binary and left associative; division truncates toward zero.
    """
    return _evaluate(expression, allow_unary=False)


def evaluate_with_unary(expression: str) -> int:
    """Like :func:`evaluate`, but ``+`` and ``-`` may also be unary prefixes."""
    return _evaluate(expression, allow_unary=True)