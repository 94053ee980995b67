"""Arithmetic expressions: direct evaluation, infix to postfix, and postfix evaluation."""

from __future__ import annotations

import re
from collections.abc import Iterable

_PRIORITY = {"+": 1, "-": 1, "*": 2, "/": 2}
_LEXEME_RE = re.compile(r"[0-9]+|.", re.DOTALL)


def _apply(op: str, a: int, b: int) -> int:
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def calculate(s: str) -> int:
    """Value of an integer expression with + - * /, parentheses and leading signs.

    Division truncates toward zero. Raises ValueError for a malformed expression
    and ZeroDivisionError on division by zero.
    """
    nums: list[int] = []
    ops: list[str] = []

    def reduce_once() -> None:
        op = ops.pop()
        if op == "(":
            raise ValueError("unbalanced '('")
        if len(nums) < 2:
            raise ValueError("operator lacks an operand")
        b = nums.pop()
        a = nums.pop()
        nums.append(_apply(op, a, b))

    for match in _LEXEME_RE.finditer(s):
        lexeme = match.group()
        if lexeme.isspace():
            continue
        if lexeme[0] in "0123456789":
            nums.append(int(lexeme))
        elif lexeme == "(":
            ops.append(lexeme)
        elif lexeme == ")":
            while ops and ops[-1] != "(":
                reduce_once()
            if not ops:
                raise ValueError("unbalanced ')'")
            ops.pop()
        elif lexeme in _PRIORITY:
            start = match.start()
            prev = s[start - 1] if start else None
            if lexeme in "+-" and (prev is None or prev == "(" or prev in _PRIORITY):
                nums.append(0)
            while ops and ops[-1] != "(" and _PRIORITY[ops[-1]] >= _PRIORITY[lexeme]:
                reduce_once()
            ops.append(lexeme)
        else:
            raise ValueError(f"unexpected character {lexeme!r}")

    while ops:
        reduce_once()
    if not nums:
        raise ValueError("empty expression")
    return nums[-1]


def infix_to_postfix(s: str) -> list[str]:
    """Items of the expression in reverse Polish order.

    Raises ValueError on a character that is not a digit, operator or parenthesis.
    """
    output: list[str] = []
    ops: list[str] = []
    for match in _LEXEME_RE.finditer(s):
        lexeme = match.group()
        if lexeme.isspace():
            continue
        if lexeme[0] in "0123456789":
            output.append(lexeme)
        elif lexeme == "(":
            ops.append(lexeme)
        elif lexeme == ")":
            while ops and ops[-1] != "(":
                output.append(ops.pop())
            if ops:
                ops.pop()
        elif lexeme in _PRIORITY:
            while ops and ops[-1] != "(" and _PRIORITY[ops[-1]] >= _PRIORITY[lexeme]:
                output.append(ops.pop())
            ops.append(lexeme)
        else:
            raise ValueError(f"unexpected character {lexeme!r}")
    output.extend(reversed(ops))
    return output


def eval_rpn(tokens: Iterable[str]) -> int:
    """Value of a reverse Polish expression; division truncates toward zero.

    Raises ValueError for a bad item or a malformed expression.
    """
    stack: list[int] = []
    for item in tokens:
        if item in _PRIORITY:
            if len(stack) < 2:
                raise ValueError(f"operator {item!r} lacks an operand")
            b = stack.pop()
            a = stack.pop()
            stack.append(_apply(item, a, b))
        else:
            stack.append(int(item))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]