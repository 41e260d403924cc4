"""Infix to postfix conversion and bracket balancing."""

from __future__ import annotations

_OPERATORS = "+-*/"
_PAIRS = {"(": ")", "{": "}", "[": "]"}


def precedence(char: str) -> int:
    """Return the binding strength of an operator; 0 for anything else."""
    if char in ("*", "/"):
        return 3
    if char in ("+", "-"):
        return 2
    return 0


def is_operator(char: str) -> bool:
    return char in ("+", "-", "*", "/")


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    output: list[str] = []
    operators: list[str] = []
    for char in infix:
        if not is_operator(char):
            output.append(char)
            continue
        while operators and precedence(char) <= precedence(operators[-1]):
            output.append(operators.pop())
        operators.append(char)
    output.extend(reversed(operators))
    return "".join(output)


def matches(opening: str, closing: str) -> bool:
    """Whether ``closing`` is the bracket that closes ``opening``."""
    return _PAIRS.get(opening) == closing


def is_balanced(expression: str) -> bool:
    """Whether every bracket in ``expression`` is closed in the right order."""
    pending: list[str] = []
    closers = set(_PAIRS.values())
    for char in expression:
        if char in _PAIRS:
            pending.append(char)
        elif char in closers:
            if not pending or not matches(pending.pop(), char):
                return False
    return not pending