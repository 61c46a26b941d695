"""Arithmetic expressions on single-digit operands: conversion and evaluation."""

from __future__ import annotations

from collections.abc import Iterable

_DIGITS = "0123456789"
_PRECEDENCE = {"*": 3, "/": 3, "+": 2, "-": 2}


class ExpressionError(ValueError):
    """Raised for malformed expressions or undefined arithmetic."""


def _apply(left: int, right: int, operator: str) -> int:
    """Apply a binary operator; division truncates toward zero."""
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if right == 0:
        raise ExpressionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def simple_infix_to_postfix(infix: str) -> str:
    """Convert infix to postfix; every character except + - * / is an operand.

    Parentheses get no special meaning here; they pass through as operands.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in infix:
        if char not in _PRECEDENCE:
            output.append(char)
            continue
        while stack and _PRECEDENCE[char] <= _PRECEDENCE[stack[-1]]:
            output.append(stack.pop())
        stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def _evaluate(tokens: Iterable[str], left_first: bool) -> int:
    """Evaluate a stream of digit and operator tokens with a stack.

    ``left_first`` says whether the first value popped is the left operand
    (prefix notation read backwards) or the right one (postfix notation).
    """
    stack: list[int] = []
    for char in tokens:
        if char in _DIGITS:
            stack.append(int(char))
        elif char in _PRECEDENCE:
            if len(stack) < 2:
                raise ExpressionError(f"operator {char!r} lacks operands")
            first, second = stack.pop(), stack.pop()
            left, right = (first, second) if left_first else (second, first)
            stack.append(_apply(left, right, char))
        else:
            raise ExpressionError(f"unexpected character {char!r}")
    if not stack:
        raise ExpressionError("empty expression")
    return stack[-1]


def evaluate_digit_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits and + - * /."""
    return _evaluate(expression, left_first=False)


def _should_pop(top: str, incoming: str) -> bool:
    """True when the operator on the stack binds at least as tightly."""
    if top in "*/":
        return True
    if top in "+-":
        return incoming not in "*/"
    return False


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression with digits, + - * / and parentheses."""
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char in _DIGITS:
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unbalanced ')'")
            stack.pop()
        elif char in _PRECEDENCE:
            while stack and _should_pop(stack[-1], char):
                output.append(stack.pop())
            stack.append(char)
        else:
            raise ExpressionError(f"unexpected character {char!r}")
    while stack:
        operator = stack.pop()
        if operator == "(":
            raise ExpressionError("unbalanced '('")
        output.append(operator)
    return "".join(output)


def infix_to_prefix(expression: str) -> str:
    """Convert infix to prefix by reversing, converting to postfix and reversing."""
    mirrored = expression[::-1].translate(str.maketrans("()", ")("))
    return infix_to_postfix(mirrored)[::-1]


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits and + - * /."""
    return _evaluate(expression, left_first=False)


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single digits and + - * /."""
    return _evaluate(reversed(expression), left_first=True)