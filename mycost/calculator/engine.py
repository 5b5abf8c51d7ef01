"""
Keypad Expression Engine

Turns what the user typed on the amount keypad (for example "12.5+3×2")
into a number.

DESIGN DECISION: A bad expression is not an error, it is "no value yet".
The keypad calls evaluate() on every keystroke to preview the result,
so half-typed input is the normal case. evaluate() returns None for
anything it cannot compute and the caller disables the confirm action.
It never substitutes 0 and never logs.

Grammar (left to right, no parentheses):
- numbers: digits with at most one "."
- operators: + - × ÷ (also accepted as + - * /)
- a "-" at the start or right after another operator is the sign of
  the next number, so "-5+3" is -2 and "4×-2" is -8
- one dangling operator at the end is ignored, so "7+" is 7
"""

import math
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Optional, Union


# A token is either a parsed number or a single operator character
Token = Union[float, str]

OPERATORS = "+-*/"

PRECEDENCE = {
    "*": 2,
    "/": 2,
    "+": 1,
    "-": 1,
}

_GLYPHS = {
    "×": "*",
    "÷": "/",
    "−": "-",
}


class ExpressionError(ValueError):
    """The expression cannot be turned into a number."""
    pass


def normalize_expression(expression: str) -> str:
    """Map keypad glyphs to ASCII operators and trim whitespace."""
    for glyph, operator in _GLYPHS.items():
        expression = expression.replace(glyph, operator)
    return expression.strip()


def _parse_number(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ExpressionError(f"Malformed number: {text!r}") from None


def tokenize(expression: str) -> list[Token]:
    """
    Split an expression into numbers and operators.

    Characters that are neither digits, ".", nor operators are skipped.
    A trailing operator (or a trailing lone sign) is dropped.

    Raises:
        ExpressionError: if a number segment is malformed, e.g. "1..2".
    """
    tokens: list[Token] = []
    current = ""
    last_was_operator = True

    for char in normalize_expression(expression):
        if char.isdecimal() or char == ".":
            current += char
            last_was_operator = False
        elif char in OPERATORS:
            if char == "-" and last_was_operator:
                # Unary sign, becomes part of the next number
                current += char
                last_was_operator = False
                continue
            if current:
                tokens.append(_parse_number(current))
                current = ""
            tokens.append(char)
            last_was_operator = True

    if current == "-":
        current = ""
    if current:
        tokens.append(_parse_number(current))

    if tokens and isinstance(tokens[-1], str):
        tokens.pop()

    return tokens


def _apply(values: list[float], operator: str) -> None:
    if len(values) < 2:
        raise ExpressionError(f"Operator {operator!r} is missing an operand")
    rhs = values.pop()
    lhs = values.pop()
    if operator == "+":
        values.append(lhs + rhs)
    elif operator == "-":
        values.append(lhs - rhs)
    elif operator == "*":
        values.append(lhs * rhs)
    elif operator == "/":
        if rhs == 0:
            raise ExpressionError("Division by zero")
        values.append(lhs / rhs)
    else:
        raise ExpressionError(f"Unknown operator: {operator!r}")


def evaluate_tokens(tokens: list[Token]) -> float:
    """
    Evaluate a token list with the two-stack algorithm.

    Before an operator is pushed, every stacked operator of equal or
    higher precedence is applied (left associativity).

    Raises:
        ExpressionError: on division by zero, a missing operand,
            or anything other than exactly one value left at the end.
    """
    values: list[float] = []
    operators: list[str] = []

    for token in tokens:
        if isinstance(token, str):
            while operators and PRECEDENCE[operators[-1]] >= PRECEDENCE[token]:
                _apply(values, operators.pop())
            operators.append(token)
        else:
            values.append(token)

    while operators:
        _apply(values, operators.pop())

    if len(values) != 1:
        raise ExpressionError("Expression does not reduce to a single value")
    return values[0]


def evaluate(expression: str) -> Optional[float]:
    """
    Compute the value of a keypad expression.

    Returns:
        The result, or None if the expression is empty, malformed,
        divides by zero, or leaves operators unresolved.
    """
    try:
        return evaluate_tokens(tokenize(expression))
    except ExpressionError:
        return None


def format_for_input(value: float, fraction_digits: int = 2) -> str:
    """
    Render a number as plain text for the editable expression field.

    No grouping separator, at most `fraction_digits` decimals
    (half-even rounding), trailing zeros dropped: 1234.5 -> "1234.5",
    3.0 -> "3". Non-finite values render as "0".
    """
    if not math.isfinite(value):
        return "0"

    with localcontext() as ctx:
        ctx.prec = 400
        quantum = Decimal(1).scaleb(-fraction_digits)
        rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_EVEN)

    if rounded.is_zero():
        return "0"

    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
