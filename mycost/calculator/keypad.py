"""
Keypad Editing Rules

The amount field is a plain string that the keypad edits one key at
a time. These functions take the current text and return the new text;
they hold no state, so the host keeps the string wherever it likes.
"""

import math
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Optional

from mycost.calculator.engine import evaluate, format_for_input
from mycost.config import get_settings


# Operator keys as they appear in the field
OPERATOR_GLYPHS = "+-×÷"

AMOUNT_QUANTUM = Decimal("0.01")


def _is_operator(char: str) -> bool:
    return char in OPERATOR_GLYPHS


def display_expression(expression: str) -> str:
    """What the amount display shows for the current text."""
    return expression if expression else "0"


def current_number(expression: str) -> str:
    """The number segment after the last operator."""
    last = max(expression.rfind(glyph) for glyph in OPERATOR_GLYPHS)
    return expression[last + 1:] if last >= 0 else expression


def append_digit(expression: str, digit: str) -> str:
    """Append a digit; a lone "0" is replaced rather than extended."""
    if len(digit) != 1 or not digit.isdecimal():
        raise ValueError(f"Not a single digit: {digit!r}")
    if expression == "0":
        return digit
    return expression + digit


def append_dot(expression: str) -> str:
    """Start the fractional part of the current number, at most once."""
    current = current_number(expression)
    if "." in current:
        return expression
    if not current:
        return expression + "0."
    return expression + "."


def append_operator(expression: str, operator: str) -> str:
    """
    Append an operator key.

    A trailing operator is replaced by the new one. On an empty field
    only "-" is accepted, as the sign of the first number.
    """
    if not _is_operator(operator) or len(operator) != 1:
        raise ValueError(f"Not an operator key: {operator!r}")
    if expression and _is_operator(expression[-1]):
        expression = expression[:-1]
    if not expression:
        return "-" if operator == "-" else ""
    return expression + operator


def delete_last(expression: str) -> str:
    return expression[:-1]


def clear(expression: str) -> str:
    return ""


def amount_from_expression(expression: str) -> Optional[Decimal]:
    """
    The amount to store when the user confirms.

    None while the expression has no value or evaluates below zero,
    which is when the confirm key stays disabled. Stored amounts are
    unsigned; the transaction kind carries the sign.
    """
    value = evaluate(expression)
    if value is None or value < 0 or not math.isfinite(value):
        return None
    with localcontext() as ctx:
        ctx.prec = 400
        return Decimal(repr(value)).quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_EVEN)


def expression_from_amount(amount: Decimal) -> str:
    """Seed the field from a stored amount when editing a transaction."""
    digits = get_settings().calculator.input_fraction_digits
    return format_for_input(float(amount), fraction_digits=digits)
