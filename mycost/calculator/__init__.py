"""Keypad calculator package."""

from mycost.calculator.engine import (
    ExpressionError,
    evaluate,
    evaluate_tokens,
    format_for_input,
    normalize_expression,
    tokenize,
)
from mycost.calculator.keypad import (
    amount_from_expression,
    append_digit,
    append_dot,
    append_operator,
    clear,
    current_number,
    delete_last,
    display_expression,
    expression_from_amount,
)

__all__ = [
    "ExpressionError",
    "evaluate",
    "evaluate_tokens",
    "format_for_input",
    "normalize_expression",
    "tokenize",
    "amount_from_expression",
    "append_digit",
    "append_dot",
    "append_operator",
    "clear",
    "current_number",
    "delete_last",
    "display_expression",
    "expression_from_amount",
]
