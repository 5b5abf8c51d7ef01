"""
Tests for the keypad calculator

The evaluator runs on every keystroke, so most cases here are
half-typed or malformed input that must yield None, not a crash.
"""

import pytest
from decimal import Decimal

from mycost.calculator import (
    ExpressionError,
    amount_from_expression,
    append_digit,
    append_dot,
    append_operator,
    clear,
    current_number,
    delete_last,
    display_expression,
    evaluate,
    evaluate_tokens,
    expression_from_amount,
    format_for_input,
    normalize_expression,
    tokenize,
)


class TestEvaluate:
    """Tests for evaluate()."""

    @pytest.mark.parametrize("expression, expected", [
        ("2+3×4", 14.0),
        ("10÷2-1", 4.0),
        ("-5+3", -2.0),
        ("12.5+3×2", 18.5),
        ("8-3-2", 3.0),
        ("100÷10÷5", 2.0),
        ("4×-2", -8.0),
        ("7", 7.0),
        ("0.5+.25", 0.75),
        ("2*3/4", 1.5),
    ])
    def test_valid_expressions(self, expression, expected):
        """Test precedence, associativity and unary minus."""
        assert evaluate(expression) == pytest.approx(expected)

    @pytest.mark.parametrize("expression", [
        "",
        "   ",
        "5÷0",
        "1..2",
        ".",
        "-",
        "--5",
        "5+×3",
        "×",
    ])
    def test_no_value(self, expression):
        """Test every failure path yields None, never 0."""
        assert evaluate(expression) is None

    def test_division_by_zero_mid_expression(self):
        """Test division by zero anywhere fails the whole expression."""
        assert evaluate("1+6÷0×2") is None

    def test_division_by_negative_zero(self):
        """Test -0 counts as zero."""
        assert evaluate("3÷-0") is None

    @pytest.mark.parametrize("prefix", ["7", "2+3×4", "-5+3", "10÷4", "1.5"])
    @pytest.mark.parametrize("operator", ["+", "-", "×", "÷"])
    def test_dangling_operator_ignored(self, prefix, operator):
        """Test a trailing operator does not change the value."""
        assert evaluate(prefix + operator) == evaluate(prefix)

    def test_dangling_sign_after_operator_ignored(self):
        """Test a lone sign typed after an operator is ignored."""
        assert evaluate("5×-") == 5.0

    def test_only_one_dangling_operator_dropped(self):
        """Test two trailing operators leave one unresolved, which the keypad never types."""
        assert evaluate("5-+") is None
        assert evaluate("5-") == 5.0
        assert append_operator("5-", "+") == "5+"

    def test_other_characters_skipped(self):
        """Test stray characters are skipped."""
        assert evaluate("1 + 2") == 3.0

    def test_ascii_minus_glyph(self):
        """Test the typographic minus is accepted."""
        assert evaluate("9−4") == 5.0

    def test_idempotent(self):
        """Test the same input always gives the same result."""
        assert evaluate("0.1+0.2×3") == evaluate("0.1+0.2×3")


class TestTokenize:
    """Tests for tokenize()."""

    def test_normalize_expression(self):
        """Test glyph normalization."""
        assert normalize_expression(" 3×4÷2−1 ") == "3*4/2-1"

    def test_tokens(self):
        """Test numbers and operators are split."""
        assert tokenize("12.5+3×2") == [12.5, "+", 3.0, "*", 2.0]

    def test_leading_minus_is_sign(self):
        """Test a leading minus binds to the number."""
        assert tokenize("-5+3") == [-5.0, "+", 3.0]

    def test_minus_after_operator_is_sign(self):
        """Test a minus after an operator binds to the number."""
        assert tokenize("4×-2") == [4.0, "*", -2.0]

    def test_trailing_operator_dropped(self):
        """Test a trailing operator is discarded."""
        assert tokenize("7+") == [7.0]

    def test_malformed_number_raises(self):
        """Test tokenize raises on a malformed number."""
        with pytest.raises(ExpressionError):
            tokenize("1..2")

    def test_empty(self):
        """Test empty input gives no tokens."""
        assert tokenize("") == []

    def test_evaluate_tokens_leftover_operator(self):
        """Test unresolved operators raise."""
        with pytest.raises(ExpressionError):
            evaluate_tokens([5.0, "+", "*", 3.0])

    def test_evaluate_tokens_empty(self):
        """Test an empty token list raises."""
        with pytest.raises(ExpressionError):
            evaluate_tokens([])


class TestFormatForInput:
    """Tests for format_for_input()."""

    @pytest.mark.parametrize("value, expected", [
        (12.5, "12.5"),
        (3.0, "3"),
        (1234.56, "1234.56"),
        (1234567.0, "1234567"),
        (0.0, "0"),
        (-0.001, "0"),
        (2.345678, "2.35"),
        (-7.25, "-7.25"),
        (0.1 + 0.2, "0.3"),
    ])
    def test_format(self, value, expected):
        """Test plain text with at most two decimals."""
        assert format_for_input(value) == expected

    def test_non_finite(self):
        """Test non-finite input renders as 0."""
        assert format_for_input(float("inf")) == "0"
        assert format_for_input(float("nan")) == "0"

    def test_round_trip_through_evaluate(self):
        """Test a formatted amount evaluates back to itself."""
        assert evaluate(format_for_input(99.95)) == pytest.approx(99.95)

    def test_fraction_digits(self):
        """Test the fractional digit limit is configurable."""
        assert format_for_input(1.23456, fraction_digits=4) == "1.2346"
        assert format_for_input(1.5, fraction_digits=0) == "2"


class TestKeypad:
    """Tests for keypad editing rules."""

    def test_display_empty(self):
        """Test an empty field displays 0."""
        assert display_expression("") == "0"
        assert display_expression("12+") == "12+"

    def test_append_digit_replaces_zero(self):
        """Test a lone 0 is replaced."""
        assert append_digit("0", "7") == "7"
        assert append_digit("10", "7") == "107"

    def test_append_digit_rejects_non_digit(self):
        """Test only single digits are accepted."""
        with pytest.raises(ValueError):
            append_digit("1", "+")

    def test_append_dot(self):
        """Test the decimal point rules."""
        assert append_dot("") == "0."
        assert append_dot("12") == "12."
        assert append_dot("12.5") == "12.5"
        assert append_dot("12.5+") == "12.5+0."
        assert append_dot("12.5+3") == "12.5+3."

    def test_current_number(self):
        """Test the segment after the last operator."""
        assert current_number("12+3.4") == "3.4"
        assert current_number("56") == "56"
        assert current_number("5×") == ""

    def test_append_operator(self):
        """Test operator append and replacement."""
        assert append_operator("5", "+") == "5+"
        assert append_operator("5+", "×") == "5×"
        assert append_operator("5×", "÷") == "5÷"

    def test_append_operator_on_empty(self):
        """Test only minus can start an expression."""
        assert append_operator("", "-") == "-"
        assert append_operator("", "+") == ""
        assert append_operator("-", "+") == ""

    def test_append_operator_rejects_unknown(self):
        """Test unknown keys are rejected."""
        with pytest.raises(ValueError):
            append_operator("5", "%")

    def test_delete_and_clear(self):
        """Test delete and clear."""
        assert delete_last("12+") == "12"
        assert delete_last("") == ""
        assert clear("12+3") == ""

    def test_typing_sequence(self):
        """Test a realistic sequence of key presses."""
        expr = ""
        expr = append_digit(expr, "1")
        expr = append_digit(expr, "2")
        expr = append_dot(expr)
        expr = append_digit(expr, "5")
        expr = append_operator(expr, "+")
        expr = append_operator(expr, "-")
        expr = append_digit(expr, "3")
        expr = append_operator(expr, "×")
        expr = append_digit(expr, "2")
        assert expr == "12.5-3×2"
        assert evaluate(expr) == pytest.approx(6.5)


class TestAmountConversion:
    """Tests for committing and re-seeding amounts."""

    def test_amount_from_expression(self):
        """Test the committed amount is quantized to cents."""
        assert amount_from_expression("12.5+3×2") == Decimal("18.50")
        assert amount_from_expression("10÷3") == Decimal("3.33")

    def test_amount_rejects_no_value(self):
        """Test no amount while the expression has no value."""
        assert amount_from_expression("") is None
        assert amount_from_expression("5÷0") is None

    def test_amount_rejects_negative(self):
        """Test negative results cannot be stored."""
        assert amount_from_expression("3-5") is None

    def test_amount_accepts_zero(self):
        """Test zero is a valid amount."""
        assert amount_from_expression("0") == Decimal("0.00")

    def test_expression_from_amount(self):
        """Test re-seeding the field from a stored amount."""
        assert expression_from_amount(Decimal("18.50")) == "18.5"
        assert expression_from_amount(Decimal("200.00")) == "200"

    def test_expression_from_amount_uses_settings(self, monkeypatch):
        """Test the fractional digit limit comes from settings."""
        monkeypatch.setenv("MYCOST_CALCULATOR_INPUT_FRACTION_DIGITS", "1")
        assert expression_from_amount(Decimal("2.25")) == "2.2"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
