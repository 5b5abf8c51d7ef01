"""
Display Formatting for Reports

Text the reporting and ledger views show next to the numbers.
Kept here so every screen renders the same value the same way.
"""

import math
from datetime import date, datetime
from typing import Optional, Union

from mycost.calculator.engine import format_for_input
from mycost.config import get_settings
from mycost.models.stats import PERCENT_CHANGE_PLACEHOLDER, Granularity
from mycost.stats.periods import require_granularity


def format_percent(ratio: float, fraction_digits: int = 1) -> str:
    """0.125 -> "12.5%", 0.5 -> "50%"."""
    return f"{format_for_input(ratio * 100, fraction_digits=fraction_digits)}%"


def format_percent_change(ratio: Optional[float]) -> str:
    """
    Signed percent for a period-over-period change.

    None means the change could not be computed (previous period was
    zero) and renders as the placeholder, never as 0% or infinity.
    """
    if ratio is None or not math.isfinite(ratio):
        return PERCENT_CHANGE_PLACEHOLDER
    text = format_percent(abs(ratio))
    if text == "0%":
        return text
    return f"+{text}" if ratio > 0 else f"-{text}"


def format_signed_currency(value: float, symbol: Optional[str] = None) -> str:
    """
    Currency with an explicit sign, as shown on day headers and
    category rows: "+¥1,234.50", "-¥3.00", and "¥0.00" for zero.

    A value that rounds to zero cents is shown unsigned. The symbol
    defaults to the configured currency symbol.
    """
    if symbol is None:
        symbol = get_settings().stats.currency_symbol
    amount = f"{abs(value):,.2f}"
    formatted = f"{symbol}{amount}"
    if amount == "0.00":
        return formatted
    return f"-{formatted}" if value < 0 else f"+{formatted}"


def format_axis_value(value: float) -> str:
    """
    Short label for a chart gridline.

    Below 1000 the value is shown as a whole number; from 1000 up it
    is shown in thousands with one decimal: 1500 -> "1.5k", 2000 -> "2k".
    """
    if value < 1000:
        text = f"{value:.0f}"
        return "0" if text == "-0" else text
    thousands = math.floor(value / 100 + 0.5) / 10
    text = f"{thousands:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text}k"


def period_label(value: Union[date, datetime], granularity: Union[Granularity, str]) -> str:
    """Month label like "2024-03", or year label like "2024"."""
    if require_granularity(granularity) is Granularity.MONTH:
        return f"{value.year:04d}-{value.month:02d}"
    return f"{value.year:04d}"
