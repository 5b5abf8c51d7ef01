"""Statistics and reporting package."""

from mycost.stats.aggregator import (
    StatsAggregator,
    compare_summaries,
    percent_change,
)
from mycost.stats.formatting import (
    format_axis_value,
    format_percent,
    format_percent_change,
    format_signed_currency,
    period_label,
)
from mycost.stats.periods import (
    UnsupportedGranularityError,
    add_months,
    day_of,
    earliest_month_start,
    month_series,
    month_start,
    period_start,
    require_granularity,
    same_period,
    trailing_months,
    visible_trend_months,
    year_series,
    year_start,
)
from mycost.stats.sections import LedgerScope, day_sections, filter_transactions

__all__ = [
    "StatsAggregator",
    "compare_summaries",
    "percent_change",
    "format_axis_value",
    "format_percent",
    "format_percent_change",
    "format_signed_currency",
    "period_label",
    "UnsupportedGranularityError",
    "add_months",
    "day_of",
    "earliest_month_start",
    "month_series",
    "month_start",
    "period_start",
    "require_granularity",
    "same_period",
    "trailing_months",
    "visible_trend_months",
    "year_series",
    "year_start",
    "LedgerScope",
    "day_sections",
    "filter_transactions",
]
