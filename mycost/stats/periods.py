"""
Calendar Period Helpers

Reports group by calendar day, month and year. Time of day never
matters, and a datetime is bucketed by its own calendar fields
(aware datetimes are not converted to another zone first).
"""

from datetime import date, datetime
from typing import Iterable, Optional, Union

from mycost.config import get_settings
from mycost.models.stats import Granularity
from mycost.models.transaction import Transaction


DateLike = Union[date, datetime]


class UnsupportedGranularityError(ValueError):
    """A granularity other than month or year was requested."""
    pass


def require_granularity(granularity: Union[Granularity, str]) -> Granularity:
    """
    Coerce to Granularity.

    Raises:
        UnsupportedGranularityError: for any other value. This is a
            programming error and is not meant to be recovered from.
    """
    try:
        return Granularity(granularity)
    except ValueError:
        raise UnsupportedGranularityError(
            f"Unsupported granularity: {granularity!r}. "
            f"Allowed: {[g.value for g in Granularity]}"
        ) from None


def day_of(value: DateLike) -> date:
    """Calendar day, time of day stripped."""
    if isinstance(value, datetime):
        return value.date()
    return value


def month_start(value: DateLike) -> date:
    return date(value.year, value.month, 1)


def year_start(value: DateLike) -> date:
    return date(value.year, 1, 1)


def period_start(value: DateLike, granularity: Union[Granularity, str]) -> date:
    """First day of the month or year containing value."""
    if require_granularity(granularity) is Granularity.MONTH:
        return month_start(value)
    return year_start(value)


def same_period(a: DateLike, b: DateLike, granularity: Union[Granularity, str]) -> bool:
    """Do a and b fall in the same calendar month (or year)?"""
    if require_granularity(granularity) is Granularity.MONTH:
        return (a.year, a.month) == (b.year, b.month)
    return a.year == b.year


def add_months(value: DateLike, months: int) -> date:
    """Month start `months` away from the month containing value."""
    index = value.year * 12 + (value.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_series(start: DateLike, end: DateLike) -> list[date]:
    """Every month start from start's month to end's month, inclusive."""
    current = month_start(start)
    last = month_start(end)
    months = []
    while current <= last:
        months.append(current)
        current = add_months(current, 1)
    return months


def year_series(start: DateLike, end: DateLike) -> list[date]:
    """Every year start from start's year to end's year, inclusive."""
    return [date(year, 1, 1) for year in range(start.year, end.year + 1)]


def trailing_months(reference: DateLike, count: int) -> list[date]:
    """
    The `count` month starts ending with reference's month, oldest first.

    trailing_months(date(2024, 3, 15), 3) -> [2024-01-01, 2024-02-01, 2024-03-01]
    """
    if count <= 0:
        return []
    latest = month_start(reference)
    return [add_months(latest, -offset) for offset in range(count - 1, -1, -1)]


def earliest_month_start(
    transactions: Iterable[Transaction],
    fallback: DateLike,
) -> date:
    """Month start of the oldest transaction, or of fallback when there are none."""
    dates = [day_of(txn.date) for txn in transactions]
    if not dates:
        return month_start(fallback)
    return month_start(min(dates))


def visible_trend_months(
    reference: DateLike,
    transactions: Iterable[Transaction],
    count: Optional[int] = None,
) -> list[date]:
    """
    Months the trend chart shows before the user scrolls.

    The last `count` months ending with reference's month, but never
    starting before the oldest transaction's month. count defaults to
    the configured trend_visible_months; values below 1 show only the
    reference month.
    """
    if count is None:
        count = get_settings().stats.trend_visible_months
    latest = month_start(reference)
    desired = add_months(latest, -max(count - 1, 0))
    start = max(earliest_month_start(transactions, fallback=latest), desired)
    return month_series(min(start, latest), latest)
