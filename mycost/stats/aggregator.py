"""
Statistics Aggregation Engine

DESIGN DECISION: Aggregation is a pure function of a snapshot.
The reporting view calls in whenever the transaction list or the
selected period changes, and every call recomputes from the full
list. There is no cache and no incremental update; the same input
always produces the same output.

Sums are accumulated exactly on the Decimal amounts and converted to
float once per bucket. Floats are fine here because these numbers are
only ever displayed, never written back to the ledger.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence, Union

from mycost.config import StatsSettings, get_settings
from mycost.models.stats import (
    CategoryBucket,
    CategoryShare,
    Granularity,
    MonthlySummary,
    PercentChange,
    PeriodBucket,
)
from mycost.models.transaction import Transaction, TransactionKind
from mycost.observability import get_logger
from mycost.stats.periods import (
    DateLike,
    add_months,
    period_start,
    require_granularity,
    same_period,
)


SUMMARY_FIELDS = ("income", "expense", "balance")


@dataclass
class _CategoryGroup:
    icon_name: str
    color_hex: str
    total: Decimal = Decimal(0)
    count: int = 0


def _to_float(value: Decimal) -> float:
    # Zero totals come out as 0.0, never -0.0
    return float(value) if value else 0.0


def percent_change(current: float, previous: float) -> PercentChange:
    """
    (current - previous) / previous.

    When previous is zero the change is not computable and ratio is None.
    """
    if previous == 0:
        return PercentChange(current=current, previous=previous, ratio=None)
    return PercentChange(
        current=current,
        previous=previous,
        ratio=(current - previous) / previous,
    )


def compare_summaries(
    current: MonthlySummary,
    previous: MonthlySummary,
    field: str = "expense",
) -> PercentChange:
    """Percent change of one summary field between two periods."""
    if field not in SUMMARY_FIELDS:
        raise ValueError(f"Unknown summary field: {field!r}. Allowed: {SUMMARY_FIELDS}")
    return percent_change(getattr(current, field), getattr(previous, field))


class StatsAggregator:
    """
    Computes period and category statistics for the reporting views.

    GUARANTEES:
    - Empty input gives empty buckets and zero summaries, never an error
    - Bucket totals are exact sums of the matching transactions
    - Category names are grouped by exact string; folding case and
      diacritics is done when categories are created, not here
    """

    def __init__(self, settings: Optional[StatsSettings] = None):
        """
        Initialize the aggregator.

        Args:
            settings: Labels and thresholds for reports.
                      If None, loaded from the environment.
        """
        self._settings = settings or get_settings().stats
        self._logger = get_logger(__name__)

    @property
    def settings(self) -> StatsSettings:
        return self._settings

    # -------------------------------------------------------------------------
    # Period buckets
    # -------------------------------------------------------------------------

    def monthly_buckets(
        self,
        anchors: Sequence[DateLike],
        transactions: Iterable[Transaction],
    ) -> list[PeriodBucket]:
        """One income/expense bucket per anchor month, in anchor order."""
        return self._period_buckets(anchors, transactions, Granularity.MONTH)

    def yearly_buckets(
        self,
        anchors: Sequence[DateLike],
        transactions: Iterable[Transaction],
    ) -> list[PeriodBucket]:
        """One income/expense bucket per anchor year, in anchor order."""
        return self._period_buckets(anchors, transactions, Granularity.YEAR)

    def _period_buckets(
        self,
        anchors: Sequence[DateLike],
        transactions: Iterable[Transaction],
        granularity: Granularity,
    ) -> list[PeriodBucket]:
        starts = [period_start(anchor, granularity) for anchor in anchors]
        totals: dict[date, dict[TransactionKind, Decimal]] = {
            start: {TransactionKind.INCOME: Decimal(0), TransactionKind.EXPENSE: Decimal(0)}
            for start in starts
        }

        matched = 0
        for txn in transactions:
            key = period_start(txn.date, granularity)
            # Transactions outside every requested period are left out
            if key in totals:
                totals[key][txn.kind] += txn.amount
                matched += 1

        buckets = [
            PeriodBucket(
                period_start=start,
                income=_to_float(totals[start][TransactionKind.INCOME]),
                expense=_to_float(totals[start][TransactionKind.EXPENSE]),
            )
            for start in starts
        ]

        self._logger.debug(
            "period_buckets_computed",
            granularity=granularity.value,
            anchor_count=len(starts),
            matched_count=matched,
        )
        return buckets

    # -------------------------------------------------------------------------
    # Period filtering and summaries
    # -------------------------------------------------------------------------

    def transactions_in_period(
        self,
        reference: DateLike,
        granularity: Union[Granularity, str],
        transactions: Iterable[Transaction],
    ) -> list[Transaction]:
        """Transactions in the same calendar month (or year) as reference."""
        granularity = require_granularity(granularity)
        return [
            txn for txn in transactions
            if same_period(txn.date, reference, granularity)
        ]

    def period_summary(
        self,
        reference: DateLike,
        granularity: Union[Granularity, str],
        transactions: Iterable[Transaction],
    ) -> MonthlySummary:
        """Income, expense and balance for the period containing reference."""
        income = Decimal(0)
        expense = Decimal(0)
        for txn in self.transactions_in_period(reference, granularity, transactions):
            if txn.kind is TransactionKind.INCOME:
                income += txn.amount
            else:
                expense += txn.amount
        return MonthlySummary.from_totals(_to_float(income), _to_float(expense))

    def monthly_summary(
        self,
        reference: DateLike,
        transactions: Iterable[Transaction],
    ) -> MonthlySummary:
        """Income, expense and balance for the month containing reference."""
        return self.period_summary(reference, Granularity.MONTH, transactions)

    # -------------------------------------------------------------------------
    # Category breakdown
    # -------------------------------------------------------------------------

    def category_buckets(
        self,
        reference: DateLike,
        granularity: Union[Granularity, str],
        kind: Union[TransactionKind, str],
        transactions: Iterable[Transaction],
    ) -> list[CategoryBucket]:
        """
        Per-category totals for one kind within the period containing reference.

        Totals are signed (expenses negative). Icon and color come from
        the first transaction seen in each group. Sorted by descending
        absolute total, ties broken by name.
        """
        kind = TransactionKind(kind)
        groups: dict[str, _CategoryGroup] = {}

        for txn in self.transactions_in_period(reference, granularity, transactions):
            if txn.kind is not kind:
                continue

            name = txn.category_name or self._settings.uncategorized_label
            group = groups.get(name)
            if group is None:
                if txn.category is not None:
                    group = _CategoryGroup(txn.category.icon_name, txn.category.color_hex)
                else:
                    group = _CategoryGroup(
                        self._settings.fallback_icon,
                        self._settings.fallback_color,
                    )
                groups[name] = group

            group.total += txn.amount
            group.count += 1

        buckets = [
            CategoryBucket(
                name=name,
                icon_name=group.icon_name,
                color_hex=group.color_hex,
                total=_to_float(group.total * kind.sign),
                count=group.count,
            )
            for name, group in groups.items()
        ]
        buckets.sort(key=lambda bucket: (-abs(bucket.total), bucket.name))

        self._logger.debug(
            "category_buckets_computed",
            kind=kind.value,
            granularity=require_granularity(granularity).value,
            bucket_count=len(buckets),
        )
        return buckets

    def top_categories(
        self,
        reference: DateLike,
        granularity: Union[Granularity, str],
        kind: Union[TransactionKind, str],
        transactions: Iterable[Transaction],
        limit: int,
    ) -> list[CategoryBucket]:
        """The `limit` largest category buckets."""
        if limit <= 0:
            return []
        return self.category_buckets(reference, granularity, kind, transactions)[:limit]

    def category_shares(
        self,
        buckets: Sequence[CategoryBucket],
        min_share: Optional[float] = None,
    ) -> list[CategoryShare]:
        """
        Chart slices for a ranked bucket list.

        Each slice's share is its absolute total over the sum of absolute
        totals. Slices are laid out in bucket order and those below
        min_share (default from settings) are dropped after layout, so
        the remaining slices keep their positions.
        """
        if min_share is None:
            min_share = self._settings.min_share

        grand_total = sum(abs(bucket.total) for bucket in buckets)
        if grand_total <= 0:
            return []

        shares = []
        running = 0.0
        for bucket in buckets:
            value = abs(bucket.total)
            start = running / grand_total
            running += value
            shares.append(CategoryShare(
                bucket=bucket,
                share=min(value / grand_total, 1.0),
                start_fraction=min(start, 1.0),
                end_fraction=min(running / grand_total, 1.0),
            ))

        return [share for share in shares if share.share >= min_share]

    # -------------------------------------------------------------------------
    # Period-over-period comparison
    # -------------------------------------------------------------------------

    def month_over_month(
        self,
        reference: DateLike,
        transactions: Sequence[Transaction],
        field: str = "expense",
    ) -> PercentChange:
        """Change of one summary field from the previous month to reference's month."""
        current = self.monthly_summary(reference, transactions)
        previous = self.monthly_summary(add_months(reference, -1), transactions)
        return compare_summaries(current, previous, field)

    def year_over_year(
        self,
        reference: DateLike,
        transactions: Sequence[Transaction],
        field: str = "expense",
    ) -> PercentChange:
        """Change of one summary field from the same month last year."""
        current = self.monthly_summary(reference, transactions)
        previous = self.monthly_summary(add_months(reference, -12), transactions)
        return compare_summaries(current, previous, field)
