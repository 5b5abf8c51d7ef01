"""
Ledger List Sections

The ledger screen lists transactions grouped by day, newest day first,
with each day's net total in the header. The net total stays a Decimal:
unlike the charts, it is a ledger figure and must add up to the cent.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional, Union

from mycost.models.stats import DaySection, Granularity
from mycost.models.transaction import Transaction, TransactionKind
from mycost.stats.periods import DateLike, day_of, same_period


class LedgerScope(str, Enum):
    """Which slice of the ledger the list shows."""
    ALL = "all"
    MONTH = "month"


def day_sections(transactions: Iterable[Transaction]) -> list[DaySection]:
    """
    Group transactions by calendar day.

    Within a day, transactions keep their input order. Days are sorted
    most recent first.
    """
    grouped: dict[date, list[Transaction]] = {}
    for txn in transactions:
        grouped.setdefault(day_of(txn.date), []).append(txn)

    sections = [
        DaySection(
            date=day,
            transactions=items,
            net_total=sum((txn.signed_amount for txn in items), Decimal(0)),
        )
        for day, items in grouped.items()
    ]
    sections.sort(key=lambda section: section.date, reverse=True)
    return sections


def _matches_query(txn: Transaction, needle: str) -> bool:
    note = (txn.note or "").lower()
    category = (txn.category_name or "").lower()
    return needle in note or needle in category


def filter_transactions(
    transactions: Iterable[Transaction],
    scope: LedgerScope = LedgerScope.ALL,
    query: str = "",
    reference: Optional[DateLike] = None,
    kind: Optional[Union[TransactionKind, str]] = None,
) -> list[Transaction]:
    """
    Apply the ledger's type picker, scope and search box, in that order.

    Args:
        scope: ALL keeps everything, MONTH keeps reference's month.
        query: Case-insensitive substring matched against the note and
               the category name. Blank means no filtering.
        reference: Date that defines "this month". Defaults to now.
        kind: Keep only expenses or only income. None keeps both.
    """
    scope = LedgerScope(scope)
    result = list(transactions)

    if kind is not None:
        kind = TransactionKind(kind)
        result = [txn for txn in result if txn.kind is kind]

    if scope is LedgerScope.MONTH:
        reference = reference or datetime.now()
        result = [
            txn for txn in result
            if same_period(txn.date, reference, Granularity.MONTH)
        ]

    needle = query.strip().lower()
    if needle:
        result = [txn for txn in result if _matches_query(txn, needle)]

    return result
