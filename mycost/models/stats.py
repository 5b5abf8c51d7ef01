"""
Derived Statistics Models

Everything in this module is computed from a transaction snapshot
on every call and handed to the presentation layer read-only.
Nothing here is ever persisted or updated in place.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mycost.models.transaction import Transaction


PERCENT_CHANGE_PLACEHOLDER = "—"


class Granularity(str, Enum):
    """Calendar unit used to group dates."""
    MONTH = "month"
    YEAR = "year"


class PeriodBucket(BaseModel):
    """Income and expense totals for one calendar month or year."""
    model_config = ConfigDict(frozen=True)

    period_start: date
    income: float = Field(default=0.0, ge=0)
    expense: float = Field(default=0.0, ge=0)

    @property
    def net(self) -> float:
        return self.income - self.expense


class CategoryBucket(BaseModel):
    """
    Totals for one category within a period and kind.

    total is signed: negative for expense buckets, positive for income.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    icon_name: str
    color_hex: str
    total: float
    count: int = Field(ge=0)


class CategoryShare(BaseModel):
    """
    One slice of a category breakdown chart.

    start_fraction and end_fraction place the slice on a full circle
    (0.0 to 1.0), in the order the buckets were ranked.
    """
    model_config = ConfigDict(frozen=True)

    bucket: CategoryBucket
    share: float = Field(ge=0.0, le=1.0)
    start_fraction: float = Field(ge=0.0, le=1.0)
    end_fraction: float = Field(ge=0.0, le=1.0)


class DaySection(BaseModel):
    """All transactions of one calendar day, with the day's net total."""
    model_config = ConfigDict(frozen=True)

    date: date
    transactions: list[Transaction] = Field(default_factory=list)
    net_total: Decimal = Decimal("0")


class MonthlySummary(BaseModel):
    """Income, expense and balance for one period."""
    model_config = ConfigDict(frozen=True)

    income: float = 0.0
    expense: float = 0.0
    balance: float = 0.0

    @classmethod
    def from_totals(cls, income: float, expense: float) -> "MonthlySummary":
        return cls(income=income, expense=expense, balance=income - expense)

    @classmethod
    def empty(cls) -> "MonthlySummary":
        return cls()


class PercentChange(BaseModel):
    """
    Relative change between two values from different periods.

    ratio is None when previous is zero: the change is not computable
    and must be shown as such, never as 0% or infinity.
    """
    model_config = ConfigDict(frozen=True)

    current: float
    previous: float
    ratio: Optional[float] = None

    @property
    def is_computable(self) -> bool:
        return self.ratio is not None

    @property
    def display(self) -> str:
        """Signed percent text, or the placeholder when not computable."""
        # Imported here; formatting depends on this module for Granularity.
        from mycost.stats.formatting import format_percent_change
        return format_percent_change(self.ratio)
