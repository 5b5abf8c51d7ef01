"""
Core Ledger Records for MyCost

These models are the read-only input to the calculator and statistics
engine. The data layer builds them from whatever it stores and hands
over a flat snapshot list.

DESIGN DECISION: Records are frozen, denormalized values.
A Transaction carries a copy of its Category instead of a live
relationship, so the core never walks an object graph and can never
mutate what the data layer owns.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class TransactionKind(str, Enum):
    """Whether money came in or went out."""
    EXPENSE = "Expense"
    INCOME = "Income"

    @property
    def sign(self) -> int:
        """-1 for expenses, +1 for income."""
        return -1 if self is TransactionKind.EXPENSE else 1


class Category(BaseModel):
    """
    A user-visible category.

    Name uniqueness within a kind is enforced when categories are
    created (see mycost.validation), not here.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique category ID"
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Display label"
    )
    icon_name: str = Field(
        default="tag",
        description="Icon identifier, passed through to reports untouched"
    )
    color_hex: str = Field(
        default="#0A84FF",
        pattern=r"^#[0-9A-Fa-f]{6}$",
        description="Display color, passed through to reports untouched"
    )
    kind: TransactionKind = Field(
        ...,
        description="Which kind of transaction this category applies to"
    )
    sort_index: int = Field(
        default=0,
        ge=0,
        description="Position in the category picker"
    )


class Transaction(BaseModel):
    """
    A single recorded income or expense.

    CRITICAL: amount is never negative at rest.
    The sign comes from kind, see signed_amount.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique transaction ID"
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Unsigned amount"
    )
    kind: TransactionKind
    date: datetime = Field(
        ...,
        description="When it happened; only the calendar day matters to reports"
    )
    note: Optional[str] = Field(
        default=None,
        max_length=1000,
        description="Free text note"
    )
    category: Optional[Category] = Field(
        default=None,
        description="Snapshot of the assigned category, if any"
    )
    created_at: datetime = Field(
        default_factory=datetime.now
    )
    updated_at: datetime = Field(
        default_factory=datetime.now
    )

    @property
    def signed_amount(self) -> Decimal:
        """Exact amount with expenses negative."""
        return self.amount if self.kind is TransactionKind.INCOME else -self.amount

    @property
    def amount_value(self) -> float:
        """Amount as a float, for display-only statistics."""
        return float(self.amount)

    @property
    def category_name(self) -> Optional[str]:
        return self.category.name if self.category else None
