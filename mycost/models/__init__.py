"""
Data Models Package

This package contains all Pydantic models used by MyCost.
Ledger records flow in; derived statistics flow out.
"""

from mycost.models.transaction import (
    Category,
    Transaction,
    TransactionKind,
)
from mycost.models.stats import (
    PERCENT_CHANGE_PLACEHOLDER,
    CategoryBucket,
    CategoryShare,
    DaySection,
    Granularity,
    MonthlySummary,
    PercentChange,
    PeriodBucket,
)
from mycost.models.presets import PRESET_CATEGORIES, presets_for
from mycost.models.validation import ValidationIssue, ValidationResult

__all__ = [
    # Ledger records
    "Category",
    "Transaction",
    "TransactionKind",
    # Derived statistics
    "PERCENT_CHANGE_PLACEHOLDER",
    "CategoryBucket",
    "CategoryShare",
    "DaySection",
    "Granularity",
    "MonthlySummary",
    "PercentChange",
    "PeriodBucket",
    # Presets
    "PRESET_CATEGORIES",
    "presets_for",
    # Validation
    "ValidationIssue",
    "ValidationResult",
]
