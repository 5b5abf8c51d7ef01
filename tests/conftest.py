"""Shared fixtures for MyCost tests."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

import pytest

from mycost.config import StatsSettings, get_settings
from mycost.models import Category, Transaction, TransactionKind
from mycost.stats import StatsAggregator


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Each test sees settings loaded from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def stats_settings() -> StatsSettings:
    return StatsSettings(
        uncategorized_label="Uncategorized",
        fallback_icon="tag",
        fallback_color="#8E8E93",
        min_share=0.01,
    )


@pytest.fixture
def aggregator(stats_settings) -> StatsAggregator:
    return StatsAggregator(settings=stats_settings)


@pytest.fixture
def food() -> Category:
    return Category(
        name="Food",
        icon_name="fork.knife",
        color_hex="#FF9F0A",
        kind=TransactionKind.EXPENSE,
    )


@pytest.fixture
def transport() -> Category:
    return Category(
        name="Transport",
        icon_name="tram",
        color_hex="#0A84FF",
        kind=TransactionKind.EXPENSE,
    )


@pytest.fixture
def salary() -> Category:
    return Category(
        name="Salary",
        icon_name="banknote",
        color_hex="#32D74B",
        kind=TransactionKind.INCOME,
    )


def make_txn(
    amount: str,
    kind: TransactionKind,
    when: datetime,
    category: Optional[Category] = None,
    note: Optional[str] = None,
) -> Transaction:
    return Transaction(
        amount=Decimal(amount),
        kind=kind,
        date=when,
        category=category,
        note=note,
    )


def expense(amount: str, when: datetime, category: Optional[Category] = None, note: Optional[str] = None) -> Transaction:
    return make_txn(amount, TransactionKind.EXPENSE, when, category, note)


def income(amount: str, when: datetime, category: Optional[Category] = None, note: Optional[str] = None) -> Transaction:
    return make_txn(amount, TransactionKind.INCOME, when, category, note)
