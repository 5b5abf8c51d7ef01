"""
Preset Category Catalog

The categories every new ledger starts with. IDs are fixed so that
two devices seeding independently end up with the same records.
Writing them into a store is the data layer's job.
"""

from uuid import UUID

from mycost.models.transaction import Category, TransactionKind


def _preset(
    id: str,
    name: str,
    icon_name: str,
    color_hex: str,
    kind: TransactionKind,
    sort_index: int,
) -> Category:
    return Category(
        id=UUID(id),
        name=name,
        icon_name=icon_name,
        color_hex=color_hex,
        kind=kind,
        sort_index=sort_index,
    )


PRESET_CATEGORIES: tuple[Category, ...] = (
    # Expense
    _preset("11111111-1111-1111-1111-111111111001", "Dining", "fork.knife", "#FF9F0A", TransactionKind.EXPENSE, 0),
    _preset("11111111-1111-1111-1111-111111111002", "Transport", "tram", "#0A84FF", TransactionKind.EXPENSE, 1),
    _preset("11111111-1111-1111-1111-111111111003", "Shopping", "bag", "#FF375F", TransactionKind.EXPENSE, 2),
    _preset("11111111-1111-1111-1111-111111111004", "Entertainment", "gamecontroller", "#BF5AF2", TransactionKind.EXPENSE, 3),
    _preset("11111111-1111-1111-1111-111111111005", "Medical", "cross", "#FF453A", TransactionKind.EXPENSE, 4),
    _preset("11111111-1111-1111-1111-111111111006", "Home", "house", "#32D74B", TransactionKind.EXPENSE, 5),
    _preset("11111111-1111-1111-1111-111111111007", "Education", "book", "#5E5CE6", TransactionKind.EXPENSE, 6),
    # Income
    _preset("22222222-2222-2222-2222-222222222001", "Salary", "banknote", "#32D74B", TransactionKind.INCOME, 0),
    _preset("22222222-2222-2222-2222-222222222002", "Bonus", "gift", "#64D2FF", TransactionKind.INCOME, 1),
    _preset("22222222-2222-2222-2222-222222222003", "Investment", "chart.line.uptrend.xyaxis", "#0A84FF", TransactionKind.INCOME, 2),
    _preset("22222222-2222-2222-2222-222222222004", "Other", "sparkles", "#FF453A", TransactionKind.INCOME, 3),
)


def presets_for(kind: TransactionKind) -> list[Category]:
    """Preset categories of one kind, in picker order."""
    return sorted(
        (category for category in PRESET_CATEGORIES if category.kind is kind),
        key=lambda category: category.sort_index,
    )
