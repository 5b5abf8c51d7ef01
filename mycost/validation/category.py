"""
Category Name Validation

DESIGN DECISION: Category names are unique per kind under a forgiving
comparison. "Café", "cafe" and " CAFE " are the same category to a
user, so they are the same category here too.

This check runs when a category is created or renamed. The statistics
engine deliberately does NOT fold names: by the time transactions are
aggregated, names are already unique and are grouped by exact string.
"""

import unicodedata
from typing import Iterable, Optional, Union
from uuid import UUID

from mycost.config import StatsSettings, get_settings
from mycost.models.transaction import Category, TransactionKind
from mycost.models.validation import ValidationIssue, ValidationResult


def normalized_category_name(name: str) -> str:
    """
    Comparison key for a category name.

    Trims and collapses inner whitespace, drops diacritics (NFKD
    decomposition without combining marks) and folds case.
    """
    decomposed = unicodedata.normalize("NFKD", name.strip())
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return " ".join(stripped.split()).casefold()


class CategoryValidator:
    """
    Validates a proposed category name before it is saved.

    Checks:
    - Name is not blank
    - Name fits the display limit
    - No other category of the same kind has an equivalent name
    - Name does not collide with the "uncategorized" report label
    """

    def __init__(
        self,
        settings: Optional[StatsSettings] = None,
        max_length: int = 50,
    ):
        """
        Initialize validator.

        Args:
            settings: Report settings, for the uncategorized label.
                      If None, loaded from the environment.
            max_length: Longest accepted name.
        """
        self._settings = settings or get_settings().stats
        self._max_length = max_length

    def find_duplicate(
        self,
        name: str,
        kind: Union[TransactionKind, str],
        existing: Iterable[Category],
        editing_id: Optional[UUID] = None,
    ) -> Optional[Category]:
        """
        The existing category of the same kind whose name matches, if any.

        The category being edited (editing_id) never counts as its own
        duplicate.
        """
        kind = TransactionKind(kind)
        key = normalized_category_name(name)
        for category in existing:
            if category.kind is not kind:
                continue
            if editing_id is not None and category.id == editing_id:
                continue
            if normalized_category_name(category.name) == key:
                return category
        return None

    def validate(
        self,
        name: str,
        kind: Union[TransactionKind, str],
        existing: Iterable[Category],
        editing_id: Optional[UUID] = None,
    ) -> ValidationResult:
        """
        Validate a proposed name for a new or renamed category.

        Returns a ValidationResult; is_valid is False when any
        error-level issue was found.
        """
        trimmed = name.strip()
        issues = []

        if not trimmed:
            issues.append(ValidationIssue(
                field="name",
                issue_type="missing",
                message="Category name is required",
                severity="error",
            ))
            return ValidationResult(subject=trimmed, issues=issues)

        if len(trimmed) > self._max_length:
            issues.append(ValidationIssue(
                field="name",
                issue_type="too_long",
                message=f"Category name is longer than {self._max_length} characters",
                severity="error",
                suggested_fix="Use a shorter name",
            ))

        duplicate = self.find_duplicate(trimmed, kind, existing, editing_id)
        if duplicate is not None:
            kind_label = TransactionKind(kind).value.lower()
            issues.append(ValidationIssue(
                field="name",
                issue_type="duplicate",
                message=f"\"{trimmed}\" already exists among {kind_label} categories",
                severity="error",
                suggested_fix=f"Use the existing \"{duplicate.name}\" category",
            ))

        if normalized_category_name(trimmed) == normalized_category_name(
            self._settings.uncategorized_label
        ):
            issues.append(ValidationIssue(
                field="name",
                issue_type="reserved_name",
                message=(
                    f"\"{trimmed}\" matches the label used for transactions "
                    "without a category; reports will merge them"
                ),
                severity="warning",
            ))

        return ValidationResult(subject=trimmed, issues=issues)
