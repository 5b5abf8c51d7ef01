"""Validation package."""

from mycost.validation.category import CategoryValidator, normalized_category_name

__all__ = ["CategoryValidator", "normalized_category_name"]
