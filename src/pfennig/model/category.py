from __future__ import annotations

"""
Category models for expense classification and monthly budgets.

Scope
- Pure Pydantic v2 models for categories and their monthly budgets
- Mirrors config/categories.yml structure
- No I/O operations (handled by category_io.py)

Names are unique ignoring case; lookups always compare normalized names.
"""

from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


def normalize_category_name(name: str | None) -> str | None:
    """Lower-case and trim a category name; None or blank gives None."""
    if name is None:
        return None
    n = name.strip().lower()
    return n or None


class Category(BaseModel):
    """Category definition with an optional monthly budget in cents."""

    id: str = Field(default_factory=lambda: uuid4().hex, description="Opaque identifier")
    name: str = Field(min_length=1, description="Category name")
    monthly_budget_cents: int | None = Field(
        default=None, ge=0, description="Monthly budget in cents, None if unset"
    )

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Category name cannot be blank")
        return v

    @property
    def normalized_name(self) -> str:
        return self.name.lower()

    def has_budget(self) -> bool:
        """A zero budget counts as unset."""
        return bool(self.monthly_budget_cents)


class CategoryConfig(BaseModel):
    """Root configuration for categories.

    Wraps the list of categories for clean YAML serialization.
    """

    categories: list[Category] = Field(
        default_factory=list, description="List of category definitions"
    )

    def find_category(self, name: str) -> Category | None:
        """Find a category by name, ignoring case."""
        target = normalize_category_name(name)
        if target is None:
            return None
        for cat in self.categories:
            if cat.normalized_name == target:
                return cat
        return None

    def find_by_id(self, category_id: str | None) -> Category | None:
        if not category_id:
            return None
        for cat in self.categories:
            if cat.id == category_id:
                return cat
        return None

    def names(self) -> list[str]:
        return [cat.name for cat in self.categories]


__all__ = [
    "Category",
    "CategoryConfig",
    "normalize_category_name",
]
