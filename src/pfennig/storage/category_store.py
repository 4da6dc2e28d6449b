"""
Category source backed by config/categories.yml.

Every mutating call loads the current file, applies the change and writes it
back.
"""
from __future__ import annotations

import logging
from pathlib import Path

from pfennig.config import DEFAULT_CATEGORY, DEFAULT_CATEGORY_DISPLAY_NAME
from pfennig.model.category import Category, CategoryConfig, normalize_category_name
from pfennig.model.category_io import load_categories_config, save_categories_config

log = logging.getLogger(__name__)


class CategoryStore:
    def __init__(self, path: Path):
        self.path = path

    def load(self) -> CategoryConfig:
        return load_categories_config(self.path)

    def list_categories(self) -> list[Category]:
        return self.load().categories

    def find_category(self, name: str) -> Category | None:
        """Case-insensitive lookup by name."""
        return self.load().find_category(name)

    def ensure_defaults(self) -> Category:
        """Create the default 'Lebensmittel' category when it does not exist yet."""
        config = self.load()
        existing = config.find_category(DEFAULT_CATEGORY)
        if existing is not None:
            return existing
        cat = Category(name=DEFAULT_CATEGORY_DISPLAY_NAME)
        config.categories.append(cat)
        save_categories_config(self.path, config)
        log.info("Created default category %s", cat.name)
        return cat

    def ensure_category(self, name: str | None) -> str | None:
        """Return the id of the named category, creating it without budget if needed.

        New categories are stored under their lower-cased name. Blank names give None.
        """
        normalized = normalize_category_name(name)
        if normalized is None:
            return None
        config = self.load()
        found = config.find_category(normalized)
        if found is not None:
            return found.id
        cat = Category(name=normalized)
        config.categories.append(cat)
        save_categories_config(self.path, config)
        log.info("Created category %s", cat.name)
        return cat.id

    def set_budget(self, name: str, cents: int | None) -> Category | None:
        """Set or clear (cents=None) a category's monthly budget.

        Returns the updated category, or None when no such category exists.
        """
        config = self.load()
        cat = config.find_category(name)
        if cat is None:
            return None
        cat.monthly_budget_cents = cents
        save_categories_config(self.path, config)
        log.debug("Budget for %s set to %s", cat.name, cents)
        return cat

    def remove_category(self, name: str) -> Category | None:
        """Remove a category. Expenses keep their (now dangling) category id."""
        config = self.load()
        cat = config.find_category(name)
        if cat is None:
            return None
        config.categories = [c for c in config.categories if c.id != cat.id]
        save_categories_config(self.path, config)
        log.info("Removed category %s", cat.name)
        return cat


__all__ = ["CategoryStore"]
