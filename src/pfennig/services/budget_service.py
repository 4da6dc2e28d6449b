"""
Budget Service - month-to-date spend and daily budget signals for a category.

Fetches the category, its expenses for the month and any manual spend override
through the injected stores, then hands plain numbers to budget_projector.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime

from pfennig.config import DEFAULT_CATEGORY, DEFAULT_OVERRIDE_SCOPE
from pfennig.model.category import Category, normalize_category_name
from pfennig.parsing.dates import reference_day
from pfennig.storage.category_store import CategoryStore
from pfennig.storage.expense_store import ExpenseStore
from pfennig.storage.override_store import OverrideStore

from .budget_projector import (
    BudgetStatus,
    month_to_date_spend,
    no_category_status,
    projected_allowance_today,
    remaining_pace_per_day,
    spend_override_key,
    year_month,
)

log = logging.getLogger(__name__)


@dataclass
class DailyBudget:
    """Both budget signals for one category and month."""

    category_name: str
    category: Category | None
    year_month: str
    spent_cents: int | None
    override_cents: int | None
    pace: BudgetStatus
    allowance: BudgetStatus

    @property
    def override_active(self) -> bool:
        return self.override_cents is not None


def override_scope(category_name: str | None) -> str:
    """Scope part of the override key for a category.

    The default category keeps the historical 'food_spent_override' scope.
    """
    normalized = normalize_category_name(category_name) or DEFAULT_CATEGORY
    if normalized == DEFAULT_CATEGORY:
        return DEFAULT_OVERRIDE_SCOPE
    slug = re.sub(r"\W+", "_", normalized).strip("_")
    return f"{slug}_spent_override"


class BudgetService:
    """Service for month-to-date spend and budget pacing."""

    def __init__(
        self,
        categories: CategoryStore,
        expenses: ExpenseStore,
        overrides: OverrideStore,
    ):
        self.categories = categories
        self.expenses = expenses
        self.overrides = overrides

    def override_key(self, today: date | datetime, category_name: str = DEFAULT_CATEGORY) -> str:
        return spend_override_key(today, override_scope(category_name))

    def get_spent_override(
        self, today: date | datetime, category_name: str = DEFAULT_CATEGORY
    ) -> int | None:
        return self.overrides.get_override(self.override_key(today, category_name))

    def set_spent_override(
        self, today: date | datetime, cents: int, category_name: str = DEFAULT_CATEGORY
    ) -> str:
        key = self.override_key(today, category_name)
        self.overrides.set_override(key, cents)
        return key

    def clear_spent_override(
        self, today: date | datetime, category_name: str = DEFAULT_CATEGORY
    ) -> bool:
        return self.overrides.clear_override(self.override_key(today, category_name))

    def month_to_date_spend(self, category: Category, today: date | datetime) -> tuple[int, int | None]:
        """Spend for the category in today's month.

        Returns:
            (spend in cents, override in cents or None). The spend already equals
            the override when one is set.
        """
        day = reference_day(today)
        override = self.get_spent_override(day, category.name)
        if override is not None:
            log.debug("Using spend override for %s: %d", category.name, override)
            return override, override
        expenses = self.expenses.list_expenses_for_category_and_month(category.id, year_month(day))
        return month_to_date_spend(expenses), None

    def daily_budget(
        self, today: date | datetime, category_name: str = DEFAULT_CATEGORY
    ) -> DailyBudget:
        """Compute both budget signals for a category.

        A missing category yields the muted 'no matching category' status for
        both signals without evaluating either formula.
        """
        day = reference_day(today)
        ym = year_month(day)
        category = self.categories.find_category(category_name)
        if category is None:
            status = no_category_status()
            return DailyBudget(
                category_name=category_name,
                category=None,
                year_month=ym,
                spent_cents=None,
                override_cents=None,
                pace=status,
                allowance=status,
            )

        spent, override = self.month_to_date_spend(category, day)
        return DailyBudget(
            category_name=category.name,
            category=category,
            year_month=ym,
            spent_cents=spent,
            override_cents=override,
            pace=remaining_pace_per_day(category.monthly_budget_cents, spent, day),
            allowance=projected_allowance_today(category.monthly_budget_cents, spent, day),
        )


__all__ = ["BudgetService", "DailyBudget", "override_scope"]
