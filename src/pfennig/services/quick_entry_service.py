"""
Quick entry service - turn one typed line into a stored expense.

Two steps so callers can preview before writing:
- plan(): parse the line and work out which category it belongs to
- commit(): create the category if needed and append the expense

NO IMPORTS FROM rich or typer. Stores are injected.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime

from pfennig.config import DEFAULT_CATEGORY
from pfennig.model.expense import Expense, ParseResult
from pfennig.parsing.quick_entry import parse
from pfennig.storage.category_store import CategoryStore
from pfennig.storage.expense_store import ExpenseStore

log = logging.getLogger(__name__)

EMPTY_INPUT_ERROR = "Please enter some text."
NO_AMOUNT_ERROR = "Amount not recognized."


@dataclass
class QuickEntryPlan:
    """Outcome of planning a quick entry. error is set when nothing can be stored."""

    line: str
    result: ParseResult | None
    category_name: str
    category_id: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def creates_category(self) -> bool:
        return self.ok and self.category_id is None


class QuickEntryService:
    def __init__(self, categories: CategoryStore, expenses: ExpenseStore):
        self.categories = categories
        self.expenses = expenses

    def plan(self, line: str, now: date | datetime) -> QuickEntryPlan:
        """Parse a line against the current category names.

        Untagged lines go to the default category. A missing amount is an error
        rather than a zero-cent expense.
        """
        config = self.categories.load()
        names = [DEFAULT_CATEGORY, *config.names()]
        result = parse(line, now, category_names=names)
        if result is None:
            return QuickEntryPlan(
                line=line, result=None, category_name=DEFAULT_CATEGORY, error=EMPTY_INPUT_ERROR
            )

        category_name = result.category_tag or DEFAULT_CATEGORY
        if not result.has_amount:
            return QuickEntryPlan(
                line=line, result=result, category_name=category_name, error=NO_AMOUNT_ERROR
            )

        existing = config.find_category(category_name)
        return QuickEntryPlan(
            line=line,
            result=result,
            category_name=existing.name if existing else category_name,
            category_id=existing.id if existing else None,
        )

    def commit(self, plan: QuickEntryPlan, note: str = "") -> Expense:
        """Persist a planned entry.

        Raises:
            ValueError: if the plan carries an error
        """
        if not plan.ok or plan.result is None:
            raise ValueError(f"Cannot store quick entry: {plan.error}")
        category_id = plan.category_id or self.categories.ensure_category(plan.category_name)
        expense = Expense(
            name=plan.result.name,
            amount_cents=plan.result.amount_cents,
            date=plan.result.date,
            category_id=category_id,
            note=note,
        )
        self.expenses.add_expense(expense)
        log.debug("Stored quick entry %s", expense.id)
        return expense


__all__ = ["EMPTY_INPUT_ERROR", "NO_AMOUNT_ERROR", "QuickEntryPlan", "QuickEntryService"]
