"""
Expense source backed by the ledger CSV at data/expenses.csv.
"""
from __future__ import annotations

import logging
from pathlib import Path

from pfennig.model.expense import Expense
from pfennig.model.ledger_io import dump_expenses_csv, load_expenses_csv

log = logging.getLogger(__name__)


class ExpenseStore:
    def __init__(self, ledger_path: Path):
        self.ledger_path = ledger_path

    def list_expenses(self) -> list[Expense]:
        """All expenses in ledger order; an absent ledger is empty."""
        if not self.ledger_path.exists():
            return []
        return load_expenses_csv(self.ledger_path.read_text(encoding="utf-8"))

    def list_expenses_for_category_and_month(
        self, category_id: str, year_month: str
    ) -> list[Expense]:
        """Expenses of one category whose date falls in year_month ('YYYY-MM')."""
        return [
            e
            for e in self.list_expenses()
            if e.category_id == category_id and e.year_month == year_month
        ]

    def get_expense(self, expense_id: str) -> Expense | None:
        for e in self.list_expenses():
            if e.id == expense_id:
                return e
        return None

    def find_by_prefix(self, prefix: str) -> list[Expense]:
        p = prefix.strip().lower()
        if not p:
            return []
        return [e for e in self.list_expenses() if e.id.lower().startswith(p)]

    def add_expense(self, expense: Expense) -> Expense:
        return self.add_expenses([expense])[0]

    def add_expenses(self, expenses: list[Expense]) -> list[Expense]:
        current = self.list_expenses()
        current.extend(expenses)
        self._write(current)
        log.debug("Added %d expense(s)", len(expenses))
        return expenses

    def update_expense(self, expense: Expense) -> bool:
        """Replace the stored expense with the same id. False if it does not exist."""
        current = self.list_expenses()
        for i, e in enumerate(current):
            if e.id == expense.id:
                current[i] = expense
                self._write(current)
                return True
        return False

    def delete_expense(self, expense_id: str) -> bool:
        current = self.list_expenses()
        kept = [e for e in current if e.id != expense_id]
        if len(kept) == len(current):
            return False
        self._write(kept)
        log.debug("Deleted expense %s", expense_id)
        return True

    def _write(self, expenses: list[Expense]) -> None:
        self.ledger_path.parent.mkdir(parents=True, exist_ok=True)
        self.ledger_path.write_text(dump_expenses_csv(expenses), encoding="utf-8")


__all__ = ["ExpenseStore"]
