"""Export all expenses to CSV."""

from __future__ import annotations

from pathlib import Path

from pfennig.model.ledger_io import export_expenses_csv
from pfennig.workspace import Workspace

from .util import category_store, console, expense_store

DEFAULT_EXPORT_NAME = "expenses_export.csv"


def run(*, output: Path | None = None, workspace: Workspace) -> int:
    """Write every expense in the exchange format (name, amount, date, category, note).

    Defaults to exports/expenses_export.csv inside the workspace.

    Returns:
        Exit code (0 success, 1 unreadable ledger)
    """
    target = output or (workspace.exports_dir / DEFAULT_EXPORT_NAME)
    try:
        expenses = expense_store(workspace).list_expenses()
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    text = export_expenses_csv(expenses, category_store(workspace).load())
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")
    console.print(f"[green]Exported {len(expenses)} expense(s)[/] to {target}")
    return 0
