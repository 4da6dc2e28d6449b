"""List expenses as a Rich table, filtered by range and search text."""

from __future__ import annotations

from datetime import date

from rich.table import Table

from pfennig.money import format_cents
from pfennig.services.expense_query_service import DateRange, filter_expenses
from pfennig.workspace import Workspace

from .util import category_store, console, expense_store, fmt_date


def run(
    *,
    range_: DateRange = DateRange.month,
    query: str = "",
    limit: int | None = None,
    today: date | None = None,
    workspace: Workspace,
) -> int:
    """Show expenses newest first.

    Returns:
        Exit code (0 success, 1 unreadable ledger)
    """
    now = today or date.today()
    try:
        expenses = expense_store(workspace).list_expenses()
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1
    categories = category_store(workspace).load()

    rows = filter_expenses(expenses, categories, range_=range_, query=query, today=now)
    total = sum(e.amount_cents for e in rows)
    if limit is not None:
        rows = rows[:limit]

    title = f"Expenses ({range_.value})"
    if query:
        title += f" matching '{query}'"
    table = Table(title=title, show_lines=False)
    table.add_column("ID", style="blue", no_wrap=True)
    table.add_column("Date", style="white", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Category", style="cyan")
    table.add_column("Amount", style="yellow", justify="right")
    table.add_column("Note", style="dim")

    for e in rows:
        cat = categories.find_by_id(e.category_id)
        table.add_row(
            e.id[:8],
            fmt_date(e.date),
            e.name,
            cat.name if cat else "–",
            format_cents(e.amount_cents),
            e.note,
        )

    console.print(table)
    console.print(f"[bold]Total:[/] {format_cents(total)}")
    return 0
