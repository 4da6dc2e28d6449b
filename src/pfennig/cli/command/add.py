"""Quick entry: parse one free-text line and store it as an expense."""

from __future__ import annotations

from datetime import date

from rich.table import Table

from pfennig.services.quick_entry_service import QuickEntryPlan, QuickEntryService
from pfennig.workspace import Workspace

from .util import category_store, console, dry_run_notice, expense_store, fmt_cents, fmt_date


def _show_plan(plan: QuickEntryPlan) -> None:
    result = plan.result
    table = Table(title="Quick Entry", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("Name", result.name)
    table.add_row(
        "Amount",
        fmt_cents(result.amount_cents) if result.amount_cents is not None else "[red]–[/]",
    )
    table.add_row("Date", fmt_date(result.date))
    category = plan.category_name
    if plan.creates_category:
        category += " [dim](new)[/]"
    table.add_row("Category", category)
    console.print(table)


def run(
    *,
    text: str,
    note: str = "",
    today: date | None = None,
    workspace: Workspace,
    write: bool = False,
) -> int:
    """Parse a quick-entry line, preview it, and store it with --write.

    Returns:
        Exit code (0 success, 1 nothing to store, 2 corrupt data)
    """
    now = today or date.today()
    service = QuickEntryService(category_store(workspace), expense_store(workspace))

    plan = service.plan(text, now)
    if plan.result is not None:
        _show_plan(plan)
    if not plan.ok:
        console.print(f"[red]Error:[/] {plan.error}")
        return 1

    if not write:
        dry_run_notice()
        return 0

    try:
        expense = service.commit(plan, note=note)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 2
    console.print(f"[green]Saved expense[/] [bold]{expense.id[:8]}[/].")
    return 0
