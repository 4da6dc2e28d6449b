"""List categories with their monthly budget and this month's spend."""

from __future__ import annotations

from datetime import date

from rich.table import Table

from pfennig.money import format_cents
from pfennig.services.budget_service import BudgetService
from pfennig.workspace import Workspace

from .util import category_store, console, expense_store, override_store


def run(*, today: date | None = None, workspace: Workspace) -> int:
    """Show every category, its budget and month-to-date spend (override marked with *)."""
    now = today or date.today()
    categories = category_store(workspace)
    service = BudgetService(categories, expense_store(workspace), override_store(workspace))

    cats = categories.list_categories()
    if not cats:
        console.print("[yellow]No categories defined.[/] Run 'pfennig init' to create the default one.")
        return 0

    table = Table(title=f"Categories ({now:%Y-%m})", show_lines=False)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Monthly Budget", style="green", justify="right")
    table.add_column("Spent", style="yellow", justify="right")

    try:
        for cat in cats:
            spent, override = service.month_to_date_spend(cat, now)
            budget = format_cents(cat.monthly_budget_cents) if cat.has_budget() else "–"
            spent_str = format_cents(spent) + (" *" if override is not None else "")
            table.add_row(cat.name, budget, spent_str)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    console.print(table)
    return 0
