"""Daily budget signals for one category."""

from __future__ import annotations

from datetime import date

from rich.table import Table

from pfennig.config import DEFAULT_CATEGORY
from pfennig.money import format_cents
from pfennig.services.budget_service import BudgetService, DailyBudget
from pfennig.workspace import Workspace

from .util import category_store, console, expense_store, fmt_status, override_store


def run(
    *,
    category: str = DEFAULT_CATEGORY,
    today: date | None = None,
    workspace: Workspace,
) -> int:
    """Show remaining pace per day and today's allowance on plan.

    Returns:
        Exit code (0 success, 1 unreadable ledger)
    """
    now = today or date.today()
    service = BudgetService(category_store(workspace), expense_store(workspace), override_store(workspace))
    try:
        daily = service.daily_budget(now, category)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    _display(daily)
    return 0


def _display(daily: DailyBudget) -> None:
    table = Table(title=f"Budget: {daily.category_name} ({daily.year_month})", show_header=False)
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Status")

    if daily.category is not None:
        budget = daily.category.monthly_budget_cents
        table.add_row("Monthly budget", format_cents(budget) if budget else "–")
        spent = format_cents(daily.spent_cents or 0)
        if daily.override_active:
            spent += " [dim](manual override)[/]"
        table.add_row("Spent so far", spent)

    table.add_row("Remaining pace", fmt_status(daily.pace))
    table.add_row("Today on plan", fmt_status(daily.allowance))
    console.print(table)
