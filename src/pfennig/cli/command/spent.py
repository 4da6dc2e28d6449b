"""Show, set or clear the manual month-to-date spend override."""

from __future__ import annotations

from datetime import date

from pfennig.config import DEFAULT_CATEGORY
from pfennig.parsing.amount import parse_amount_to_cents
from pfennig.services.budget_service import BudgetService
from pfennig.workspace import Workspace

from .util import category_store, console, dry_run_notice, expense_store, fmt_cents, override_store


def run(
    *,
    set_amount: str | None = None,
    clear: bool = False,
    category: str = DEFAULT_CATEGORY,
    today: date | None = None,
    workspace: Workspace,
    write: bool = False,
) -> int:
    """Manage the spent-so-far override for the current month.

    Without --set or --clear the current override (if any) is shown.

    Returns:
        Exit code (0 success, 2 usage error)
    """
    if set_amount is not None and clear:
        console.print("[red]Specify only one of --set or --clear.[/]")
        return 2

    now = today or date.today()
    service = BudgetService(category_store(workspace), expense_store(workspace), override_store(workspace))
    key = service.override_key(now, category)
    current = service.get_spent_override(now, category)

    if set_amount is None and not clear:
        if current is None:
            console.print(f"[dim]No override set[/] ({key}).")
        else:
            console.print(f"Override [bold]{key}[/]: {fmt_cents(current)}")
        return 0

    if clear:
        if current is None:
            console.print(f"[yellow]No override to clear[/] ({key}).")
            return 0
        console.print(f"[cyan]Will clear override[/] [bold]{key}[/] ({fmt_cents(current)}).")
        if not write:
            dry_run_notice()
            return 0
        service.clear_spent_override(now, category)
        console.print("[green]Override cleared.[/]")
        return 0

    cents = parse_amount_to_cents(set_amount)
    if cents is None:
        console.print(f"[red]Error:[/] Please enter a valid amount (got '{set_amount}').")
        return 2
    console.print(f"[cyan]Will set override[/] [bold]{key}[/] to {fmt_cents(cents)}.")
    if not write:
        dry_run_notice()
        return 0
    service.set_spent_override(now, cents, category)
    console.print("[green]Override saved.[/]")
    return 0
