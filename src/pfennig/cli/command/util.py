from __future__ import annotations

from datetime import date

from rich.console import Console
from rich.text import Text

from pfennig.model.expense import Expense
from pfennig.money import format_cents
from pfennig.services.budget_projector import BudgetStatus, StatusClass
from pfennig.storage import CategoryStore, ExpenseStore, OverrideStore
from pfennig.workspace import Workspace

console = Console()

STATUS_STYLES: dict[StatusClass, str] = {
    StatusClass.ok: "bold green",
    StatusClass.warn: "yellow",
    StatusClass.danger: "bold red",
    StatusClass.muted: "dim",
}


def fmt_cents(cents: int | float) -> Text:
    return Text(format_cents(cents), style="yellow")


def fmt_status(status: BudgetStatus) -> Text:
    return Text(status.message, style=STATUS_STYLES[status.classification])


def fmt_date(d: date) -> str:
    """German display form, e.g. 15.03.2024."""
    return d.strftime("%d.%m.%Y")


def category_store(workspace: Workspace) -> CategoryStore:
    return CategoryStore(workspace.categories_config)


def expense_store(workspace: Workspace) -> ExpenseStore:
    return ExpenseStore(workspace.expenses_ledger)


def override_store(workspace: Workspace) -> OverrideStore:
    return OverrideStore(workspace.overrides_path)


MIN_PREFIX = 4


def find_single_expense(store: ExpenseStore, expense_id: str) -> tuple[Expense | None, int]:
    """Look up one expense by full id or unique id prefix, printing why when it cannot.

    Returns:
        (expense, 0) when found, otherwise (None, exit code): 1 not found or
        unreadable ledger, 2 ambiguous or too short
    """
    prefix = (expense_id or "").strip().lower()
    if len(prefix) < MIN_PREFIX:
        console.print(f"[red]Error:[/] the id prefix must have at least {MIN_PREFIX} characters.")
        return None, 2

    try:
        exact = store.get_expense(prefix)
        matches = [exact] if exact is not None else store.find_by_prefix(prefix)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return None, 1

    if not matches:
        console.print(f"[red]No expense found[/] matching [bold]{prefix}[/].")
        return None, 1
    if len(matches) > 1:
        console.print(
            f"[yellow]Ambiguous prefix[/] [bold]{prefix}[/]: matches {len(matches)} expenses. "
            "Use more characters."
        )
        return None, 2
    return matches[0], 0


def dry_run_notice() -> None:
    console.print("[green]Dry-run:[/] no changes written. Use --write to persist.")
