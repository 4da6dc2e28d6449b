"""Delete one expense by id prefix."""

from __future__ import annotations

from pfennig.money import format_cents
from pfennig.workspace import Workspace

from .util import console, dry_run_notice, expense_store, find_single_expense, fmt_date


def run(*, expense_id: str, workspace: Workspace, write: bool = False) -> int:
    """Delete the expense whose id starts with expense_id.

    Returns:
        Exit code (0 success, 1 not found, 2 ambiguous or too short)
    """
    store = expense_store(workspace)
    target, code = find_single_expense(store, expense_id)
    if target is None:
        return code

    console.print(
        f"[cyan]Will delete[/] [bold]{target.id[:8]}[/] '{target.name}' "
        f"{format_cents(target.amount_cents)} on {fmt_date(target.date)}."
    )
    if not write:
        dry_run_notice()
        return 0

    store.delete_expense(target.id)
    console.print("[green]Deleted.[/]")
    return 0
