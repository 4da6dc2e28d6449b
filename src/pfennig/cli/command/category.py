"""Manage categories: add, remove, or set/clear a monthly budget."""

from __future__ import annotations

from pfennig.parsing.amount import parse_amount_to_cents
from pfennig.workspace import Workspace

from .util import category_store, console, dry_run_notice, fmt_cents


def run(
    *,
    add: str | None = None,
    remove: str | None = None,
    set_budget: str | None = None,
    amount: str | None = None,
    clear_budget: str | None = None,
    workspace: Workspace,
    write: bool = False,
) -> int:
    """Apply exactly one category change. Dry-run unless write=True.

    Returns:
        Exit code (0 success, 1 unknown category, 2 usage error)
    """
    actions = [a for a in (add, remove, set_budget, clear_budget) if a is not None]
    if len(actions) != 1:
        console.print(
            "[red]Specify exactly one of --add, --remove, --set-budget, or --clear-budget.[/]"
        )
        return 2

    store = category_store(workspace)

    if add is not None:
        existing = store.find_category(add)
        if existing is not None:
            console.print(f"[yellow]Category already exists:[/] {existing.name}")
            return 0
        if not add.strip():
            console.print("[red]Error:[/] category name cannot be blank.")
            return 2
        console.print(f"[cyan]Will add category[/] [bold]{add.strip().lower()}[/].")
        if not write:
            dry_run_notice()
            return 0
        store.ensure_category(add)
        console.print("[green]Category added.[/]")
        return 0

    name = remove or set_budget or clear_budget
    cat = store.find_category(name)
    if cat is None:
        console.print(f"[red]Category not found:[/] {name}")
        return 1

    if remove is not None:
        console.print(
            f"[cyan]Will remove category[/] [bold]{cat.name}[/]. "
            "Expenses keep their old category id."
        )
        if not write:
            dry_run_notice()
            return 0
        store.remove_category(cat.name)
        console.print("[green]Category removed.[/]")
        return 0

    if set_budget is not None:
        cents = parse_amount_to_cents(amount)
        if cents is None:
            console.print("[red]Error:[/] --set-budget needs a valid --amount (e.g. 300 or 300,00).")
            return 2
        console.print(f"[cyan]Will set monthly budget[/] of [bold]{cat.name}[/] to {fmt_cents(cents)}.")
        if not write:
            dry_run_notice()
            return 0
        store.set_budget(cat.name, cents)
        console.print("[green]Budget saved.[/]")
        return 0

    console.print(f"[cyan]Will clear monthly budget[/] of [bold]{cat.name}[/].")
    if not write:
        dry_run_notice()
        return 0
    store.set_budget(cat.name, None)
    console.print("[green]Budget cleared.[/]")
    return 0
