"""Edit one expense by id prefix."""

from __future__ import annotations

from pydantic import ValidationError
from rich.table import Table

from pfennig.model.expense import Expense
from pfennig.money import format_cents
from pfennig.parsing.amount import parse_amount_to_cents
from pfennig.parsing.dates import to_iso_date
from pfennig.workspace import Workspace

from .util import (
    category_store,
    console,
    dry_run_notice,
    expense_store,
    find_single_expense,
    fmt_date,
)


def run(
    *,
    expense_id: str,
    name: str | None = None,
    amount: str | None = None,
    date_text: str | None = None,
    category: str | None = None,
    note: str | None = None,
    workspace: Workspace,
    write: bool = False,
) -> int:
    """Change fields of an existing expense; the id stays the same.

    Only the given fields change. A category that does not exist yet is created
    on --write.

    Returns:
        Exit code (0 success, 1 not found, 2 invalid input, ambiguous or too short prefix)
    """
    if all(v is None for v in (name, amount, date_text, category, note)):
        console.print(
            "[red]Specify at least one of --name, --amount, --date, --category, or --note.[/]"
        )
        return 2

    changes: dict = {}
    if name is not None:
        changes["name"] = name
    if amount is not None:
        cents = parse_amount_to_cents(amount)
        if cents is None:
            console.print(f"[red]Error:[/] Please enter a valid amount (got '{amount}').")
            return 2
        changes["amount_cents"] = cents
    if date_text is not None:
        try:
            changes["date"] = to_iso_date(date_text)
        except ValueError as e:
            console.print(f"[red]Error:[/] {e}")
            return 2
    if note is not None:
        changes["note"] = note

    store = expense_store(workspace)
    target, code = find_single_expense(store, expense_id)
    if target is None:
        return code

    categories = category_store(workspace)
    config = categories.load()
    current_cat = config.find_by_id(target.category_id)
    current_category = current_cat.name if current_cat else "–"
    new_category = current_category
    if category is not None:
        existing = config.find_category(category)
        if existing is not None:
            new_category = existing.name
        elif category.strip():
            new_category = f"{category.strip().lower()} [dim](new)[/]"
        else:
            console.print("[red]Error:[/] category name cannot be blank.")
            return 2

    try:
        updated = Expense(**{**target.model_dump(), **changes})
    except ValidationError as e:
        console.print(f"[red]Error:[/] {e}")
        return 2

    table = Table(title=f"Edit {target.id[:8]}", show_header=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Before")
    table.add_column("After")
    table.add_row("Name", target.name, updated.name)
    table.add_row("Amount", format_cents(target.amount_cents), format_cents(updated.amount_cents))
    table.add_row("Date", fmt_date(target.date), fmt_date(updated.date))
    table.add_row("Category", current_category, new_category)
    table.add_row("Note", target.note, updated.note)
    console.print(table)

    if not write:
        dry_run_notice()
        return 0

    if category is not None:
        updated = updated.model_copy(update={"category_id": categories.ensure_category(category)})
    store.update_expense(updated)
    console.print("[green]Expense updated.[/]")
    return 0
