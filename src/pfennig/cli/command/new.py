"""Manual entry: store an expense from explicit fields."""

from __future__ import annotations

from datetime import date

from pfennig.config import DEFAULT_CATEGORY
from pfennig.model.expense import Expense
from pfennig.parsing.amount import parse_amount_to_cents
from pfennig.parsing.dates import to_iso_date
from pfennig.workspace import Workspace

from .util import category_store, console, dry_run_notice, expense_store, fmt_cents, fmt_date


def run(
    *,
    name: str,
    amount: str,
    date_text: str | None = None,
    category: str | None = None,
    note: str = "",
    today: date | None = None,
    workspace: Workspace,
    write: bool = False,
) -> int:
    """Add an expense with explicit name, amount (e.g. '12,50'), date and category.

    The date accepts D.M.YYYY or YYYY-MM-DD and defaults to today. The category
    defaults to Lebensmittel and is created when missing.

    Returns:
        Exit code (0 success, 2 invalid input)
    """
    cents = parse_amount_to_cents(amount)
    if cents is None:
        console.print(f"[red]Error:[/] Please enter a valid amount (got '{amount}').")
        return 2

    if date_text:
        try:
            when = to_iso_date(date_text)
        except ValueError as e:
            console.print(f"[red]Error:[/] {e}")
            return 2
    else:
        when = today or date.today()

    category_name = category or DEFAULT_CATEGORY
    console.print(
        f"[cyan]Will add[/] '{name}' {fmt_cents(cents)} on {fmt_date(when)} "
        f"in category [bold]{category_name}[/]."
    )
    if not write:
        dry_run_notice()
        return 0

    try:
        category_id = category_store(workspace).ensure_category(category_name)
        expense = Expense(name=name, amount_cents=cents, date=when, category_id=category_id, note=note)
        expense_store(workspace).add_expense(expense)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 2

    console.print(f"[green]Saved expense[/] [bold]{expense.id[:8]}[/].")
    return 0
