"""Import expenses from a CSV or TSV file."""

from __future__ import annotations

from pathlib import Path

from pfennig.model.expense import Expense
from pfennig.model.ledger_io import ImportFormatError, parse_import_text
from pfennig.money import format_cents
from pfennig.workspace import Workspace

from .util import category_store, console, dry_run_notice, expense_store


def run(*, path: Path, workspace: Workspace, write: bool = False) -> int:
    """Append every usable row of the file to the ledger.

    Required headers: name, amount, date (optional: category, note). Missing
    categories are created. Rows with an unparseable amount or date are skipped.

    Returns:
        Exit code (0 success, 1 file problem)
    """
    if not path.exists():
        console.print(f"[red]File not found:[/] {path}")
        return 1

    try:
        batch = parse_import_text(path.read_text(encoding="utf-8-sig"), path.name)
    except ImportFormatError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    total = sum(r.amount_cents for r in batch.rows)
    console.print(
        f"[cyan]Found[/] {len(batch.rows)} importable row(s) totalling {format_cents(total)} in {path.name}."
    )
    if batch.skipped_lines:
        lines = ", ".join(str(n) for n in batch.skipped_lines)
        console.print(f"[yellow]Skipping {len(batch.skipped_lines)} row(s)[/] with invalid amount or date (lines {lines}).")

    if not write:
        dry_run_notice()
        return 0

    categories = category_store(workspace)
    category_ids: dict[str, str | None] = {}
    expenses: list[Expense] = []
    for row in batch.rows:
        key = row.category_name.strip().lower()
        if key not in category_ids:
            category_ids[key] = categories.ensure_category(row.category_name)
        expenses.append(
            Expense(
                name=row.name,
                amount_cents=row.amount_cents,
                date=row.date,
                category_id=category_ids[key],
                note=row.note,
            )
        )

    try:
        expense_store(workspace).add_expenses(expenses)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1
    console.print(f"[green]Imported {len(expenses)} expense(s).[/]")
    return 0
