from __future__ import annotations

"""
pfennig CLI (Typer + Rich)

Local-only expense tracker: quick entry, monthly budgets and spending pace.

All paths are resolved from a single workspace root:
  --data-dir / PFENNIG_DATA env var / current working directory
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from pfennig.config import DEFAULT_CATEGORY
from pfennig.services.expense_query_service import DateRange
from pfennig.workspace import ENV_VAR, Workspace

HELP_WRITE = "Persist changes (default: dry-run)"
HELP_CATEGORY = "Category name (default: lebensmittel)"

APP_HELP = "pfennig expense tracker (local-only)"

app = typer.Typer(no_args_is_help=True, add_completion=False, help=APP_HELP)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        envvar=ENV_VAR,
        help="Workspace root directory (default: current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """pfennig CLI. All paths are resolved from a single workspace root."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["workspace"] = Workspace.resolve(data_dir)


def _ws(ctx: typer.Context) -> Workspace:
    return ctx.obj["workspace"]


@app.command()
def init(ctx: typer.Context):
    """Initialize a workspace with its directories and the default category.

    Safe to run on an existing workspace: anything that already exists is skipped.

    Examples:
      pfennig --data-dir ~/ausgaben init
      pfennig init
    """
    from pfennig.cli.command import init as cmd_init

    code = cmd_init.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def add(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Free text, e.g. '12,50 Lebensmittel Kaffee heute'"),
    note: str = typer.Option("", "--note", help="Optional note"),
    write: bool = typer.Option(False, "--write", help=HELP_WRITE),
):
    """Quick entry: amount, date keyword and category from one line of text.

    Understands amounts like 12,50 / 3.5 / 4 €, dates like 15.3.2024 and the
    keywords heute, gestern, vorgestern, mo..so / montag..sonntag. Whatever is
    left becomes the expense name.

    Examples:
      pfennig add "12,50 Lebensmittel Kaffee heute" --write
      pfennig add "4 Brötchen gestern"
    """
    from pfennig.cli.command import add as cmd_add

    code = cmd_add.run(text=text, note=note, workspace=_ws(ctx), write=write)
    raise typer.Exit(code=code)


@app.command()
def new(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="Expense name"),
    amount: str = typer.Option(..., "--amount", "-a", help="Amount, e.g. 12,50"),
    date_text: Optional[str] = typer.Option(None, "--date", "-d", help="D.M.YYYY or YYYY-MM-DD (default: today)"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help=HELP_CATEGORY),
    note: str = typer.Option("", "--note", help="Optional note"),
    write: bool = typer.Option(False, "--write", help=HELP_WRITE),
):
    """Add an expense from explicit fields.

    Examples:
      pfennig new --name "Wocheneinkauf" --amount 54,20 --date 15.3.2024 --write
    """
    from pfennig.cli.command import new as cmd_new

    code = cmd_new.run(
        name=name,
        amount=amount,
        date_text=date_text,
        category=category,
        note=note,
        workspace=_ws(ctx),
        write=write,
    )
    raise typer.Exit(code=code)


@app.command("list")
def list_expenses(
    ctx: typer.Context,
    range_: DateRange = typer.Option(DateRange.month, "--range", "-r", help="today, week, month or all"),
    query: str = typer.Option("", "--search", "-s", help="Filter by name, note or category"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", min=1, help="Max number of rows to show"),
):
    """List expenses, newest first.

    Examples:
      pfennig list
      pfennig list --range week --search brot
    """
    from pfennig.cli.command import list_expenses as cmd_list

    code = cmd_list.run(range_=range_, query=query, limit=limit, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def delete(
    ctx: typer.Context,
    expense_id: str = typer.Argument(..., help="Expense id or unique prefix (min. 4 characters)"),
    write: bool = typer.Option(False, "--write", help=HELP_WRITE),
):
    """Delete one expense."""
    from pfennig.cli.command import delete as cmd_delete

    code = cmd_delete.run(expense_id=expense_id, workspace=_ws(ctx), write=write)
    raise typer.Exit(code=code)


@app.command()
def edit(
    ctx: typer.Context,
    expense_id: str = typer.Argument(..., help="Expense id or unique prefix (min. 4 characters)"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New name"),
    amount: Optional[str] = typer.Option(None, "--amount", "-a", help="New amount, e.g. 12,50"),
    date_text: Optional[str] = typer.Option(None, "--date", "-d", help="New date, D.M.YYYY or YYYY-MM-DD"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="New category (created when missing)"),
    note: Optional[str] = typer.Option(None, "--note", help="New note"),
    write: bool = typer.Option(False, "--write", help=HELP_WRITE),
):
    """Edit one expense. Only the given fields change.

    Examples:
      pfennig edit 3f2a --amount 13,20 --write
      pfennig edit 3f2a --category Transport --note "Monatskarte" --write
    """
    from pfennig.cli.command import edit as cmd_edit

    code = cmd_edit.run(
        expense_id=expense_id,
        name=name,
        amount=amount,
        date_text=date_text,
        category=category,
        note=note,
        workspace=_ws(ctx),
        write=write,
    )
    raise typer.Exit(code=code)


@app.command()
def categories(ctx: typer.Context):
    """List categories with monthly budget and this month's spend."""
    from pfennig.cli.command import categories as cmd_categories

    code = cmd_categories.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def category(
    ctx: typer.Context,
    add: Optional[str] = typer.Option(None, "--add", help="Add a new category"),
    remove: Optional[str] = typer.Option(None, "--remove", help="Remove a category"),
    set_budget: Optional[str] = typer.Option(None, "--set-budget", help="Set monthly budget for a category"),
    amount: Optional[str] = typer.Option(None, "--amount", help="Budget amount, e.g. 300 or 300,00"),
    clear_budget: Optional[str] = typer.Option(None, "--clear-budget", help="Remove a category's budget"),
    write: bool = typer.Option(False, "--write", help=HELP_WRITE),
):
    """Manage categories: add, remove, or set/clear the monthly budget.

    Examples:
      pfennig category --add Transport --write
      pfennig category --set-budget Lebensmittel --amount 300 --write
      pfennig category --clear-budget Lebensmittel --write

    Safety: dry-run by default. Use --write to persist changes.
    """
    from pfennig.cli.command import category as cmd_category

    code = cmd_category.run(
        add=add,
        remove=remove,
        set_budget=set_budget,
        amount=amount,
        clear_budget=clear_budget,
        workspace=_ws(ctx),
        write=write,
    )
    raise typer.Exit(code=code)


@app.command()
def budget(
    ctx: typer.Context,
    category: str = typer.Option(DEFAULT_CATEGORY, "--category", "-c", help=HELP_CATEGORY),
):
    """Show today's budget pace for a category.

    Two signals are shown: what is left spread over the remaining days, and
    how far spending is below an even pace through today.

    Examples:
      pfennig budget
      pfennig budget --category Transport
    """
    from pfennig.cli.command import budget as cmd_budget

    code = cmd_budget.run(category=category, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def spent(
    ctx: typer.Context,
    set_amount: Optional[str] = typer.Option(None, "--set", help="Spent so far this month, e.g. 123,45"),
    clear: bool = typer.Option(False, "--clear", help="Remove this month's override"),
    category: str = typer.Option(DEFAULT_CATEGORY, "--category", "-c", help=HELP_CATEGORY),
    write: bool = typer.Option(False, "--write", help=HELP_WRITE),
):
    """Show, set or clear the manual spent-so-far value for this month.

    When set, it replaces the sum of recorded expenses in budget calculations.

    Examples:
      pfennig spent
      pfennig spent --set 123,45 --write
      pfennig spent --clear --write
    """
    from pfennig.cli.command import spent as cmd_spent

    code = cmd_spent.run(
        set_amount=set_amount,
        clear=clear,
        category=category,
        workspace=_ws(ctx),
        write=write,
    )
    raise typer.Exit(code=code)


@app.command("import")
def import_expenses(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="CSV or TSV file with name, amount, date[, category, note]"),
    write: bool = typer.Option(False, "--write", help=HELP_WRITE),
):
    """Import expenses from CSV/TSV."""
    from pfennig.cli.command import import_expenses as cmd_import

    code = cmd_import.run(path=path, workspace=_ws(ctx), write=write)
    raise typer.Exit(code=code)


@app.command()
def export(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file (default: exports/expenses_export.csv)"),
):
    """Export all expenses to CSV."""
    from pfennig.cli.command import export as cmd_export

    code = cmd_export.run(output=output, workspace=_ws(ctx))
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
