"""Initialize a new pfennig workspace directory."""

from __future__ import annotations

from pfennig.workspace import Workspace

from .util import category_store, console


def run(*, workspace: Workspace) -> int:
    """Initialize a workspace with its directories and the default category.

    Skips anything that already exists (safe to run on an existing workspace).

    Args:
        workspace: Workspace to initialize

    Returns:
        Exit code (0 = success)
    """
    root = workspace.root
    console.print(f"[bold cyan]Initializing workspace:[/] {root}\n")

    created: list[str] = []
    skipped: list[str] = []

    for directory in [
        workspace.data_dir,  # data/
        workspace.categories_config.parent,  # config/
        workspace.exports_dir,  # exports/
    ]:
        rel = str(directory.relative_to(root)) + "/"
        if directory.exists():
            skipped.append(rel)
        else:
            directory.mkdir(parents=True, exist_ok=True)
            created.append(rel)

    config_existed = workspace.categories_config.exists()
    category_store(workspace).ensure_defaults()
    rel_config = str(workspace.categories_config.relative_to(root))
    (skipped if config_existed else created).append(rel_config)

    if created:
        console.print("[green]Created:[/]")
        for c in created:
            console.print(f"  {c}")

    if skipped:
        console.print("[dim]Already exists (skipped):[/dim]")
        for s in skipped:
            console.print(f"  [dim]{s}[/dim]")

    if not created:
        console.print("[green]Workspace already fully initialized.[/]")
    else:
        console.print(f"\n[green]Workspace ready at {root}[/]")
        console.print("\n[dim]Next steps:[/dim]")
        console.print("  1. Set a food budget: pfennig category --set-budget Lebensmittel --amount 300 --write")
        console.print("  2. Add an expense:    pfennig add \"4,50 Kaffee heute\" --write")
        console.print("  3. Check your pace:   pfennig budget")

    return 0
