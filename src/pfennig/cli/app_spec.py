from __future__ import annotations

"""
Smoke tests for the Typer wiring.
"""

from typer.testing import CliRunner

from pfennig.cli.app import app
from pfennig.storage import CategoryStore, ExpenseStore
from pfennig.workspace import Workspace

runner = CliRunner()


class DescribeApp:
    def it_should_initialize_workspace_from_data_dir_option(self, tmp_path):
        result = runner.invoke(app, ["--data-dir", str(tmp_path), "init"])

        assert result.exit_code == 0
        assert Workspace(root=tmp_path).categories_config.exists()

    def it_should_read_data_dir_from_environment(self, tmp_path):
        result = runner.invoke(app, ["init"], env={"PFENNIG_DATA": str(tmp_path)})

        assert result.exit_code == 0
        assert Workspace(root=tmp_path).data_dir.is_dir()

    def it_should_add_expense_with_write(self, tmp_path):
        runner.invoke(app, ["--data-dir", str(tmp_path), "init"])

        result = runner.invoke(app, ["--data-dir", str(tmp_path), "add", "4,50 Kaffee", "--write"])

        assert result.exit_code == 0
        expenses = ExpenseStore(Workspace(root=tmp_path).expenses_ledger).list_expenses()
        assert [(e.name, e.amount_cents) for e in expenses] == [("Kaffee", 450)]

    def it_should_propagate_usage_error_exit_code(self, tmp_path):
        result = runner.invoke(app, ["--data-dir", str(tmp_path), "category"])

        assert result.exit_code == 2

    def it_should_set_budget_through_category_command(self, tmp_path):
        runner.invoke(app, ["--data-dir", str(tmp_path), "init"])

        result = runner.invoke(
            app,
            ["--data-dir", str(tmp_path), "category", "--set-budget", "Lebensmittel", "--amount", "300", "--write"],
        )

        assert result.exit_code == 0
        cat = CategoryStore(Workspace(root=tmp_path).categories_config).find_category("lebensmittel")
        assert cat.monthly_budget_cents == 30000

    def it_should_accept_list_range_option(self, tmp_path):
        result = runner.invoke(app, ["--data-dir", str(tmp_path), "list", "--range", "all"])

        assert result.exit_code == 0

    def it_should_edit_expense_by_prefix(self, tmp_path):
        runner.invoke(app, ["--data-dir", str(tmp_path), "add", "4,50 Kaffee", "--write"])
        expense_id = ExpenseStore(Workspace(root=tmp_path).expenses_ledger).list_expenses()[0].id

        result = runner.invoke(
            app, ["--data-dir", str(tmp_path), "edit", expense_id[:8], "--amount", "5", "--write"]
        )

        assert result.exit_code == 0
        expenses = ExpenseStore(Workspace(root=tmp_path).expenses_ledger).list_expenses()
        assert [(e.id, e.amount_cents) for e in expenses] == [(expense_id, 500)]
