from __future__ import annotations

"""
Tests for edit command.
"""

from datetime import date

import pytest

from pfennig.cli.command.edit import run
from pfennig.model.expense import Expense
from pfennig.storage import CategoryStore, ExpenseStore
from pfennig.workspace import Workspace


@pytest.fixture
def workspace(tmp_path) -> Workspace:
    ws = Workspace(root=tmp_path)
    food_id = CategoryStore(ws.categories_config).ensure_category("lebensmittel")
    ExpenseStore(ws.expenses_ledger).add_expenses(
        [
            Expense(id="aaaa1111", name="Brot", amount_cents=350, date=date(2024, 3, 15), category_id=food_id),
            Expense(id="aaaa2222", name="Milch", amount_cents=120, date=date(2024, 3, 1), category_id=food_id),
        ]
    )
    return ws


def _expenses(ws: Workspace) -> dict[str, Expense]:
    return {e.id: e for e in ExpenseStore(ws.expenses_ledger).list_expenses()}


class DescribeEditCommand:
    def it_should_change_only_given_fields_and_keep_the_id(self, workspace):
        rc = run(expense_id="aaaa1111", amount="3,80", note="Vollkorn", workspace=workspace, write=True)

        assert rc == 0
        e = _expenses(workspace)["aaaa1111"]
        assert e.amount_cents == 380
        assert e.note == "Vollkorn"
        assert e.name == "Brot"
        assert e.date == date(2024, 3, 15)
        assert _expenses(workspace)["aaaa2222"].amount_cents == 120

    def it_should_move_expense_to_a_new_category(self, workspace):
        rc = run(expense_id="aaaa2222", category="Transport", workspace=workspace, write=True)

        assert rc == 0
        transport = CategoryStore(workspace.categories_config).find_category("transport")
        assert transport is not None
        assert _expenses(workspace)["aaaa2222"].category_id == transport.id

    def it_should_accept_german_date(self, workspace):
        rc = run(expense_id="aaaa2222", date_text="2.3.2024", workspace=workspace, write=True)

        assert rc == 0
        assert _expenses(workspace)["aaaa2222"].date == date(2024, 3, 2)

    def it_should_not_write_in_dry_run(self, workspace):
        rc = run(expense_id="aaaa1111", name="Semmeln", category="neu", workspace=workspace)

        assert rc == 0
        assert _expenses(workspace)["aaaa1111"].name == "Brot"
        assert CategoryStore(workspace.categories_config).find_category("neu") is None

    def it_should_require_at_least_one_change(self, workspace):
        assert run(expense_id="aaaa1111", workspace=workspace, write=True) == 2

    def it_should_reject_invalid_amount_and_date(self, workspace):
        assert run(expense_id="aaaa1111", amount="viel", workspace=workspace, write=True) == 2
        assert run(expense_id="aaaa1111", date_text="31.2.2024", workspace=workspace, write=True) == 2
        assert _expenses(workspace)["aaaa1111"].amount_cents == 350

    def it_should_refuse_ambiguous_prefix(self, workspace):
        assert run(expense_id="aaaa", name="X", workspace=workspace, write=True) == 2

    def it_should_report_missing_expense(self, workspace):
        assert run(expense_id="ffff", name="X", workspace=workspace, write=True) == 1
