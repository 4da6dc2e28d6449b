from __future__ import annotations

"""
Tests for list and delete commands.
"""

from datetime import date

import pytest

from pfennig.cli.command import delete, list_expenses
from pfennig.model.expense import Expense
from pfennig.services.expense_query_service import DateRange
from pfennig.storage import ExpenseStore
from pfennig.workspace import Workspace

TODAY = date(2024, 3, 15)


@pytest.fixture
def workspace(tmp_path) -> Workspace:
    ws = Workspace(root=tmp_path)
    ExpenseStore(ws.expenses_ledger).add_expenses(
        [
            Expense(id="aaaa1111", name="Brot", amount_cents=350, date=date(2024, 3, 15)),
            Expense(id="aaaa2222", name="Milch", amount_cents=120, date=date(2024, 3, 1)),
            Expense(id="bbbb3333", name="Kino", amount_cents=1100, date=date(2024, 2, 20)),
        ]
    )
    return ws


class DescribeListCommand:
    def it_should_list_current_month(self, workspace):
        assert list_expenses.run(today=TODAY, workspace=workspace) == 0

    def it_should_accept_range_search_and_limit(self, workspace):
        rc = list_expenses.run(range_=DateRange.all, query="kino", limit=1, today=TODAY, workspace=workspace)

        assert rc == 0

    def it_should_work_on_empty_workspace(self, tmp_path):
        assert list_expenses.run(today=TODAY, workspace=Workspace(root=tmp_path)) == 0


class DescribeDeleteCommand:
    def it_should_delete_unique_prefix_with_write(self, workspace):
        rc = delete.run(expense_id="bbbb", workspace=workspace, write=True)

        assert rc == 0
        ids = [e.id for e in ExpenseStore(workspace.expenses_ledger).list_expenses()]
        assert ids == ["aaaa1111", "aaaa2222"]

    def it_should_keep_expense_in_dry_run(self, workspace):
        rc = delete.run(expense_id="bbbb3333", workspace=workspace)

        assert rc == 0
        assert len(ExpenseStore(workspace.expenses_ledger).list_expenses()) == 3

    def it_should_refuse_ambiguous_prefix(self, workspace):
        assert delete.run(expense_id="aaaa", workspace=workspace, write=True) == 2

    def it_should_refuse_short_prefix(self, workspace):
        assert delete.run(expense_id="aa", workspace=workspace, write=True) == 2

    def it_should_report_missing_expense(self, workspace):
        assert delete.run(expense_id="ffff", workspace=workspace, write=True) == 1
