from __future__ import annotations

"""
Tests for import and export commands.
"""

from datetime import date

from pfennig.cli.command import export, import_expenses
from pfennig.storage import CategoryStore, ExpenseStore
from pfennig.workspace import Workspace


class DescribeImportCommand:
    def it_should_import_rows_and_create_categories(self, tmp_path):
        ws = Workspace(root=tmp_path)
        src = tmp_path / "in.csv"
        src.write_text(
            "Name,Amount,Date,Category,Note\n"
            "Brot,\"3,50\",15.3.2024,,\n"
            "Bus,2.90,2024-03-14,Transport,Ticket\n"
            "Kaputt,abc,2024-03-14,,\n",
            encoding="utf-8",
        )

        rc = import_expenses.run(path=src, workspace=ws, write=True)

        assert rc == 0
        expenses = ExpenseStore(ws.expenses_ledger).list_expenses()
        assert [(e.name, e.amount_cents, e.date) for e in expenses] == [
            ("Brot", 350, date(2024, 3, 15)),
            ("Bus", 290, date(2024, 3, 14)),
        ]
        cats = CategoryStore(ws.categories_config)
        assert expenses[0].category_id == cats.find_category("lebensmittel").id
        assert expenses[1].category_id == cats.find_category("transport").id

    def it_should_read_tsv_with_bom(self, tmp_path):
        ws = Workspace(root=tmp_path)
        src = tmp_path / "in.tsv"
        src.write_text("\ufeffname\tamount\tdate\nKaffee\t2,5\t2024-03-01\n", encoding="utf-8")

        rc = import_expenses.run(path=src, workspace=ws, write=True)

        assert rc == 0
        assert ExpenseStore(ws.expenses_ledger).list_expenses()[0].amount_cents == 250

    def it_should_not_write_in_dry_run(self, tmp_path):
        ws = Workspace(root=tmp_path)
        src = tmp_path / "in.csv"
        src.write_text("name,amount,date\nBrot,1,2024-03-01\n", encoding="utf-8")

        assert import_expenses.run(path=src, workspace=ws) == 0
        assert not ws.expenses_ledger.exists()

    def it_should_fail_on_missing_headers(self, tmp_path):
        src = tmp_path / "in.csv"
        src.write_text("name,amount\nBrot,1\n", encoding="utf-8")

        assert import_expenses.run(path=src, workspace=Workspace(root=tmp_path), write=True) == 1

    def it_should_fail_on_missing_file(self, tmp_path):
        rc = import_expenses.run(path=tmp_path / "nope.csv", workspace=Workspace(root=tmp_path))

        assert rc == 1


class DescribeExportCommand:
    def it_should_write_quoted_csv_to_exports_dir(self, tmp_path):
        ws = Workspace(root=tmp_path)
        src = tmp_path / "in.csv"
        src.write_text("name,amount,date,category\nBus,\"2,90\",2024-03-14,Transport\n", encoding="utf-8")
        import_expenses.run(path=src, workspace=ws, write=True)

        rc = export.run(workspace=ws)

        assert rc == 0
        text = (ws.exports_dir / "expenses_export.csv").read_text(encoding="utf-8")
        assert text == (
            '"name","amount","date","category","note"\n'
            '"Bus","2,9","2024-03-14","transport",""\n'
        )

    def it_should_write_to_explicit_output(self, tmp_path):
        ws = Workspace(root=tmp_path)
        out = tmp_path / "sub" / "out.csv"

        rc = export.run(output=out, workspace=ws)

        assert rc == 0
        assert out.read_text(encoding="utf-8") == '"name","amount","date","category","note"\n'
