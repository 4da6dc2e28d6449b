from __future__ import annotations

"""
Expense ledger CSV <-> model conversion (pure text, no disk I/O).

Two flat formats live here:

- The ledger format stored at data/expenses.csv: one row per Expense with
  integer cents and category ids. Lossless.
- The exchange format used by import/export: name, amount, date, category,
  note with German decimal commas and category names instead of ids.

Privacy:
- Pure local text processing; no external I/O.
- No logging of raw data here; callers decide what to print.
"""

import csv
import io
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from pydantic import ValidationError

from pfennig.config import DEFAULT_CATEGORY, UNTITLED_NAME
from pfennig.money import format_cents_plain
from pfennig.parsing.amount import parse_amount_to_cents
from pfennig.parsing.dates import to_iso_date

from .category import CategoryConfig
from .expense import Expense

# Keep order stable for deterministic outputs.
LEDGER_COLUMNS: list[str] = [
    "id",
    "name",
    "amount_cents",
    "date",
    "category_id",
    "note",
]

EXCHANGE_COLUMNS: list[str] = ["name", "amount", "date", "category", "note"]
REQUIRED_IMPORT_COLUMNS: tuple[str, ...] = ("name", "amount", "date")


class ImportFormatError(ValueError):
    """Raised when an import file lacks the required header columns."""


@dataclass
class ImportRow:
    """One usable row from an import file."""

    name: str
    amount_cents: int
    date: date
    category_name: str
    note: str


@dataclass
class ImportBatch:
    rows: list[ImportRow] = field(default_factory=list)
    skipped_lines: list[int] = field(default_factory=list)


# ---- Ledger format ----


def dump_expenses_csv(expenses: Iterable[Expense]) -> str:
    """Serialize expenses to the ledger CSV format."""
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=LEDGER_COLUMNS, lineterminator="\n")
    writer.writeheader()
    for e in expenses:
        writer.writerow(
            {
                "id": e.id,
                "name": e.name,
                "amount_cents": str(e.amount_cents),
                "date": e.date.isoformat(),
                "category_id": e.category_id or "",
                "note": e.note,
            }
        )
    return buf.getvalue()


def load_expenses_csv(text: str) -> list[Expense]:
    """Parse ledger CSV text into Expense models.

    Unknown columns are ignored. Blank category ids become None.

    Raises:
        ValueError: if a row does not form a valid Expense
    """
    reader = csv.DictReader(io.StringIO(text))
    result: list[Expense] = []
    for line_no, r in enumerate(reader, start=2):
        fields = {
            "name": r.get("name") or "",
            "amount_cents": (r.get("amount_cents") or "").strip(),
            "date": (r.get("date") or "").strip(),
            "category_id": (r.get("category_id") or "").strip() or None,
            "note": r.get("note") or "",
        }
        expense_id = (r.get("id") or "").strip()
        if expense_id:
            fields["id"] = expense_id
        try:
            result.append(Expense(**fields))
        except ValidationError as ve:
            raise ValueError(f"Invalid expense on line {line_no}: {ve}") from ve
    return result


# ---- Exchange format ----


def _detect_delimiter(text: str, filename: str | None) -> str:
    first_line = text.split("\n", 1)[0]
    if (filename or "").lower().endswith(".tsv") or "\t" in first_line:
        return "\t"
    return ","


def _is_blank(row: list[str]) -> bool:
    return not any(c.strip() for c in row)


def parse_import_text(text: str, filename: str | None = None) -> ImportBatch:
    """Parse an import file (CSV or TSV) into importable rows.

    Header names are matched case-insensitively. Rows whose amount or date cannot
    be parsed are skipped and reported by line number.

    Raises:
        ImportFormatError: if name, amount or date columns are missing
    """
    delimiter = _detect_delimiter(text, filename)
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    header = next((row for row in reader if not _is_blank(row)), None)
    if header is None:
        return ImportBatch()
    header = [h.strip().lower() for h in header]
    missing = [c for c in REQUIRED_IMPORT_COLUMNS if c not in header]
    if missing:
        raise ImportFormatError(
            "Required headers: name, amount, date (optional: category, note); "
            f"missing: {', '.join(missing)}"
        )
    idx = {name: header.index(name) for name in EXCHANGE_COLUMNS if name in header}

    def cell(row: list[str], column: str) -> str:
        i = idx.get(column)
        if i is None or i >= len(row):
            return ""
        return row[i].strip()

    batch = ImportBatch()
    last_line = reader.line_num
    for row in reader:
        # first physical line of the record; quoted fields may span several
        line_no, last_line = last_line + 1, reader.line_num
        if _is_blank(row):
            continue
        amount_cents = parse_amount_to_cents(cell(row, "amount"))
        try:
            when = to_iso_date(cell(row, "date"))
        except ValueError:
            when = None
        if amount_cents is None or when is None:
            batch.skipped_lines.append(line_no)
            continue
        batch.rows.append(
            ImportRow(
                name=cell(row, "name") or UNTITLED_NAME,
                amount_cents=amount_cents,
                date=when,
                category_name=cell(row, "category") or DEFAULT_CATEGORY,
                note=cell(row, "note"),
            )
        )
    return batch


def export_expenses_csv(expenses: Iterable[Expense], categories: CategoryConfig) -> str:
    """Render expenses in the exchange format with every field quoted."""
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(EXCHANGE_COLUMNS)
    for e in expenses:
        cat = categories.find_by_id(e.category_id)
        writer.writerow(
            [
                e.name,
                format_cents_plain(e.amount_cents),
                e.date.isoformat(),
                cat.name if cat else "",
                e.note,
            ]
        )
    return buf.getvalue()


__all__ = [
    "EXCHANGE_COLUMNS",
    "ImportBatch",
    "ImportFormatError",
    "ImportRow",
    "LEDGER_COLUMNS",
    "dump_expenses_csv",
    "export_expenses_csv",
    "load_expenses_csv",
    "parse_import_text",
]
