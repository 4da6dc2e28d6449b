from __future__ import annotations

"""
Expense and quick-entry models.

Scope
- Pure Pydantic v2 models; no I/O.
- Amounts are integer cents, never fractional.
- Dates are calendar dates and serialize as YYYY-MM-DD.
"""

from datetime import date
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from pfennig.config import UNTITLED_NAME


class Expense(BaseModel):
    """One row of data/expenses.csv."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = Field(default=UNTITLED_NAME)
    amount_cents: int = Field(ge=0, description="Amount in cents")
    date: date
    category_id: str | None = None
    note: str = ""

    @field_validator("name")
    @classmethod
    def _default_name(cls, v: str) -> str:
        return v.strip() or UNTITLED_NAME

    @field_validator("note")
    @classmethod
    def _strip_note(cls, v: str) -> str:
        return v.strip()

    @property
    def year_month(self) -> str:
        return f"{self.date.year:04d}-{self.date.month:02d}"


class ParseResult(BaseModel):
    """Structured outcome of parsing one quick-entry line.

    amount_cents is None when no amount was recognized; callers must ask the
    user rather than assume zero.
    """

    amount_cents: int | None = Field(default=None, ge=0)
    date: date
    category_tag: str | None = None
    name: str

    @property
    def has_amount(self) -> bool:
        return self.amount_cents is not None


__all__ = ["Expense", "ParseResult"]
