"""
Quick-entry parser: one free-text line in, one ParseResult out.

    "12,50 Lebensmittel Kaffee heute"
      -> amount 1250, today, tag "lebensmittel", name "Kaffee"

Extractors run in a fixed order (amount, date, category). Each one removes
what it recognized before the next one sees the text; whatever is left is the
expense name.
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from pfennig.config import UNTITLED_NAME
from pfennig.model.expense import ParseResult

from .amount import extract_amount
from .category_tagger import extract_category
from .dates import reference_day, resolve_date


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def parse(
    line: str | None,
    now: date | datetime,
    category_names: Iterable[str] | None = None,
) -> ParseResult | None:
    """Parse a quick-entry line.

    Args:
        line: Raw user input
        now: Reference instant for relative dates
        category_names: Known category names for tagging (default keyword only if None)

    Returns:
        ParseResult, or None when the line is empty after trimming
    """
    # Fail fast on a bad reference instant, even for empty input
    reference_day(now)

    text = (line or "").strip()
    if not text:
        return None

    amount = extract_amount(text)
    when = resolve_date(amount.remainder, now)
    category = extract_category(when.remainder, category_names)

    name = collapse_whitespace(category.remainder) or UNTITLED_NAME
    return ParseResult(
        amount_cents=amount.amount_cents,
        date=when.date,
        category_tag=category.category_tag,
        name=name,
    )


__all__ = ["collapse_whitespace", "parse"]
