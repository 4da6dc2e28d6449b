"""
Amount extraction for quick-entry lines.

Finds the leftmost money-looking token ("12", "12,5", "12,50 €", "3.5") and
converts it to integer cents. Digits that belong to a dotted date such as
15.3.2024 are not taken as an amount.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from pfennig.config import CURRENCY_SYMBOL

_AMOUNT_RE = re.compile(r"(\d+(?:[.,]\d{0,2})?)\s*" + re.escape(CURRENCY_SYMBOL) + r"?")
_DATE_TOKEN_RE = re.compile(r"\b\d{1,2}\.\d{1,2}\.\d{4}\b")
_STRIP_RE = re.compile(r"[\s" + re.escape(CURRENCY_SYMBOL) + r"]")
_CENT = Decimal("1")


@dataclass(frozen=True)
class AmountMatch:
    amount_cents: int | None
    remainder: str


def parse_amount_to_cents(raw: str | None) -> int | None:
    """Convert a user-typed amount ("12,50", "3.5 €") to cents.

    Returns None for blank, non-numeric or negative input.
    """
    if raw is None:
        return None
    t = _STRIP_RE.sub("", str(raw))
    if not t:
        return None
    t = t.replace(",", ".", 1)
    try:
        value = Decimal(t)
    except InvalidOperation:
        return None
    if not value.is_finite() or value < 0:
        return None
    return int((value * 100).quantize(_CENT, rounding=ROUND_HALF_UP))


def _first_amount_outside_dates(text: str) -> re.Match | None:
    dates = [d.span() for d in _DATE_TOKEN_RE.finditer(text)]
    for m in _AMOUNT_RE.finditer(text):
        if any(m.start(1) < end and start < m.end(1) for start, end in dates):
            continue
        return m
    return None


def extract_amount(text: str) -> AmountMatch:
    """Extract the first amount from text.

    The matched span is replaced by a single space. Later numbers in the same
    line are left alone. No match keeps the text unchanged.
    """
    m = _first_amount_outside_dates(text)
    if m is None:
        return AmountMatch(amount_cents=None, remainder=text)
    cents = parse_amount_to_cents(m.group(1))
    if cents is None:
        return AmountMatch(amount_cents=None, remainder=text)
    remainder = text[: m.start()] + " " + text[m.end():]
    return AmountMatch(amount_cents=cents, remainder=remainder)


__all__ = ["AmountMatch", "extract_amount", "parse_amount_to_cents"]
