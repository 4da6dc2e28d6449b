"""
Cent formatting for the single supported locale (de-DE, EUR).
"""
from __future__ import annotations

from decimal import Decimal

from pfennig.config import CURRENCY_SYMBOL


def format_cents(cents: float) -> str:
    """Render cents as a de-DE currency string, e.g. 123456 -> '1.234,56 €'."""
    value = cents / 100
    s = f"{abs(value):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if value < 0 and s != "0,00" else ""
    return f"{sign}{s} {CURRENCY_SYMBOL}"


def format_cents_plain(cents: int) -> str:
    """Render cents without trailing zeros and with a decimal comma: 1250 -> '12,5'."""
    s = f"{Decimal(cents).scaleb(-2):f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s.replace(".", ",")


__all__ = ["format_cents", "format_cents_plain"]
