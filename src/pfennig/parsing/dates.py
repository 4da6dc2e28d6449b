"""
Date resolution for quick-entry lines.

Recognizes, in priority order:
1. An explicit German-style date (15.3.2024 or 15.03.2024)
2. Relative and weekday keywords (heute, gestern, vorgestern, mo..so, montag..sonntag)
3. Nothing: the reference day

The reference instant is always supplied by the caller so results never depend
on the wall clock.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

_EXPLICIT_DATE_RE = re.compile(r"\b(\d{1,2})\.(\d{1,2})\.(\d{4})\b")
_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_DMY_DATE_RE = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$")

# Days to go back from the reference day
RELATIVE_KEYWORDS: dict[str, int] = {
    "heute": 0,
    "gestern": 1,
    "vorgestern": 2,
}

# Monday=1 ... Saturday=6, Sunday=0
WEEKDAY_KEYWORDS: dict[str, int] = {
    "mo": 1,
    "montag": 1,
    "di": 2,
    "dienstag": 2,
    "mi": 3,
    "mittwoch": 3,
    "do": 4,
    "donnerstag": 4,
    "fr": 5,
    "freitag": 5,
    "sa": 6,
    "samstag": 6,
    "so": 0,
    "sonntag": 0,
}


@dataclass(frozen=True)
class DateMatch:
    date: date
    remainder: str


def reference_day(now: date | datetime) -> date:
    """Calendar day of the caller's reference instant.

    Raises:
        TypeError: if now is not a date or datetime
    """
    if isinstance(now, datetime):
        return now.date()
    if isinstance(now, date):
        return now
    raise TypeError(f"now must be a date or datetime, got {type(now).__name__}")


def weekday_number(day: date) -> int:
    """Weekday in the keyword table's numbering (Monday=1 ... Sunday=0)."""
    return day.isoweekday() % 7


def days_back_to_weekday(current: int, target: int) -> int:
    """Days to step back to the most recent target weekday, never zero."""
    diff = (current - target) % 7
    return diff or 7


def resolve_keyword(token: str, today: date) -> date | None:
    """Map a single keyword token to a date, or None if it is not a keyword."""
    t = token.lower()
    if t in RELATIVE_KEYWORDS:
        return today - timedelta(days=RELATIVE_KEYWORDS[t])
    if t in WEEKDAY_KEYWORDS:
        back = days_back_to_weekday(weekday_number(today), WEEKDAY_KEYWORDS[t])
        return today - timedelta(days=back)
    return None


def _find_explicit_date(text: str) -> tuple[date, re.Match] | None:
    for m in _EXPLICIT_DATE_RE.finditer(text):
        day, month, year = (int(g) for g in m.groups())
        try:
            return date(year, month, day), m
        except ValueError:
            # 31.2.2024 and friends are not dates; keep looking
            continue
    return None


def resolve_date(text: str, now: date | datetime) -> DateMatch:
    """Resolve the date mentioned in text relative to now.

    An explicit date wins and is cut out of the text. Otherwise every keyword
    token is removed and the last one decides the date. Without either, the
    date is now's calendar day and the text is returned unchanged.
    """
    today = reference_day(now)

    explicit = _find_explicit_date(text)
    if explicit is not None:
        found, m = explicit
        remainder = text[: m.start()] + " " + text[m.end():]
        return DateMatch(date=found, remainder=remainder)

    resolved: date | None = None
    keep: list[str] = []
    for tok in text.split():
        d = resolve_keyword(tok, today)
        if d is None:
            keep.append(tok)
        else:
            resolved = d

    if resolved is None:
        return DateMatch(date=today, remainder=text)
    return DateMatch(date=resolved, remainder=" ".join(keep))


def to_iso_date(value: str) -> date:
    """Parse a D.M.YYYY or YYYY-MM-DD string into a date.

    Raises:
        ValueError: if the value matches neither form or is not a real date
    """
    v = (value or "").strip()
    m = _DMY_DATE_RE.match(v)
    if m:
        day, month, year = (int(g) for g in m.groups())
        return date(year, month, day)
    m = _ISO_DATE_RE.match(v)
    if m:
        year, month, day = (int(g) for g in m.groups())
        return date(year, month, day)
    raise ValueError(f"Unrecognized date: {value!r} (expected D.M.YYYY or YYYY-MM-DD)")


__all__ = [
    "DateMatch",
    "RELATIVE_KEYWORDS",
    "WEEKDAY_KEYWORDS",
    "days_back_to_weekday",
    "reference_day",
    "resolve_date",
    "resolve_keyword",
    "to_iso_date",
    "weekday_number",
]
