"""
Expense listing - range and free-text filtering, newest first.
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from enum import StrEnum

from pfennig.model.category import CategoryConfig
from pfennig.model.expense import Expense
from pfennig.parsing.dates import reference_day


class DateRange(StrEnum):
    today = "today"
    week = "week"
    month = "month"
    all = "all"


def week_bounds(day: date) -> tuple[date, date]:
    """Monday and Sunday of day's week."""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)


def in_range(expense_date: date, range_: DateRange, today: date) -> bool:
    if range_ == DateRange.today:
        return expense_date == today
    if range_ == DateRange.week:
        start, end = week_bounds(today)
        return start <= expense_date <= end
    if range_ == DateRange.month:
        return (expense_date.year, expense_date.month) == (today.year, today.month)
    return True


def filter_expenses(
    expenses: Iterable[Expense],
    categories: CategoryConfig,
    *,
    range_: DateRange = DateRange.month,
    query: str = "",
    today: date | datetime,
) -> list[Expense]:
    """Expenses in range whose name, note or category name contain query.

    Sorted by date, newest first; ties keep ledger order.
    """
    day = reference_day(today)
    q = (query or "").strip().lower()
    out: list[Expense] = []
    for e in expenses:
        if not in_range(e.date, range_, day):
            continue
        if q:
            cat = categories.find_by_id(e.category_id)
            hay = f"{e.name} {e.note} {cat.name if cat else ''}".lower()
            if q not in hay:
                continue
        out.append(e)
    return sorted(out, key=lambda e: e.date, reverse=True)


__all__ = ["DateRange", "filter_expenses", "in_range", "week_bounds"]
