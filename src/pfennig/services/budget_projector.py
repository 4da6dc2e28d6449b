"""
Budget Projector - spending pace for a monthly budget.

Pure functions over a monthly budget, the month-to-date spend and the current
day. Two separate metrics are offered:

- remaining_pace_per_day: what is left, spread evenly over the remaining days
  (today included).
- projected_allowance_today: how far spending is below (or above) an even
  month-long pace up to and including today.

NO IMPORTS FROM rich, typer or the storage layer. All inputs are injected.
"""
from __future__ import annotations

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

from pfennig.config import DEFAULT_OVERRIDE_SCOPE
from pfennig.model.expense import Expense
from pfennig.money import format_cents
from pfennig.parsing.dates import reference_day

NO_BUDGET_MESSAGE = "No monthly budget set."
NO_CATEGORY_MESSAGE = "No matching category found."


class StatusClass(StrEnum):
    """Display classification of a budget status."""

    ok = "ok"
    warn = "warn"
    danger = "danger"
    muted = "muted"


@dataclass(frozen=True)
class BudgetStatus:
    """Human-facing budget signal plus the figures behind it (in cents)."""

    message: str
    classification: StatusClass
    left_cents: int | None = None
    days_left: int | None = None
    per_day_cents: float | None = None
    target_so_far_cents: float | None = None
    allow_today_cents: float | None = None


def days_in_month(day: date) -> int:
    return calendar.monthrange(day.year, day.month)[1]


def days_left_in_month(day: date) -> int:
    """Days from day to the end of its month, both ends included."""
    return days_in_month(day) - day.day + 1


def year_month(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def spend_override_key(today: date | datetime, scope: str = DEFAULT_OVERRIDE_SCOPE) -> str:
    """Override record key for the month of today, e.g. 'food_spent_override_2024-03'."""
    return f"{scope}_{year_month(reference_day(today))}"


def month_to_date_spend(expenses: Iterable[Expense], override: int | None = None) -> int:
    """Sum of expense amounts, unless a manual override is present."""
    if override is not None:
        return override
    return sum(e.amount_cents for e in expenses)


def no_budget_status() -> BudgetStatus:
    return BudgetStatus(message=NO_BUDGET_MESSAGE, classification=StatusClass.warn)


def no_category_status() -> BudgetStatus:
    return BudgetStatus(message=NO_CATEGORY_MESSAGE, classification=StatusClass.muted)


def remaining_pace_per_day(
    monthly_budget_cents: int | None,
    month_to_date_spend_cents: int,
    today: date | datetime,
) -> BudgetStatus:
    """Budget left this month divided by the days left (today included).

    ok while anything is left, danger once the budget is used up.
    """
    day = reference_day(today)
    if not monthly_budget_cents:
        return no_budget_status()

    left = max(0, monthly_budget_cents - month_to_date_spend_cents)
    days_left = days_left_in_month(day)
    per_day = left / days_left
    cls = StatusClass.ok if left > 0 else StatusClass.danger
    return BudgetStatus(
        message=(
            f"{format_cents(left)} left this month · "
            f"Ø {format_cents(per_day)} per day ({days_left} days left)"
        ),
        classification=cls,
        left_cents=left,
        days_left=days_left,
        per_day_cents=per_day,
    )


def projected_allowance_today(
    monthly_budget_cents: int | None,
    month_to_date_spend_cents: int,
    today: date | datetime,
) -> BudgetStatus:
    """Even-pace target up to today minus what was spent.

    ok when at or below pace, danger when ahead of it.
    """
    day = reference_day(today)
    if not monthly_budget_cents:
        return no_budget_status()

    target_so_far = monthly_budget_cents / days_in_month(day) * day.day
    allow_today = target_so_far - month_to_date_spend_cents
    cls = StatusClass.ok if allow_today >= 0 else StatusClass.danger
    return BudgetStatus(
        message=(
            f"{format_cents(allow_today)} available today on plan · "
            "(budget / days in month × day) − spent"
        ),
        classification=cls,
        target_so_far_cents=target_so_far,
        allow_today_cents=allow_today,
    )


__all__ = [
    "BudgetStatus",
    "NO_BUDGET_MESSAGE",
    "NO_CATEGORY_MESSAGE",
    "StatusClass",
    "days_in_month",
    "days_left_in_month",
    "month_to_date_spend",
    "no_budget_status",
    "no_category_status",
    "projected_allowance_today",
    "remaining_pace_per_day",
    "spend_override_key",
    "year_month",
]
