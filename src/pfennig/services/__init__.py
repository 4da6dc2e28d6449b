"""
Service layer for pfennig.

This package holds the functional core separated from the imperative shell
(CLI). Services take their stores through constructors and return data
structures; nothing here prints or prompts.

Principles:
- No UI framework imports (Rich, Typer)
- All dependencies injected through constructors
- Functions return data structures, not void
"""

from pfennig.services.budget_projector import (
    BudgetStatus,
    StatusClass,
    month_to_date_spend,
    projected_allowance_today,
    remaining_pace_per_day,
    spend_override_key,
)
from pfennig.services.budget_service import BudgetService, DailyBudget
from pfennig.services.expense_query_service import DateRange, filter_expenses
from pfennig.services.quick_entry_service import QuickEntryPlan, QuickEntryService

__all__ = [
    # Budget projection
    "BudgetStatus",
    "StatusClass",
    "month_to_date_spend",
    "projected_allowance_today",
    "remaining_pace_per_day",
    "spend_override_key",
    # Budget service
    "BudgetService",
    "DailyBudget",
    # Listing
    "DateRange",
    "filter_expenses",
    # Quick entry
    "QuickEntryPlan",
    "QuickEntryService",
]
