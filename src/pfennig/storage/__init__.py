from .category_store import CategoryStore
from .expense_store import ExpenseStore
from .override_store import OverrideStore

__all__ = ["CategoryStore", "ExpenseStore", "OverrideStore"]
