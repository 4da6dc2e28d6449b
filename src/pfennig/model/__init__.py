from .category import Category, CategoryConfig, normalize_category_name
from .expense import Expense, ParseResult

__all__ = [
    # models
    "Category",
    "CategoryConfig",
    "Expense",
    "ParseResult",
    # helpers
    "normalize_category_name",
]
