from .amount import AmountMatch, extract_amount, parse_amount_to_cents
from .category_tagger import CategoryMatch, extract_category
from .dates import DateMatch, resolve_date, to_iso_date
from .quick_entry import parse

__all__ = [
    "AmountMatch",
    "CategoryMatch",
    "DateMatch",
    "extract_amount",
    "extract_category",
    "parse",
    "parse_amount_to_cents",
    "resolve_date",
    "to_iso_date",
]
