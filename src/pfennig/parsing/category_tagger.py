"""
Category keyword detection for quick-entry lines.

Without a name list only the default keyword "lebensmittel" is recognized.
Given the current category names, the longest name found in the text wins.
"""
from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from pfennig.config import DEFAULT_CATEGORY
from pfennig.model.category import normalize_category_name


@dataclass(frozen=True)
class CategoryMatch:
    category_tag: str | None
    remainder: str


def _candidates(category_names: Iterable[str] | None) -> list[str]:
    if category_names is None:
        return [DEFAULT_CATEGORY]
    seen: set[str] = set()
    out: list[str] = []
    for name in category_names:
        n = normalize_category_name(name)
        if n and n not in seen:
            seen.add(n)
            out.append(n)
    return sorted(out, key=len, reverse=True)


def _keyword_pattern(name: str) -> re.Pattern:
    return re.compile(r"(?<!\w)" + re.escape(name) + r"(?!\w)", re.IGNORECASE)


def extract_category(
    text: str, category_names: Iterable[str] | None = None
) -> CategoryMatch:
    """Find a category keyword in text and cut out every occurrence of it.

    Args:
        text: Working text
        category_names: Known category names; None means the default keyword only

    Returns:
        CategoryMatch with the lower-cased tag, or None and the unchanged text
    """
    for name in _candidates(category_names):
        pattern = _keyword_pattern(name)
        if pattern.search(text):
            return CategoryMatch(category_tag=name, remainder=pattern.sub(" ", text))
    return CategoryMatch(category_tag=None, remainder=text)


__all__ = ["CategoryMatch", "extract_category"]
