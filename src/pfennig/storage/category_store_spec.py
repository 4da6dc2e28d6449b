from __future__ import annotations

"""
Tests for the YAML-backed category source.
"""

from pathlib import Path

import pytest

from pfennig.model.category_io import load_categories_config
from pfennig.storage.category_store import CategoryStore


@pytest.fixture
def store(tmp_path: Path) -> CategoryStore:
    return CategoryStore(tmp_path / "config" / "categories.yml")


class DescribeCategoryStore:
    class DescribeEnsureDefaults:
        def it_should_create_lebensmittel_once(self, store):
            first = store.ensure_defaults()
            second = store.ensure_defaults()
            assert first.name == "Lebensmittel"
            assert first.id == second.id
            assert len(store.list_categories()) == 1

        def it_should_accept_an_existing_lower_case_category(self, store):
            existing_id = store.ensure_category("lebensmittel")
            assert store.ensure_defaults().id == existing_id

    class DescribeEnsureCategory:
        def it_should_return_existing_id_ignoring_case(self, store):
            cat = store.ensure_defaults()
            assert store.ensure_category("LEBENSMITTEL") == cat.id

        def it_should_create_missing_category_lower_cased(self, store):
            cat_id = store.ensure_category("  Transport ")
            cat = store.find_category("transport")
            assert cat.id == cat_id
            assert cat.name == "transport"
            assert cat.monthly_budget_cents is None

        def it_should_return_none_for_blank_names(self, store):
            assert store.ensure_category("  ") is None
            assert store.ensure_category(None) is None
            assert store.list_categories() == []

        def it_should_persist_to_yaml(self, store):
            store.ensure_category("Kino")
            assert load_categories_config(store.path).find_category("kino") is not None

    class DescribeBudgets:
        def it_should_set_and_clear_budget(self, store):
            store.ensure_defaults()
            assert store.set_budget("lebensmittel", 30000).monthly_budget_cents == 30000
            assert store.find_category("Lebensmittel").monthly_budget_cents == 30000
            store.set_budget("Lebensmittel", None)
            assert store.find_category("Lebensmittel").monthly_budget_cents is None

        def it_should_return_none_for_unknown_category(self, store):
            assert store.set_budget("nope", 100) is None

    class DescribeRemove:
        def it_should_remove_category(self, store):
            store.ensure_category("Kino")
            removed = store.remove_category("KINO")
            assert removed.name == "kino"
            assert store.find_category("kino") is None

        def it_should_return_none_when_missing(self, store):
            assert store.remove_category("Kino") is None
