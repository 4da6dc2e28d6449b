from __future__ import annotations

"""
Tests for the spend override store.
"""

from pathlib import Path

import pytest

from pfennig.storage.override_store import OverrideStore

KEY = "food_spent_override_2024-03"


@pytest.fixture
def store(tmp_path: Path) -> OverrideStore:
    return OverrideStore(tmp_path / "data" / "overrides.yml")


class DescribeOverrideStore:
    def it_should_return_none_when_unset(self, store):
        assert store.get_override(KEY) is None

    def it_should_set_and_get_override(self, store):
        store.set_override(KEY, 12345)
        assert store.get_override(KEY) == 12345
        assert store.get_override("food_spent_override_2024-04") is None

    def it_should_overwrite_existing_override(self, store):
        store.set_override(KEY, 1)
        store.set_override(KEY, 2)
        assert store.get_override(KEY) == 2

    def it_should_clear_override(self, store):
        store.set_override(KEY, 500)
        assert store.clear_override(KEY) is True
        assert store.get_override(KEY) is None
        assert store.clear_override(KEY) is False

    def it_should_allow_zero(self, store):
        store.set_override(KEY, 0)
        assert store.get_override(KEY) == 0

    def it_should_reject_negative_or_fractional_values(self, store):
        with pytest.raises(ValueError):
            store.set_override(KEY, -1)
        with pytest.raises(ValueError):
            store.set_override(KEY, 1.5)

    def it_should_ignore_non_numeric_entries(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(f"{KEY}: lots\nother: 7\n", encoding="utf-8")
        assert store.get_override(KEY) is None
        assert store.get_override("other") == 7

    def it_should_treat_a_non_mapping_file_as_empty(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("- 1\n- 2\n", encoding="utf-8")
        assert store.get_override(KEY) is None
