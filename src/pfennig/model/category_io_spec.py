from __future__ import annotations

"""
Tests for category YAML I/O.
"""

from pathlib import Path

from pfennig.model.category import Category, CategoryConfig
from pfennig.model.category_io import load_categories_config, save_categories_config


class DescribeCategoryIO:
    def it_should_return_empty_config_for_missing_file(self, tmp_path: Path):
        config = load_categories_config(tmp_path / "missing.yml")
        assert config.categories == []

    def it_should_save_and_load_categories(self, tmp_path: Path):
        path = tmp_path / "config" / "categories.yml"
        config = CategoryConfig(
            categories=[
                Category(id="c1", name="Lebensmittel", monthly_budget_cents=30000),
                Category(id="c2", name="Transport"),
            ]
        )
        save_categories_config(path, config)
        assert load_categories_config(path) == config

    def it_should_omit_unset_budgets(self, tmp_path: Path):
        path = tmp_path / "categories.yml"
        save_categories_config(path, CategoryConfig(categories=[Category(id="c2", name="Bus")]))
        assert "monthly_budget_cents" not in path.read_text(encoding="utf-8")

    def it_should_keep_umlauts_readable(self, tmp_path: Path):
        path = tmp_path / "categories.yml"
        save_categories_config(path, CategoryConfig(categories=[Category(name="Bäckerei")]))
        assert "Bäckerei" in path.read_text(encoding="utf-8")

    def it_should_treat_invalid_yaml_as_empty(self, tmp_path: Path):
        path = tmp_path / "categories.yml"
        path.write_text("categories: [ {name: ", encoding="utf-8")
        assert load_categories_config(path).categories == []

    def it_should_treat_invalid_schema_as_empty(self, tmp_path: Path):
        path = tmp_path / "categories.yml"
        path.write_text("categories:\n  - name: ''\n", encoding="utf-8")
        assert load_categories_config(path).categories == []
