from __future__ import annotations

"""
Category configuration I/O (YAML loading and saving).

Functions for reading and writing config/categories.yml.

Privacy
- All operations are local file I/O only
- No network access
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from pfennig.model.category import CategoryConfig

log = logging.getLogger(__name__)


def load_categories_config(path: Path) -> CategoryConfig:
    """Load categories config from YAML locally (safe loader).

    Returns an empty CategoryConfig when the file is missing. An unreadable or
    invalid file is logged and also treated as empty.

    Args:
        path: Path to categories.yml file

    Returns:
        CategoryConfig instance
    """
    if not path.exists():
        return CategoryConfig(categories=[])

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return CategoryConfig.model_validate(data)
    except (yaml.YAMLError, ValidationError) as e:
        log.warning("Ignoring invalid category config %s: %s", path, e)
        return CategoryConfig(categories=[])


def save_categories_config(path: Path, config: CategoryConfig) -> None:
    """Save categories config to YAML file.

    Creates parent directories if needed. Budgets that are unset are omitted.

    Args:
        path: Path to categories.yml file
        config: CategoryConfig instance to save
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(exclude_none=True, mode="json")

    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(
            data,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


__all__ = [
    "load_categories_config",
    "save_categories_config",
]
