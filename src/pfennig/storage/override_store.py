"""
Key/value store for manual month-to-date spend corrections.

Backed by a flat YAML mapping at data/overrides.yml:

    food_spent_override_2024-03: 12345
"""
from __future__ import annotations

import logging
from pathlib import Path

import yaml

log = logging.getLogger(__name__)


class OverrideStore:
    def __init__(self, path: Path):
        self.path = path

    def _load(self) -> dict[str, int]:
        if not self.path.exists():
            return {}
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            log.warning("Ignoring unreadable override store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring override store %s: not a mapping", self.path)
            return {}
        # Only whole cent values count; anything else is treated as absent
        return {
            str(k): v
            for k, v in data.items()
            if isinstance(v, int) and not isinstance(v, bool)
        }

    def _save(self, data: dict[str, int]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=True)

    def get_override(self, scope_key: str) -> int | None:
        return self._load().get(scope_key)

    def set_override(self, scope_key: str, cents: int) -> None:
        if isinstance(cents, bool) or not isinstance(cents, int) or cents < 0:
            raise ValueError(f"Override must be a non-negative number of cents, got {cents!r}")
        data = self._load()
        data[scope_key] = cents
        self._save(data)
        log.debug("Override %s set to %d", scope_key, cents)

    def clear_override(self, scope_key: str) -> bool:
        """Remove an override. Returns False when none was set."""
        data = self._load()
        if scope_key not in data:
            return False
        del data[scope_key]
        self._save(data)
        log.debug("Override %s cleared", scope_key)
        return True


__all__ = ["OverrideStore"]
