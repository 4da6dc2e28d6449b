"""
Workspace - centralized data path resolution for pfennig.

A Workspace represents the root directory containing all expense data.
All paths (category config, expense ledger, override store, exports) are
computed relative to this root.

Resolution priority:
1. Explicit path (--data-dir CLI option)
2. PFENNIG_DATA environment variable
3. Current working directory
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_VAR = "PFENNIG_DATA"


@dataclass
class Workspace:
    """Root directory for all expense data paths."""

    root: Path

    @classmethod
    def resolve(cls, explicit: Path | None = None) -> Workspace:
        """Resolve workspace root from explicit path, env var, or CWD.

        Args:
            explicit: Explicitly provided path (highest priority)

        Returns:
            Workspace with resolved root
        """
        if explicit is not None:
            return cls(root=explicit)
        env = os.environ.get(ENV_VAR)
        if env:
            return cls(root=Path(env))
        return cls(root=Path.cwd())

    @property
    def data_dir(self) -> Path:
        return self.root / "data"

    @property
    def expenses_ledger(self) -> Path:
        return self.data_dir / "expenses.csv"

    @property
    def overrides_path(self) -> Path:
        return self.data_dir / "overrides.yml"

    @property
    def categories_config(self) -> Path:
        return self.root / "config" / "categories.yml"

    @property
    def exports_dir(self) -> Path:
        return self.root / "exports"


__all__ = ["ENV_VAR", "Workspace"]
