"""Infrastructure: JSON store for fixed clock suppliers."""

from __future__ import annotations

import json
import os

from clock_toolkit.infrastructure.clock import FixedClockSupplier


class JsonFixedClockStore:
    """Persists fixed clock suppliers as small JSON files under a base directory.

    A bare name maps to ``<base>/<name>.json``; anything that looks like a
    path (contains a separator or ends in ``.json``) is used as given.
    """

    def __init__(self, base: str = ".") -> None:
        self._base = os.path.abspath(base)

    # ---- paths ----

    def base_path(self) -> str:
        return self._base

    def _path_for(self, name_or_path: str) -> str:
        if os.sep in name_or_path or name_or_path.endswith(".json"):
            return os.path.abspath(name_or_path)
        return os.path.join(self._base, f"{name_or_path}.json")

    # ---- public api ----

    def save(self, supplier: FixedClockSupplier, name: str) -> str:
        path = self._path_for(name)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(supplier.to_dict(), f, indent=2)
        return path

    def load(self, name_or_path: str) -> FixedClockSupplier:
        path = self._path_for(name_or_path)
        with open(path, "r", encoding="utf-8") as f:
            return FixedClockSupplier.from_dict(json.load(f))

    def exists(self, name_or_path: str) -> bool:
        return os.path.exists(self._path_for(name_or_path))
