"""File-based JSON table keyed by identity.

Each table is a single JSON object ``{identity: record_dict}``. Writes go
to a sibling temp file that then replaces the table, so a table on disk is
always either the old or the new version.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional


class KeyedTable:
    """A persisted map from identity to a record dict.

    Storage path: ``<base_dir>/<name>.json``.
    """

    def __init__(self, base_dir: str | Path, name: str) -> None:
        self._base = Path(base_dir)
        self._base.mkdir(parents=True, exist_ok=True)
        self.name = name
        self.path = self._base / f"{name}.json"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read(self) -> dict[str, dict]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Table {self.path} does not hold a JSON object")
        return data

    def _write(self, data: dict[str, dict]) -> None:
        tmp = self.path.with_suffix(".json.tmp")
        tmp.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp, self.path)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get(self, identity: str) -> Optional[dict]:
        """Return the record dict stored for ``identity``, or None."""
        return self._read().get(identity)

    def contains(self, identity: str) -> bool:
        return identity in self._read()

    def put(self, identity: str, record: dict) -> None:
        """Insert or replace the record for ``identity``."""
        data = self._read()
        data[identity] = record
        self._write(data)

    def delete(self, identity: str) -> bool:
        """Remove the record for ``identity``. Returns False if absent."""
        data = self._read()
        if identity not in data:
            return False
        del data[identity]
        self._write(data)
        return True
