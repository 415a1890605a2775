"""A JSON file loaded into memory for the span of one transaction.

Reads and writes go against the in-memory records. Nothing reaches the
disk until the owning unit of work writes the table out, and that is
done through a temporary sibling file plus ``os.replace`` so a reader
never sees a half-written file.
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable
from pathlib import Path


class JsonTable:

    def __init__(self, file_path: Path) -> None:
        self.file_path = file_path
        self._ensure_file()
        self._records: list[dict] = json.loads(file_path.read_text(encoding="utf-8"))
        self.dirty = False

    # --- Queries ------------------------------------------------------------------

    def all(self) -> list[dict]:
        return list(self._records)

    def find(self, key: str, value: object) -> dict | None:
        for raw in self._records:
            if raw[key] == value:
                return raw
        return None

    def where(self, predicate: Callable[[dict], bool]) -> list[dict]:
        return [raw for raw in self._records if predicate(raw)]

    def next_id(self) -> int:
        if not self._records:
            return 1
        return max(int(raw["id"]) for raw in self._records) + 1

    # --- Staged mutations ---------------------------------------------------------

    def upsert(self, key: str, record: dict) -> None:
        """Replace the record with the same *key* value, or append it."""
        for i, raw in enumerate(self._records):
            if raw[key] == record[key]:
                self._records[i] = record
                break
        else:
            self._records.append(record)
        self.dirty = True

    def delete_where(self, predicate: Callable[[dict], bool]) -> int:
        kept = [raw for raw in self._records if not predicate(raw)]
        removed = len(self._records) - len(kept)
        if removed:
            self._records = kept
            self.dirty = True
        return removed

    # --- File helpers -------------------------------------------------------------

    def write_temp(self) -> Path:
        """Write the staged records next to the real file and return its path."""
        temp_path = self.file_path.with_name(f".{self.file_path.name}.{os.getpid()}.tmp")
        try:
            temp_path.write_text(json.dumps(self._records, indent=2) + "\n", encoding="utf-8")
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
        return temp_path

    def _ensure_file(self) -> None:
        if not self.file_path.exists():
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text("[]", encoding="utf-8")
