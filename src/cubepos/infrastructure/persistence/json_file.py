"""Shared file helpers for the JSON-backed repositories.

Each repository keeps a JSON array of records in one file.  Writes go
to a sibling temp file that is then ``os.replace``d over the original,
so readers see either the old array or the new one, never a mix.

Every read-modify-write runs through ``JsonFile.update`` under a lock
held per file path, so two writers in the same process cannot both
start from the same old array and drop each other's change.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)

_registry_guard = threading.Lock()
_path_locks: dict[Path, threading.RLock] = {}


def _lock_for(path: Path) -> threading.RLock:
    with _registry_guard:
        return _path_locks.setdefault(path.resolve(), threading.RLock())


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = _lock_for(file_path)
        self._ensure_file()

    def load(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def update(self, mutator: Callable[[list[dict]], list[dict]]) -> None:
        """Load, apply *mutator*, persist; all under the file's lock.

        If *mutator* raises, nothing is written.
        """
        with self._lock:
            records = mutator(self.load())
            self._persist(records)

    def next_id(self) -> str:
        ids = [int(r["id"]) for r in self.load() if str(r["id"]).isdigit()]
        return str(max(ids) + 1) if ids else "1"

    def _persist(self, records: list[dict]) -> None:
        payload = json.dumps(records, indent=2) + "\n"
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._file_path.name}.", dir=self._file_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d record(s) to %s", len(records), self._file_path)

    def _ensure_file(self) -> None:
        with self._lock:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")


def upsert(records: list[dict], raw: dict) -> list[dict]:
    """Replace the record with ``raw["id"]`` or append *raw*."""
    for i, existing in enumerate(records):
        if existing["id"] == raw["id"]:
            records[i] = raw
            return records
    records.append(raw)
    return records
