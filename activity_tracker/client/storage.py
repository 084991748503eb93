"""String-keyed durable stores backing the client cache."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol

from activity_tracker.domain.errors import StorageError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Storage that maps string keys to string records."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStore:
    """Process-local store, used for ephemeral sessions and tests."""

    def __init__(self) -> None:
        self._records: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._records.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._records[key] = value

    def remove_item(self, key: str) -> None:
        self._records.pop(key, None)


class JsonFileStore:
    """Keep every record in a single JSON object file.

    Writes go to a temporary sibling file first and are moved into place, so
    a crash never leaves a half-written file behind.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Store ``value``; an unreadable file is replaced by a fresh one."""

        try:
            records = self._read()
        except StorageError as exc:
            logger.warning("Discarding unreadable store file: %s", exc)
            records = {}
        records[key] = value
        self._write(records)

    def remove_item(self, key: str) -> None:
        records = self._read()
        if records.pop(key, None) is not None:
            self._write(records)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"{self.path} does not contain a JSON object")
        return data

    def _write(self, records: dict[str, object]) -> None:
        temp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as handle:
                json.dump(records, handle, ensure_ascii=False)
            os.replace(temp_path, self.path)
        except OSError as exc:
            temp_path.unlink(missing_ok=True)
            raise StorageError(f"Cannot write {self.path}: {exc}") from exc


__all__ = ["JsonFileStore", "KeyValueStore", "MemoryStore"]
