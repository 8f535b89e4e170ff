"""Shared plumbing for the JSON-file-backed repositories.

Each aggregate lives in its own file holding a JSON document::

    {"next_id": 3, "records": [{"id": 1, ...}, {"id": 2, ...}]}

``next_id`` is a high-water mark: it only ever grows, so an id is never
handed out twice, even after the record that held it is deleted. A bare
JSON array (the older layout) is still read; it is upgraded on next write.

Every read-modify-write of a file runs under a per-file lock, so writers
in one process never interleave on the same file.
"""

from __future__ import annotations

import json
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import InvalidOperation
from pathlib import Path
from typing import Any, Generic, TypeVar

from storefront.domain.exceptions import StorageError, ValidationError

T = TypeVar("T")

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path.resolve(), threading.RLock())


class RecordSet:
    """The records of one file plus its id high-water mark."""

    def __init__(self, records: list[dict], next_id: int) -> None:
        self.records = records
        self.next_id = next_id

    def allocate_id(self) -> int:
        entity_id = self.next_id
        self.next_id += 1
        return entity_id

    def reserve(self, entity_id: int) -> None:
        """Make sure ``entity_id`` is never allocated later."""
        self.next_id = max(self.next_id, entity_id + 1)


class JsonRecordFile:
    """A JSON document of id-keyed records on disk."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = _lock_for(file_path)
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        return self.read().records

    def read(self) -> RecordSet:
        with self._lock:
            try:
                document = json.loads(self._file_path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                raise StorageError(f"Cannot read {self._file_path.name}: {exc}") from exc

        if isinstance(document, list):
            records, next_id = document, 1
        elif isinstance(document, dict) and isinstance(document.get("records"), list):
            records, next_id = document["records"], document.get("next_id", 1)
        else:
            raise StorageError(f"{self._file_path.name} does not hold a list of records")

        if not isinstance(next_id, int) or isinstance(next_id, bool) or next_id < 1:
            raise StorageError(f"{self._file_path.name} has an invalid next_id: {next_id!r}")

        record_set = RecordSet(records, next_id)
        for raw in records:
            record_set.reserve(self.record_id(raw))
        return record_set

    def write(self, record_set: RecordSet) -> None:
        document = {"next_id": record_set.next_id, "records": record_set.records}
        with self._lock:
            try:
                self._file_path.write_text(
                    json.dumps(document, indent=2) + "\n", encoding="utf-8"
                )
            except OSError as exc:
                raise StorageError(f"Cannot write {self._file_path.name}: {exc}") from exc

    @contextmanager
    def transaction(self) -> Iterator[RecordSet]:
        """Yield the record set and write it back if the block succeeds."""
        with self._lock:
            record_set = self.read()
            yield record_set
            self.write(record_set)

    def record_id(self, raw: Any) -> int:
        entity_id = raw.get("id") if isinstance(raw, dict) else None
        if not isinstance(entity_id, int) or isinstance(entity_id, bool):
            raise StorageError(f"Corrupt record in {self._file_path.name}: {raw!r}")
        return entity_id

    def _ensure_file(self) -> None:
        try:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self.write(RecordSet([], 1))
        except OSError as exc:
            raise StorageError(f"Cannot create {self._file_path}: {exc}") from exc


class JsonRepository(ABC, Generic[T]):
    """Id-keyed CRUD over a ``JsonRecordFile``.

    Entities are expected to carry an ``id`` attribute that is ``None``
    until first saved. Ids come from the file's high-water mark and are
    never reused after a delete.
    """

    def __init__(self, file_path: Path) -> None:
        self._records = JsonRecordFile(file_path)

    # --- Serialization hooks --------------------------------------------------

    @staticmethod
    @abstractmethod
    def _to_raw(entity: Any) -> dict: ...

    @staticmethod
    @abstractmethod
    def _to_domain(raw: dict) -> Any: ...

    # --- Generic operations ---------------------------------------------------

    def _get(self, entity_id: int) -> T | None:
        for raw in self._records.load():
            if self._records.record_id(raw) == entity_id:
                return self._decode(raw)
        return None

    def _list(self) -> list[T]:
        return [self._decode(raw) for raw in self._records.load()]

    def _save(self, entity: Any) -> None:
        with self._records.transaction() as record_set:
            if entity.id is None:
                entity.id = record_set.allocate_id()
            else:
                record_set.reserve(entity.id)

            # Upsert: replace if exists, otherwise append
            records = record_set.records
            for i, raw in enumerate(records):
                if self._records.record_id(raw) == entity.id:
                    records[i] = self._to_raw(entity)
                    break
            else:
                records.append(self._to_raw(entity))

    def _delete(self, entity_id: int) -> bool:
        with self._records.transaction() as record_set:
            records = record_set.records
            for i, raw in enumerate(records):
                if self._records.record_id(raw) == entity_id:
                    del records[i]
                    return True
        return False

    def _decode(self, raw: dict) -> T:
        try:
            return self._to_domain(raw)
        except (KeyError, TypeError, ValueError, InvalidOperation, ValidationError) as exc:
            raise StorageError(
                f"Corrupt record in {self._records.path.name}: {raw!r}"
            ) from exc
