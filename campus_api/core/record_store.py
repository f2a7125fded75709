"""Record Store — concurrent read cache with atomic snapshot reload.

Invariants:
    - Exactly one current snapshot; a snapshot is an immutable tuple of frozen Records
    - install() swaps the snapshot reference, never mutates the old snapshot
    - Readers hold the lock only to take a reference; copies are private to the caller
    - reload() decodes outside the lock; a failed decode leaves the snapshot untouched
    - get_by_id() is case-sensitive exact match, first hit in load order wins

Design Decisions:
    - Plain Lock over a reader/writer lock: the critical section is a single reference
      read or write, so readers never wait behind a parse (ADR: copy-on-write cache)
    - Store does no file IO: bytes come from infrastructure/data_loader.py
    - Duplicate ids kept verbatim: the data file is trusted, lookup returns first match
"""

import logging
import threading
from collections.abc import Iterable
from datetime import datetime, timezone

from pydantic import ValidationError

from campus_api.core.errors import DecodeError
from campus_api.schemas.record import Record, RecordList

logger = logging.getLogger(__name__)

Snapshot = tuple[Record, ...]


class RecordStore:
    """Holds the current snapshot of records and serves concurrent reads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot: Snapshot = ()
        self._loaded_at: datetime | None = None

    def _current(self) -> Snapshot:
        with self._lock:
            return self._snapshot

    def install(self, records: Iterable[Record]) -> None:
        """Replace the current snapshot unconditionally."""
        snapshot = tuple(records)
        with self._lock:
            self._snapshot = snapshot
            self._loaded_at = datetime.now(timezone.utc)
        logger.debug(
            "Snapshot installed", extra={"record_count": len(snapshot)},
        )

    def list(self) -> list[Record]:
        """Return all records in load order. The list is the caller's to mutate."""
        return list(self._current())

    def get_by_id(self, guid: str) -> Record | None:
        """Return the first record whose id equals guid exactly, else None."""
        for record in self._current():
            if record.id == guid:
                return record
        return None

    def count(self) -> int:
        return len(self._current())

    @property
    def loaded_at(self) -> datetime | None:
        """UTC time of the last install, None if never installed."""
        with self._lock:
            return self._loaded_at

    def reload(self, source: bytes | str) -> int:
        """Decode source as a JSON array of records and install it.

        Returns the number of records installed. Raises DecodeError and keeps
        the current snapshot if source is not a valid record array.
        """
        records = decode_records(source)
        self.install(records)
        return len(records)


def decode_records(source: bytes | str) -> list[Record]:
    """Decode a JSON array of wire records. Pure, no IO."""
    try:
        return RecordList.validate_json(source)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(loc) for loc in first["loc"]) or "<root>"
        raise DecodeError(
            f"{e.error_count()} error(s), first at {location}: {first['msg']}",
        ) from e
