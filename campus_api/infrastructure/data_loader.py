"""Data Loader — reads the data file and feeds its bytes to the RecordStore.

Invariants:
    - The whole file is read before the store is touched (store never sees partial bytes)
    - OSError mapped to SourceReadError; decode failures surface as DecodeError
    - On any failure the store keeps its previous snapshot

Design Decisions:
    - Startup and explicit reload share one code path: load_into_store()
    - Startup failure propagates out of the lifespan and aborts the process
      (the service never serves with no data)
"""

import logging
from pathlib import Path

from campus_api.core.errors import CampusError, SourceReadError
from campus_api.core.record_store import RecordStore

logger = logging.getLogger(__name__)


def read_source(path: str) -> bytes:
    """Read the data file fully. Raises SourceReadError on any OS error."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e


def load_into_store(store: RecordStore, path: str) -> int:
    """Read path and reload store from it. Returns the installed record count."""
    try:
        count = store.reload(read_source(path))
    except CampusError as e:
        logger.error(
            f"Failed to load data: {e.message}",
            extra={"error_code": e.code, "file": path},
        )
        raise
    logger.info(
        "Data loaded successfully",
        extra={"record_count": count, "file": path},
    )
    return count


def build_store(path: str) -> RecordStore:
    """Create a store populated from path. Used once at startup."""
    store = RecordStore()
    load_into_store(store, path)
    return store
