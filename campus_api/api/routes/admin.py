"""Admin Routes — explicit reload of the data file.

Invariants:
    - Mounted only when settings.reload_enabled is true
    - Failed reload reports the error and keeps serving the previous snapshot

Design Decisions:
    - Sync def: FastAPI runs it in the threadpool, so the file read and decode
      never block the event loop while readers keep being served
"""

import logging

from fastapi import APIRouter, Depends

from campus_api.api.dependencies import get_settings_dep, get_store
from campus_api.config import Settings
from campus_api.core.record_store import RecordStore
from campus_api.infrastructure.data_loader import load_into_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/reload")
def reload_data(
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_settings_dep),
):
    """Re-read the data file and atomically swap in the new snapshot."""
    count = load_into_store(store, settings.data_file_path)
    return {
        "status": "reloaded",
        "records": count,
        "loaded_at": store.loaded_at.isoformat(),
    }
