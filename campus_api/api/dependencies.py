"""Route Dependencies — resolve the store and façade from application state.

Invariants:
    - The RecordStore lives on app.state, built once by create_app/lifespan
    - No module-level store instance: every route reaches it through Depends()
"""

from fastapi import Depends, Request

from campus_api.config import Settings
from campus_api.core.record_store import RecordStore
from campus_api.services.record_access import RecordAccess


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_record_access(
    store: RecordStore = Depends(get_store),
) -> RecordAccess:
    return RecordAccess(store)


def get_request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)
