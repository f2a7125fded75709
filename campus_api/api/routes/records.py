"""Record Routes — list all records and look one up by guid.

Invariants:
    - GET / returns every record in load order (no pagination, filter or sort)
    - GET /{guid} → 200 record, 400 INVALID_GUID, 404 RECORD_NOT_FOUND
    - Records encoded with wire keys; empty ncaa/conference omitted

Design Decisions:
    - Registered last in main.py: /{guid} would otherwise shadow /health
"""

from fastapi import APIRouter, Depends

from campus_api.api.dependencies import get_record_access, get_request_id
from campus_api.services.record_access import RecordAccess

router = APIRouter(tags=["records"])


@router.get("/")
async def list_records(access: RecordAccess = Depends(get_record_access)):
    """Return all records."""
    return [record.to_wire() for record in access.list()]


@router.get("/{guid}")
async def get_record(
    guid: str,
    access: RecordAccess = Depends(get_record_access),
    request_id: str | None = Depends(get_request_id),
):
    """Return the record with this guid."""
    return access.get_by_id(guid, request_id=request_id).to_wire()
