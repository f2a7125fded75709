"""Record Access — the façade the HTTP layer calls into.

Invariants:
    - Stateless: holds only a reference to the RecordStore it was built with
    - Malformed ids rejected with InvalidIdentifierError before any scan
    - Well-formed ids with no match raise RecordNotFoundError (distinct from invalid)
"""

from campus_api.core.errors import (
    ErrorContext, InvalidIdentifierError, RecordNotFoundError,
)
from campus_api.core.identifiers import is_valid_identifier
from campus_api.core.record_store import RecordStore
from campus_api.schemas.record import Record


class RecordAccess:
    """List and lookup over a RecordStore."""

    def __init__(self, store: RecordStore):
        self.store = store

    def list(self) -> list[Record]:
        return self.store.list()

    def get_by_id(self, guid: str, request_id: str | None = None) -> Record:
        if not is_valid_identifier(guid):
            raise InvalidIdentifierError(
                guid, ErrorContext(request_id=request_id),
            )
        record = self.store.get_by_id(guid)
        if record is None:
            raise RecordNotFoundError(
                guid, ErrorContext(request_id=request_id),
            )
        return record
