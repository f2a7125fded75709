"""Error Hierarchy — typed, categorized exceptions for all Campus API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Lookup errors (400-level) are client errors, never retried, never fatal
    - Data errors (500-level) are fatal at startup, recoverable on a later reload
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with CampusError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: request correlation without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATA_SOURCE = "data_source"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request correlation and debug details attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: str | None = None
    debug_info: dict[str, Any] | None = None


class CampusError(Exception):
    """Base exception for all Campus API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "request_id": self.context.request_id,
            }
        }


# ─── Lookup Errors (400-level) ──────────────────────────────────

class InvalidIdentifierError(CampusError):
    """Identifier is not a 36-char dashed hexadecimal string."""
    def __init__(self, guid: str, context: ErrorContext | None = None):
        super().__init__(
            "Invalid GUID format", "INVALID_GUID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.guid = guid


class RecordNotFoundError(CampusError):
    """Identifier is well formed but matches no record."""
    def __init__(self, guid: str, context: ErrorContext | None = None):
        super().__init__(
            "Data not found", "RECORD_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING,
            context, 404,
        )
        self.guid = guid


# ─── Data Source Errors (500-level) ─────────────────────────────

class DecodeError(CampusError):
    """Source bytes are not a JSON array of records."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Could not decode data: {message}", "DATA_DECODE_ERROR",
            ErrorCategory.DATA_SOURCE, ErrorSeverity.CRITICAL, context, 500,
        )


class SourceReadError(CampusError):
    """Backing data file could not be read."""
    def __init__(self, path: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Could not read data file '{path}': {reason}",
            "DATA_SOURCE_UNREADABLE", ErrorCategory.DATA_SOURCE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.path = path
