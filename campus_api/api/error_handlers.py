"""Error Handlers — global exception handlers for the Campus API.

Invariants:
    - CampusError → structured JSON with error code, message, severity, request_id
    - Exception (catch-all) → generic 500, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (CampusError), catch-all (Exception)
    - Catch-all replaces per-request panic recovery: one place turns crashes into 500s
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from campus_api.api.middleware import REQUEST_ID_HEADER
from campus_api.core.errors import CampusError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_campus_error_handler(app)
    _register_generic_error_handler(app)


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _register_campus_error_handler(app: FastAPI) -> None:
    """Register Campus API lookup/data error handler."""

    @app.exception_handler(CampusError)
    async def campus_error_handler(request: Request, exc: CampusError):
        """Handle all Campus API errors."""
        if exc.context.request_id is None:
            exc.context.request_id = _request_id(request)
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"CampusError: {exc.message}",
            extra={
                "error_code": exc.code, "path": request.url.path,
                "request_id": exc.context.request_id,
                "guid": getattr(exc, "guid", None),
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        rid = _request_id(request)
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"method": request.method, "request_id": rid},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "Internal server error",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                    "request_id": rid,
                },
            },
            # runs outside the request-id middleware, so the header is set here
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )
