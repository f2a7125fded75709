"""HTTP Middleware — request ids, access logging, CORS.

Invariants:
    - Every response carries X-Request-ID (inbound value reused, else a new UUID4)
    - request.state.request_id is set before any route or access log runs
    - Exactly one access log line per request, including ones that raise

Design Decisions:
    - Registration order matters: Starlette runs the last-added middleware first,
      so request ids are added after (outside) the access log
    - CORS via Starlette's CORSMiddleware, origins from settings (not hardcoded)
"""

import logging
import time
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from campus_api.config import Settings

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
CORS_ALLOW_HEADERS = [
    "Content-Type", "Content-Length", "Accept-Encoding", "X-CSRF-Token",
    "Authorization", "accept", "origin", "Cache-Control",
    "X-Requested-With", REQUEST_ID_HEADER,
]


async def request_id_middleware(request: Request, call_next):
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
    request.state.request_id = request_id
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def access_log_middleware(request: Request, call_next):
    start = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        logger.info(
            "HTTP Request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "query": request.url.query,
                "status": status_code,
                "latency_ms": round((time.perf_counter() - start) * 1000, 3),
                "client_ip": request.client.host if request.client else None,
                "request_id": getattr(request.state, "request_id", None),
            },
        )


def register_middleware(app: FastAPI, settings: Settings) -> None:
    """Install CORS, access log and request id middleware (innermost first)."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=CORS_ALLOW_HEADERS,
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.middleware("http")(access_log_middleware)
    app.middleware("http")(request_id_middleware)
