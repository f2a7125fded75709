"""Campus API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Global error handlers map CampusError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Data loaded on startup via lifespan; a load failure aborts startup
    - The RecordStore is owned by app.state, never a module-level singleton

Design Decisions:
    - create_app(settings, store) factory: tests inject a pre-filled store and
      skip file IO entirely
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from campus_api.api.error_handlers import register_error_handlers
from campus_api.api.middleware import register_middleware
from campus_api.api.routes import admin, health, records
from campus_api.config import Settings, get_settings
from campus_api.core.record_store import RecordStore
from campus_api.infrastructure.data_loader import build_store
from campus_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    if app.state.store is None:
        app.state.store = build_store(settings.data_file_path)
    logger.info(
        "Campus API started",
        extra={"record_count": app.state.store.count()},
    )
    yield
    logger.info("Campus API shutting down")


def create_app(
    settings: Settings | None = None, store: RecordStore | None = None,
) -> FastAPI:
    """Build the application. store=None means load from settings.data_file_path."""
    if settings is None:
        settings = get_settings()
    app = FastAPI(title="Campus API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    register_middleware(app, settings)
    register_error_handlers(app)

    # /{guid} must stay last
    app.include_router(health.router)
    if settings.reload_enabled:
        app.include_router(admin.router)
    app.include_router(records.router)
    return app
