"""API test fixtures — app built with an injected store + httpx test client.

Invariants:
    - No lifespan runs: the store is injected, so no file is read at startup
    - settings.data_file_path points at a tmp file holding the sample records

Design Decisions:
    - create_app(settings, store) over dependency_overrides: the store is already
      a constructor argument, nothing to patch
"""

import pytest
from httpx import ASGITransport, AsyncClient

from campus_api.config import Settings
from campus_api.main import create_app


@pytest.fixture
def settings(data_file) -> Settings:
    return Settings(
        _env_file=None,
        data_file_path=str(data_file),
        reload_enabled=True,
        cors_origins=["http://localhost:5173"],
    )


@pytest.fixture
def app(settings, store):
    return create_app(settings, store)


@pytest.fixture
async def client(app):
    """FastAPI test client over the injected store."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
