"""Root conftest — shared record fixtures and data files."""

import json

import pytest

from campus_api.core.record_store import RecordStore
from campus_api.schemas.record import Record
from tests.sample_data import SAMPLE_WIRE


@pytest.fixture
def sample_wire() -> list[dict]:
    return [dict(item) for item in SAMPLE_WIRE]


@pytest.fixture
def sample_bytes(sample_wire) -> bytes:
    return json.dumps(sample_wire).encode()


@pytest.fixture
def sample_records(sample_wire) -> list[Record]:
    return [Record.model_validate(item) for item in sample_wire]


@pytest.fixture
def store(sample_records) -> RecordStore:
    """Store pre-filled with the sample records."""
    s = RecordStore()
    s.install(sample_records)
    return s


@pytest.fixture
def data_file(tmp_path, sample_bytes):
    path = tmp_path / "data.json"
    path.write_bytes(sample_bytes)
    return path
