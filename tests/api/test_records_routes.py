"""Record Routes — list and lookup over HTTP.

Invariants:
    - GET / returns all records as wire objects, empty optionals omitted
    - GET /{guid}: 200 found, 400 INVALID_GUID, 404 RECORD_NOT_FOUND
    - Error bodies carry the request id
"""

import logging

from httpx import ASGITransport, AsyncClient

from campus_api.core.record_store import RecordStore
from campus_api.main import create_app

from tests.sample_data import IOWA_STATE_GUID, MISSING_GUID, SAMPLE_WIRE


async def test_list_returns_all_records_in_order(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.json() == SAMPLE_WIRE


async def test_list_omits_empty_optional_fields(client):
    body = (await client.get("/")).json()
    assert "ncaa" not in body[1]
    assert "conference" not in body[1]
    assert "conference" not in body[2]


async def test_list_on_empty_store_is_empty_array(settings):
    app = create_app(settings, RecordStore())
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/")
    assert res.status_code == 200
    assert res.json() == []


async def test_get_by_guid_returns_record(client):
    res = await client.get(f"/{IOWA_STATE_GUID}")
    assert res.status_code == 200
    assert res.json() == SAMPLE_WIRE[0]
    assert res.json()["school"] == "Iowa State University"


async def test_bad_guid_returns_400(client):
    res = await client.get("/this-is-a-bad-guid")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_GUID"
    assert error["message"] == "Invalid GUID format"
    assert error["request_id"] == res.headers["X-Request-ID"]


async def test_unknown_guid_returns_404(client):
    res = await client.get(f"/{MISSING_GUID}")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RECORD_NOT_FOUND"
    assert error["message"] == "Data not found"
    assert error["request_id"] == res.headers["X-Request-ID"]


async def test_guid_lookup_is_case_sensitive(client):
    res = await client.get(f"/{IOWA_STATE_GUID.upper()}")
    assert res.status_code == 404


async def test_upper_case_stored_guid_found_verbatim(client):
    res = await client.get("/A1B2C3D4-E5F6-4789-ABCD-EF0123456789")
    assert res.status_code == 200
    assert res.json()["school"] == "Upper Case College"


async def test_invalid_guid_logged_as_warning(client, caplog):
    with caplog.at_level(logging.WARNING, logger="campus_api.api.error_handlers"):
        await client.get("/not-a-guid")
    warning = next(r for r in caplog.records if getattr(r, "error_code", None) == "INVALID_GUID")
    assert warning.levelno == logging.WARNING
    assert warning.guid == "not-a-guid"
