"""Error Handlers — tests for routing, transport and catch-all failures.

Tests cover:
    - Unknown routes → 404 {"message": "Not Found", "errors": null}
    - Wrong method → 405 with the same envelope
    - Unhandled exceptions → 500, logged, details never returned
    - describe_cause drops the "body" segment and renders the path
    - describe_cause never reports a byte offset for malformed JSON
    - Failures are logged at their outcome severity
"""

import logging

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from request_guard.api.error_handlers import describe_cause, register_error_handlers


async def test_unknown_route_is_404(client):
    res = await client.post("/create-nothing", json={})
    assert res.status_code == 404
    assert res.json() == {"message": "Not Found", "errors": None}


async def test_wrong_method_is_405(client):
    res = await client.get("/create-validator")
    assert res.status_code == 405
    assert res.json() == {"message": "Method Not Allowed", "errors": None}


async def test_health_check(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_unhandled_exception_is_500_and_logged(caplog):
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret connection string")

    caplog.set_level(logging.ERROR, logger="request_guard.api.error_handlers")
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        res = await ac.get("/boom")

    assert res.status_code == 500
    assert res.json() == {"message": "Internal Server Error", "errors": None}
    assert "secret" not in res.text
    assert any("secret connection string" in r.getMessage() for r in caplog.records)


def test_describe_cause_drops_body_segment():
    errors = [{"loc": ("body", "address", "street_no"), "msg": "Input should be a valid integer"}]
    assert describe_cause(errors) == "address.street_no: Input should be a valid integer"


def test_describe_cause_without_path():
    assert describe_cause([{"loc": ("body",), "msg": "Field required"}]) == "Field required"


def test_describe_cause_no_errors():
    assert describe_cause([]) is None


def test_describe_cause_malformed_json_has_no_offset():
    errors = [{
        "type": "json_invalid",
        "loc": ("body", 10),
        "msg": "JSON decode error",
        "ctx": {"error": "Expecting value"},
    }]
    assert describe_cause(errors) == "JSON decode error: Expecting value"


def test_describe_cause_malformed_json_without_reason():
    errors = [{"type": "json_invalid", "loc": ("body", 0), "msg": "JSON decode error"}]
    assert describe_cause(errors) == "JSON decode error"


async def test_unhandled_exception_logged_as_critical(caplog):
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    caplog.set_level(logging.DEBUG, logger="request_guard.api.error_handlers")
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        await ac.get("/boom")

    [record] = [r for r in caplog.records if r.name == "request_guard.api.error_handlers"]
    assert record.levelno == logging.CRITICAL
    assert record.severity == "critical"
    assert record.category == "internal"


async def test_transport_failure_logged_as_warning(client, caplog):
    caplog.set_level(logging.DEBUG, logger="request_guard.api.error_handlers")
    await client.post("/create-basic", json={"email": 1})
    [record] = [r for r in caplog.records if r.name == "request_guard.api.error_handlers"]
    assert record.levelno == logging.WARNING
    assert record.severity == "warning"
