import asyncio
import logging
from enum import Enum

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from nexus_cms.core.dispatch import require_id, resolve_action, run_action
from nexus_cms.services import crud


class Color(str, Enum):
    RED = "red"
    BLUE = "blue"


def paint(db):
    return "painted"


class FakeSession:
    def __init__(self):
        self.rolled_back = False

    def rollback(self):
        self.rolled_back = True


def test_resolve_action_returns_the_bound_handler():
    assert resolve_action("red", Color, {Color.RED: paint}) is paint


@pytest.mark.parametrize("action", [None, "", "green", "blue"])
def test_resolve_action_rejects_unknown_or_unbound(action):
    with pytest.raises(HTTPException) as exc:
        resolve_action(action, Color, {Color.RED: paint})
    assert exc.value.status_code == 400
    assert exc.value.detail == "Invalid action"


def test_require_id():
    assert require_id("abc") == "abc"
    for missing in (None, ""):
        with pytest.raises(HTTPException) as exc:
            require_id(missing)
        assert exc.value.detail == "ID is required"


def test_run_action_translates_integrity_error():
    session = FakeSession()

    def duplicate(db):
        raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

    with pytest.raises(HTTPException) as exc:
        asyncio.run(run_action("POST", "create-setting", duplicate, session))
    assert exc.value.status_code == 409
    assert exc.value.detail == "Duplicate value for a unique field"
    assert session.rolled_back


def test_run_action_awaits_coroutine_handlers():
    async def handler(db, value):
        return {"value": value}

    assert asyncio.run(run_action("GET", "x", handler, FakeSession(), 3)) == {"value": 3}


def test_unexpected_failure_is_opaque_and_logged(api, monkeypatch, caplog):
    def broken(*args, **kwargs):
        raise RuntimeError("connection reset by peer")

    monkeypatch.setattr(crud, "list_records", broken)

    with caplog.at_level(logging.ERROR, logger="nexus_cms.core.dispatch"):
        r = api("get", "get-testimonials")

    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error"}
    assert "connection reset" not in r.text
    assert any("GET get-testimonials failed" in record.getMessage() for record in caplog.records)
    assert any(record.exc_info for record in caplog.records)


def test_validation_errors_are_not_logged_as_failures(api, caplog):
    with caplog.at_level(logging.ERROR, logger="nexus_cms.core.dispatch"):
        r = api("post", "create-hero", json={})
    assert r.status_code == 400
    assert not [record for record in caplog.records if record.levelno >= logging.ERROR]


def test_root_and_health(client):
    assert client.get("/").json() == {"message": "Nexus CMS API", "version": "1.0.0"}
    assert client.get("/health").json() == {"status": "healthy", "service": "Nexus CMS"}


def test_cors_preflight_for_allowed_origin(client):
    r = client.options("/api/function", headers={
        "Origin": "http://localhost:3001",
        "Access-Control-Request-Method": "PUT",
        "Access-Control-Request-Headers": "Content-Type",
    })
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "http://localhost:3001"
    assert r.headers["access-control-allow-credentials"] == "true"


def test_cors_headers_on_regular_request(client):
    r = client.get("/health", headers={"Origin": "http://localhost:3001"})
    assert r.headers["access-control-allow-origin"] == "http://localhost:3001"


def test_cors_rejects_unknown_origin(client):
    r = client.options("/api/function", headers={
        "Origin": "http://evil.example",
        "Access-Control-Request-Method": "GET",
    })
    assert "access-control-allow-origin" not in r.headers
