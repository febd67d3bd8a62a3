import logging
from pathlib import Path

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from hwhkit import WebServerBuilder


def make_router() -> APIRouter:
    router = APIRouter()

    @router.get("/api/ping")
    async def ping() -> dict[str, bool]:
        return {"pong": True}

    return router


def test_static_errors_keep_their_status(static_dir: Path, caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO)
    server = (
        WebServerBuilder()
        .listen("127.0.0.1", 8000)
        .static_files(static_dir, "/static")
        .routes(make_router())
        .build()
    )
    client = TestClient(server.app)

    assert client.get("/static/missing.txt").status_code == 404
    assert client.post("/static/hello.txt").status_code == 405
    assert client.get("/static/hello.txt").text == "Hello from static"
    assert not any(record.getMessage() == "Request failed" for record in caplog.records)

    statuses = [record.status for record in caplog.records if record.getMessage() == "Request completed"]
    assert statuses == [404, 405, 200]


def test_root_static_prefix_does_not_hide_routes(static_dir: Path):
    server = (
        WebServerBuilder()
        .listen("127.0.0.1", 8000)
        .static_files(static_dir, "/")
        .routes(make_router())
        .build()
    )
    client = TestClient(server.app)

    assert client.get("/api/ping").json() == {"pong": True}
    assert client.get("/hello.txt").text == "Hello from static"
    assert client.get("/missing").status_code == 404
