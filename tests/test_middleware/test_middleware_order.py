import logging
from pathlib import Path

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request

from hwhkit.middleware import DispatchMiddlewareFactory, MiddlewareManager, StaticFilesMiddleware
from hwhkit.middleware import middleware_manager as middleware_manager_module
from hwhkit.utils.config import Config, CorsSettings, LoggingSettings, MiddlewareConfig, StaticFileSettings


def recording_dispatch(name: str, events: list[str]):
    async def dispatch(request: Request, call_next):
        events.append(f"{name}:enter")
        response = await call_next(request)
        events.append(f"{name}:exit")
        return response

    return dispatch


def recording_layer(name: str, events: list[str]) -> Middleware:
    return Middleware(BaseHTTPMiddleware, dispatch=recording_dispatch(name, events))


def make_router(events: list[str]) -> APIRouter:
    router = APIRouter()

    @router.get("/ping")
    async def ping() -> dict[str, str]:
        events.append("handler")
        return {"pong": "ok"}

    return router


def full_stack_config(static_dir: Path, origins: tuple[str, ...] = ("*",)) -> Config:
    return Config(
        middleware=MiddlewareConfig(
            logging=LoggingSettings(request_logging_enabled=True),
            cors=CorsSettings(enabled=True, origins=origins),
            static_files=StaticFileSettings(enabled=True, dir=static_dir, url_prefix="/static"),
        )
    )


def test_layer_execution_order(static_dir: Path, monkeypatch: pytest.MonkeyPatch):
    events: list[str] = []
    monkeypatch.setattr(
        middleware_manager_module, "create_request_logging_layer",
        lambda: recording_layer("request_logging", events)
    )
    monkeypatch.setattr(
        middleware_manager_module, "create_cors_layer",
        lambda settings: recording_layer("cors", events)
    )
    monkeypatch.setattr(
        middleware_manager_module, "create_static_files_layer",
        lambda settings: recording_layer("static_files", events)
    )

    manager = MiddlewareManager(full_stack_config(static_dir))
    manager.add_custom_middleware(DispatchMiddlewareFactory("first", recording_dispatch("first", events)))
    manager.add_custom_middleware(DispatchMiddlewareFactory("second", recording_dispatch("second", events)))
    app = manager.apply_middleware(make_router(events))

    response = TestClient(app).get("/ping")

    assert response.status_code == 200
    assert events == [
        "request_logging:enter",
        "cors:enter",
        "static_files:enter",
        "first:enter",
        "second:enter",
        "handler",
        "second:exit",
        "first:exit",
        "static_files:exit",
        "cors:exit",
        "request_logging:exit",
    ]


def test_real_layers_are_stacked_in_order(static_dir: Path):
    manager = MiddlewareManager(full_stack_config(static_dir))
    manager.add_custom_middleware(DispatchMiddlewareFactory("custom", recording_dispatch("custom", [])))

    app = manager.apply_middleware(APIRouter())

    assert app.state.middleware_layers == ["request_logging", "cors", "static_files", "custom"]
    assert [layer.cls for layer in app.user_middleware] == [
        BaseHTTPMiddleware,
        CORSMiddleware,
        StaticFilesMiddleware,
        BaseHTTPMiddleware,
    ]


def test_disabled_layers_are_skipped():
    config = Config(
        middleware=MiddlewareConfig(
            logging=LoggingSettings(request_logging_enabled=False),
            cors=CorsSettings(enabled=False),
        )
    )

    app = MiddlewareManager(config).apply_middleware(APIRouter())

    assert app.state.middleware_layers == []
    assert app.user_middleware == []


def test_cors_blocks_static_assets_for_foreign_origins(static_dir: Path):
    app = MiddlewareManager(
        full_stack_config(static_dir, origins=("http://allowed.example.com",))
    ).apply_middleware(APIRouter())
    client = TestClient(app)

    rejected = client.options(
        "/static/hello.txt",
        headers={
            "Origin": "http://evil.example.com",
            "Access-Control-Request-Method": "GET",
        }
    )
    allowed = client.get("/static/hello.txt", headers={"Origin": "http://allowed.example.com"})

    assert rejected.status_code == 400
    assert allowed.status_code == 200
    assert allowed.text == "Hello from static"
    assert allowed.headers["access-control-allow-origin"] == "http://allowed.example.com"


def test_request_logging_covers_static_files(static_dir: Path, caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO)
    app = MiddlewareManager(full_stack_config(static_dir)).apply_middleware(APIRouter())

    TestClient(app).get("/static/hello.txt")

    completed = [record for record in caplog.records if record.getMessage() == "Request completed"]
    assert len(completed) == 1
    assert completed[0].path == "/static/hello.txt"
    assert completed[0].status == 200


def test_custom_layer_errors_are_not_caught(caplog: pytest.LogCaptureFixture):
    async def broken(request: Request, call_next):
        raise RuntimeError("custom layer failure")

    config = Config(middleware=MiddlewareConfig(cors=CorsSettings(enabled=False)))
    manager = MiddlewareManager(config)
    manager.add_custom_middleware(DispatchMiddlewareFactory("broken", broken))
    app = manager.apply_middleware(make_router([]))

    with pytest.raises(RuntimeError, match="custom layer failure"):
        TestClient(app).get("/ping")

    response = TestClient(app, raise_server_exceptions=False).get("/ping")
    assert response.status_code == 500


def test_custom_layers_are_logged_by_name(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO)
    manager = MiddlewareManager(Config())
    manager.add_custom_middleware(DispatchMiddlewareFactory("audit", recording_dispatch("audit", [])))

    manager.apply_middleware(APIRouter())

    assert any(
        record.getMessage() == "Applying custom middleware" and record.middleware == "audit"
        for record in caplog.records
    )
