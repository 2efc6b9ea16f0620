"""Shared fixtures: isolated settings, stores on tmp files, ASGI HTTP client."""

from __future__ import annotations

import httpx
import pytest

from studio.core.config import Settings
from studio.core.db import Stores
from studio.main import create_app

BASE_URL = "http://testserver"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing every store at a temp directory."""
    return Settings(
        data_file=str(tmp_path / "projects.json"),
        templates_file=str(tmp_path / "templates.json"),
        git_data_file=str(tmp_path / "git_data.json"),
        local_storage_file=str(tmp_path / "local_storage.json"),
        local_git_delay_ms=0,
        api_url=BASE_URL,
        _env_file=None,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def stores(app) -> Stores:
    return app.state.stores


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as http_client:
        yield http_client


@pytest.fixture
def fail_writes(monkeypatch):
    """Return a helper that makes every durable write of a store fail."""

    def broken_write(payload: str) -> None:
        raise OSError("disk full")

    def _fail(store) -> None:
        monkeypatch.setattr(store, "_write_file", broken_write)

    return _fail
