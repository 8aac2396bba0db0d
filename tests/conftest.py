"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
import os
from typing import Any

import pytest

from adapters.fake_http import FailingGetter, StaticGetter
from core.config import AppSettings
from core.domain.models import ResponseEnvelope

USERS_URL = "http://localhost:3000/users"


@pytest.fixture
def isolated_settings_env(tmp_path, monkeypatch):
    """Keep every test away from real .env files and FIXTURE_KIT_* variables."""

    for key in list(os.environ):
        if key.upper().startswith("FIXTURE_KIT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def restore_root_logging():
    """Undo handler/level changes made by `configure_logging`."""

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    httpx_level = logging.getLogger("httpx").level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)


@pytest.fixture
def settings(isolated_settings_env) -> AppSettings:
    return AppSettings()


@pytest.fixture
def users_payload() -> list[dict[str, Any]]:
    """Two fixed user records, as the mock server would return them."""
    return [
        {"id": 1, "first_name": "George", "last_name": "Bluth", "email": "george.bluth@reqres.in"},
        {"id": 2, "first_name": "Janet", "last_name": "Weaver", "email": "janet.weaver@reqres.in"},
    ]


@pytest.fixture
def users_envelope(users_payload) -> ResponseEnvelope:
    return ResponseEnvelope(data=users_payload, status_code=200, url=USERS_URL)


@pytest.fixture
def static_getter(users_envelope) -> StaticGetter:
    """Fresh stand-in per test: no state is shared between tests."""
    return StaticGetter(users_envelope)


@pytest.fixture
def failing_getter() -> FailingGetter:
    return FailingGetter(ConnectionError("connection refused"))
