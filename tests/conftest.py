"""Shared fixtures for registration service and client tests."""

from __future__ import annotations

import importlib
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

TEST_JWT_SECRET = "regflow-test-secret-key-32-bytes-minimum"

# regflow.runtime loads settings at import time.
os.environ.setdefault("REGFLOW_JWT_SECRET", TEST_JWT_SECRET)


@pytest.fixture
def register_payload() -> dict[str, Any]:
    """Default register payload used by API and client tests."""
    return {"name": "Ann", "email": "ann@x.com", "password": "Secret1!"}


@pytest.fixture
def db_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the service at an isolated sqlite file with cheap bcrypt rounds."""
    path = tmp_path / "regflow.sqlite3"
    monkeypatch.setenv("REGFLOW_SQLITE_PATH", str(path))
    monkeypatch.setenv("REGFLOW_JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setenv("REGFLOW_BCRYPT_ROUNDS", "4")
    return path


@pytest.fixture
def client(db_path: Path) -> Generator[TestClient, None, None]:
    """TestClient over a freshly reloaded app; lifespan runs startup."""
    import regflow.main as app_main

    app_main = importlib.reload(app_main)
    with TestClient(app_main.app) as test_client:
        yield test_client
