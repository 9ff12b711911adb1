"""User store contract tests."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from regflow.auth.repository import NewUser
from regflow.auth.repository import find_one
from regflow.auth.repository import get_user_by_id
from regflow.auth.repository import insert_one
from regflow.auth.schema import init_auth_schema
from regflow.core.config import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    settings = Settings(
        regflow_jwt_secret="unit-test-secret-key-32-bytes-minimum",
        regflow_sqlite_path=str(tmp_path / "users.sqlite3"),
    )
    init_auth_schema(settings)
    return settings


def _new_user(email: str = "ann@x.com") -> NewUser:
    return NewUser(
        name="Ann",
        email=email,
        password_hash="$2b$04$hash",
        created_at="2026-02-14T00:00:00Z",
    )


def test_insert_then_find_one_by_exact_email(settings: Settings) -> None:
    user_id = insert_one(settings=settings, user=_new_user())

    record = find_one(settings=settings, email="ann@x.com")

    assert record is not None
    assert record.id == user_id
    assert record.profile() == {
        "id": user_id,
        "name": "Ann",
        "email": "ann@x.com",
        "created_at": "2026-02-14T00:00:00Z",
    }
    assert find_one(settings=settings, email="ANN@x.com") is None


def test_duplicate_email_violates_unique_constraint(settings: Settings) -> None:
    """Input: second insert with the same email -> Output: IntegrityError, one row kept."""
    insert_one(settings=settings, user=_new_user())

    with pytest.raises(sqlite3.IntegrityError):
        insert_one(settings=settings, user=_new_user())

    conn = sqlite3.connect(settings.regflow_sqlite_path)
    try:
        assert conn.execute("SELECT COUNT(*) FROM users").fetchone()[0] == 1
    finally:
        conn.close()


def test_get_user_by_id_returns_none_for_unknown_id(settings: Settings) -> None:
    assert get_user_by_id(settings=settings, user_id=42) is None


def test_schema_bootstrap_is_idempotent(settings: Settings) -> None:
    insert_one(settings=settings, user=_new_user())
    init_auth_schema(settings)

    assert find_one(settings=settings, email="ann@x.com") is not None
