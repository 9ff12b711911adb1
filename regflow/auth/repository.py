"""Persistence helpers for the users collection."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from regflow.core.config import Settings
from regflow.core.db import create_sqlite_connection


@dataclass(frozen=True, slots=True)
class NewUser:
    """User document written once by a successful registration."""

    name: str
    email: str
    password_hash: str
    created_at: str


@dataclass(frozen=True, slots=True)
class UserRecord:
    """Stored user row."""

    id: int
    name: str
    email: str
    password_hash: str
    created_at: str

    def profile(self) -> dict[str, object]:
        """Public fields safe to return to clients."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "created_at": self.created_at,
        }


def _to_record(row: sqlite3.Row) -> UserRecord:
    return UserRecord(
        id=int(row["id"]),
        name=str(row["name"]),
        email=str(row["email"]),
        password_hash=str(row["password_hash"]),
        created_at=str(row["created_at"]),
    )


def insert_one(*, settings: Settings, user: NewUser) -> int:
    """Insert a user and return its id.

    Raises ``sqlite3.IntegrityError`` when the email is already taken.
    """
    conn = create_sqlite_connection(settings.regflow_sqlite_path)
    try:
        conn.execute("BEGIN")
        cursor = conn.execute(
            """
            INSERT INTO users (name, email, password_hash, created_at)
            VALUES (?, ?, ?, ?)
            """,
            (user.name, user.email, user.password_hash, user.created_at),
        )
        user_id = int(cursor.lastrowid)
        conn.commit()
        return user_id
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def find_one(*, settings: Settings, email: str) -> UserRecord | None:
    """Fetch the user with this exact email, if any."""
    conn = create_sqlite_connection(settings.regflow_sqlite_path)
    try:
        row = conn.execute(
            """
            SELECT id, name, email, password_hash, created_at
            FROM users
            WHERE email = ?
            """,
            (email,),
        ).fetchone()
        return None if row is None else _to_record(row)
    finally:
        conn.close()


def get_user_by_id(*, settings: Settings, user_id: int) -> UserRecord | None:
    """Fetch a user by primary key for token-authenticated lookups."""
    conn = create_sqlite_connection(settings.regflow_sqlite_path)
    try:
        row = conn.execute(
            """
            SELECT id, name, email, password_hash, created_at
            FROM users
            WHERE id = ?
            """,
            (user_id,),
        ).fetchone()
        return None if row is None else _to_record(row)
    finally:
        conn.close()
