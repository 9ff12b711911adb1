"""Schema bootstrap for the users table."""

from __future__ import annotations

from regflow.core.config import Settings
from regflow.core.db import create_sqlite_connection


CREATE_AUTH_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    email TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    created_at TEXT NOT NULL
);
"""


def init_auth_schema(settings: Settings) -> None:
    """Ensure the users table and its email uniqueness constraint exist."""
    conn = create_sqlite_connection(settings.regflow_sqlite_path)
    try:
        conn.executescript(CREATE_AUTH_SCHEMA_SQL)
        conn.commit()
    finally:
        conn.close()
