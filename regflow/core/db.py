"""SQLite connection helpers for user persistence."""

from __future__ import annotations

import sqlite3

BUSY_TIMEOUT_SECONDS = 5.0


def create_sqlite_connection(path: str) -> sqlite3.Connection:
    """Open a connection that waits on locks and returns name-addressable rows."""
    conn = sqlite3.connect(path, timeout=BUSY_TIMEOUT_SECONDS)
    conn.row_factory = sqlite3.Row
    return conn
