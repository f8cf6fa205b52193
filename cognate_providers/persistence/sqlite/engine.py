"""SQLite engine helpers for the persistence layer.

Purpose
-------
Provide centralized helpers for opening SQLite connections and ensuring the
``keys`` and ``history`` tables exist.

External dependencies
---------------------
- Standard library only (``sqlite3``). No side effects at import time.

Reliability strategy
--------------------
- Applies a standard ``busy_timeout`` (milliseconds) from
  ``cognate_providers.config.defaults`` to mitigate lock contention.
- Enables WAL journaling and NORMAL synchronous mode for durability with good
  interactive performance.
"""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path
from typing import Optional

from ...config.defaults import (
    SQLITE_BUSY_TIMEOUT_MS,
    SQLITE_DEFAULT_DB_PATH,
    SQLITE_JOURNAL_MODE,
    SQLITE_SYNCHRONOUS,
)

DB_PATH_ENV = "COGNATE_DB_PATH"


def get_db_path(db_path: Optional[str] = None) -> Path:
    """Return a concrete database file path.

    Precedence: explicit ``db_path``, then ``COGNATE_DB_PATH``, then the
    default under the user's home directory. ``~`` is expanded.
    """
    raw = db_path or os.getenv(DB_PATH_ENV) or SQLITE_DEFAULT_DB_PATH
    return Path(raw).expanduser()


def create_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Open a SQLite connection with sane defaults and apply PRAGMA settings.

    The parent directory is created when missing. ``row_factory`` is set to
    ``sqlite3.Row``.
    """
    path = get_db_path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute(f"PRAGMA journal_mode={SQLITE_JOURNAL_MODE};")
    conn.execute(f"PRAGMA synchronous={SQLITE_SYNCHRONOUS};")
    conn.execute(f"PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT_MS};")  # ms
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create required tables if they do not exist, then commit.

    Schema overview
    ---------------
    - ``keys``: provider -> API key mapping
    - ``history``: submitted prompts; ``created_at`` is epoch milliseconds and
      the provider / attachment name lists are JSON arrays
    """
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS keys (
            provider TEXT PRIMARY KEY,
            api_key  TEXT NOT NULL,
            updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
        );
        """
    )
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS history (
            id TEXT PRIMARY KEY,
            text TEXT NOT NULL,
            created_at INTEGER NOT NULL,
            providers_json TEXT NOT NULL,
            attachment_names_json TEXT NOT NULL
        );
        """
    )
    conn.execute("CREATE INDEX IF NOT EXISTS idx_history_created_at ON history(created_at);")
    conn.commit()


