from __future__ import annotations

import sqlite3
from typing import Optional

from .engine import create_connection, get_db_path, init_schema
from .repos import HistoryRepoSqlite, KeyStoreRepoSqlite, UnitOfWorkSqlite
from .stores import SqliteCredentialStore, SqliteHistoryStore


def get_uow(db_path: Optional[str] = None) -> UnitOfWorkSqlite:
    conn: sqlite3.Connection = create_connection(db_path)
    init_schema(conn)
    return UnitOfWorkSqlite(conn)


__all__ = [
    "create_connection",
    "get_db_path",
    "init_schema",
    "HistoryRepoSqlite",
    "KeyStoreRepoSqlite",
    "UnitOfWorkSqlite",
    "SqliteCredentialStore",
    "SqliteHistoryStore",
    "get_uow",
]
