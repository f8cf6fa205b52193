"""SQLite-backed implementation of ``IKeyStoreRepo``.

All write operations defer transaction commit/rollback to the surrounding
Unit of Work. Only the known provider identifiers can be written; anything
else is ignored so the table cannot collect stray rows.
"""

from __future__ import annotations

import sqlite3
from typing import List, Optional

from ...config.defaults import KNOWN_PROVIDERS
from ..interfaces.repos import IKeyStoreRepo


def _normalize(provider: str) -> str:
    return (provider or "").strip().lower()


class KeyStoreRepoSqlite(IKeyStoreRepo):
    """SQLite-backed repository for provider API keys."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def get_api_key(self, provider: str) -> Optional[str]:
        cur = self.conn.execute("SELECT api_key FROM keys WHERE provider = ?", (_normalize(provider),))
        row = cur.fetchone()
        return row[0] if row else None

    def set_api_key(self, provider: str, key: str) -> None:
        """Insert or update an API key (no implicit commit).

        Unknown providers are ignored; a blank key removes the stored value.
        """
        name = _normalize(provider)
        if name not in KNOWN_PROVIDERS:
            return
        value = (key or "").strip()
        if not value:
            self.delete_api_key(name)
            return
        self.conn.execute(
            "INSERT INTO keys(provider, api_key, updated_at) VALUES(?, ?, CURRENT_TIMESTAMP) "
            "ON CONFLICT(provider) DO UPDATE SET api_key=excluded.api_key, updated_at=CURRENT_TIMESTAMP",
            (name, value),
        )

    def delete_api_key(self, provider: str) -> None:
        """Delete the API key for a given provider (idempotent, no commit)."""
        self.conn.execute("DELETE FROM keys WHERE provider = ?", (_normalize(provider),))

    def list_providers(self) -> List[str]:
        cur = self.conn.execute("SELECT provider FROM keys ORDER BY provider")
        return [r[0] for r in cur.fetchall()]
