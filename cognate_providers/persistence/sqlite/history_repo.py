"""SQLite-backed implementation of ``IHistoryRepo``.

Entries are listed newest first. ``add`` assigns a uuid4 id and an epoch
millisecond timestamp, then prunes the table to the newest
``HISTORY_MAX_ENTRIES`` rows. Like the other repositories it never commits.
"""

from __future__ import annotations

import json
import sqlite3
import time
import uuid
from typing import Any, List, Sequence

from ...base.models import HistoryEntry
from ...config.defaults import HISTORY_MAX_ENTRIES
from ..interfaces.repos import IHistoryRepo


def _now_ms() -> int:
    return int(time.time() * 1000)


def _load_list(raw: Any) -> List[str]:
    try:
        data = json.loads(raw or "[]")
    except (TypeError, ValueError):
        return []
    return [str(x) for x in data] if isinstance(data, list) else []


class HistoryRepoSqlite(IHistoryRepo):
    """Prompt history rows with a fixed retention cap."""

    def __init__(self, conn: sqlite3.Connection, max_entries: int = HISTORY_MAX_ENTRIES) -> None:
        self.conn = conn
        self.max_entries = max_entries

    def list(self) -> List[HistoryEntry]:
        cur = self.conn.execute(
            "SELECT id, text, created_at, providers_json, attachment_names_json "
            "FROM history ORDER BY created_at DESC, rowid DESC"
        )
        return [self._row_to_entry(r) for r in cur.fetchall()]

    def add(self, text: str, providers: Sequence[str], attachment_names: Sequence[str] = ()) -> HistoryEntry:
        entry = HistoryEntry(
            id=uuid.uuid4().hex,
            text=text,
            created_at=_now_ms(),
            providers=list(providers),
            attachment_names=list(attachment_names),
        )
        self.conn.execute(
            "INSERT INTO history(id, text, created_at, providers_json, attachment_names_json) VALUES(?, ?, ?, ?, ?)",
            (
                entry.id,
                entry.text,
                entry.created_at,
                json.dumps(entry.providers),
                json.dumps(entry.attachment_names),
            ),
        )
        self._prune()
        return entry

    def delete(self, entry_id: str) -> None:
        self.conn.execute("DELETE FROM history WHERE id = ?", (entry_id,))

    def clear(self) -> None:
        self.conn.execute("DELETE FROM history")

    def _prune(self) -> None:
        self.conn.execute(
            "DELETE FROM history WHERE rowid NOT IN ("
            "SELECT rowid FROM history ORDER BY created_at DESC, rowid DESC LIMIT ?)",
            (self.max_entries,),
        )

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> HistoryEntry:
        return HistoryEntry(
            id=row["id"],
            text=row["text"],
            created_at=int(row["created_at"]),
            providers=_load_list(row["providers_json"]),
            attachment_names=_load_list(row["attachment_names_json"]),
        )
