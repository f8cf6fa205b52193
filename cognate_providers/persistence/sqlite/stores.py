"""Store facades over the SQLite repositories.

Each operation opens its own Unit of Work, so the facades are safe to call
from worker threads and never hold a connection between calls.

* :class:`SqliteCredentialStore` is the async key store consulted by
  ``KeysRepository`` after environment variables. Database work runs through
  ``asyncio.to_thread``.
* :class:`SqliteHistoryStore` is the synchronous history store the dispatcher
  appends to from a worker thread at the start of each round.
"""

from __future__ import annotations

import asyncio
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

from ...base.models import HistoryEntry
from .engine import create_connection, init_schema
from .unit_of_work import UnitOfWorkSqlite


class _SqliteStore:
    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    @contextmanager
    def _uow(self) -> Iterator[UnitOfWorkSqlite]:
        conn = create_connection(self.db_path)
        try:
            init_schema(conn)
            with UnitOfWorkSqlite(conn) as uow:
                yield uow
        finally:
            conn.close()


class SqliteCredentialStore(_SqliteStore):
    """Async ``CredentialStore`` backed by the ``keys`` table."""

    def _get(self, provider_id: str) -> Optional[str]:
        with self._uow() as uow:
            return uow.keys.get_api_key(provider_id)

    def _set(self, provider_id: str, api_key: str) -> None:
        with self._uow() as uow:
            uow.keys.set_api_key(provider_id, api_key)

    def _delete(self, provider_id: str) -> None:
        with self._uow() as uow:
            uow.keys.delete_api_key(provider_id)

    def list_providers(self) -> List[str]:
        with self._uow() as uow:
            return uow.keys.list_providers()

    async def get(self, provider_id: str) -> Optional[str]:
        return await asyncio.to_thread(self._get, provider_id)

    async def set(self, provider_id: str, api_key: str) -> None:
        await asyncio.to_thread(self._set, provider_id, api_key)

    async def delete(self, provider_id: str) -> None:
        await asyncio.to_thread(self._delete, provider_id)


class SqliteHistoryStore(_SqliteStore):
    """``HistoryStore`` backed by the ``history`` table."""

    def list(self) -> List[HistoryEntry]:
        with self._uow() as uow:
            return uow.history.list()

    def add(self, text: str, providers: Sequence[str], attachment_names: Sequence[str] = ()) -> HistoryEntry:
        with self._uow() as uow:
            return uow.history.add(text, providers, attachment_names)

    def delete(self, entry_id: str) -> None:
        with self._uow() as uow:
            uow.history.delete(entry_id)

    def clear(self) -> None:
        with self._uow() as uow:
            uow.history.clear()


__all__ = ["SqliteCredentialStore", "SqliteHistoryStore"]
