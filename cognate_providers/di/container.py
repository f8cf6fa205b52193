"""Minimal dependency injection container for providers.

Goals:
- Centralize construction of the shared key store, history store, credential
  resolver and dispatcher.
- Give the HTTP service and the CLI one composition root so they resolve
  credentials and record history the same way.

No external dependencies; singletons are created lazily and cached.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.factory import ProviderFactory
from ..base.repositories.keys import KeysRepository
from ..dispatch import Dispatcher, PromptSession
from ..persistence.sqlite import SqliteCredentialStore, SqliteHistoryStore


class ProvidersContainer:
    """Lazily build and cache the provider-layer services.

    Args:
        db_path: SQLite file for keys and history; ``None`` uses
            ``COGNATE_DB_PATH`` or the default location.
        factory: Adapter factory (``ProviderFactory`` unless a test swaps it).
    """

    def __init__(self, db_path: Optional[str] = None, factory: Any = None) -> None:
        self._db_path = db_path
        self._factory = factory or ProviderFactory
        self._singletons: Dict[str, Any] = {}

    @property
    def db_path(self) -> Optional[str]:
        return self._db_path

    @property
    def factory(self) -> Any:
        return self._factory

    def _get(self, name: str, build) -> Any:
        if name not in self._singletons:
            self._singletons[name] = build()
        return self._singletons[name]

    def credential_store(self) -> SqliteCredentialStore:
        return self._get("credential_store", lambda: SqliteCredentialStore(self._db_path))

    def history_store(self) -> SqliteHistoryStore:
        return self._get("history_store", lambda: SqliteHistoryStore(self._db_path))

    def keys(self) -> KeysRepository:
        return self._get("keys", lambda: KeysRepository(store=self.credential_store()))

    def dispatcher(self) -> Dispatcher:
        return self._get(
            "dispatcher",
            lambda: Dispatcher(self.keys(), factory=self._factory, history=self.history_store()),
        )

    def session(self) -> PromptSession:
        """Return a new session (own catalog and attachments) on the shared dispatcher."""
        return PromptSession(self.dispatcher())

    def clear(self) -> None:
        """Drop cached singletons (testing convenience)."""
        self._singletons.clear()


__all__ = ["ProvidersContainer"]
