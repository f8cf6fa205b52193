"""Repository & Unit of Work protocol definitions for the persistence layer.

Controllers and the credential resolver depend only on these abstractions;
concrete implementations live under ``persistence/sqlite/``.

Design Principles:
- No concrete behavior; pure structural typing via ``Protocol``.
- Transaction control is delegated to the ``IUnitOfWork`` implementation;
  repository writes never commit on their own.

Failure / Error Semantics:
- Repository methods raise backend-specific exceptions only in truly
  exceptional conditions (I/O failures, integrity errors).
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from ...base.models import HistoryEntry


class IKeyStoreRepo(Protocol):
    """API key storage abstraction.

    Provider identifiers are stored in normalized (lowercase) form. Writes for
    identifiers outside the known provider set are ignored.
    """

    def get_api_key(self, provider: str) -> Optional[str]:
        """Return the stored API key for ``provider`` or ``None``."""
        ...

    def set_api_key(self, provider: str, key: str) -> None:
        """Create or update the API key; a blank ``key`` deletes it.

        No implicit commit is performed; caller controls transaction boundaries.
        """
        ...

    def delete_api_key(self, provider: str) -> None:
        """Remove the API key for a provider if present (idempotent)."""
        ...

    def list_providers(self) -> List[str]:
        """Return providers with stored API keys in ascending order."""
        ...


class IHistoryRepo(Protocol):
    """Prompt history storage abstraction, newest first."""

    def list(self) -> List[HistoryEntry]:
        ...

    def add(self, text: str, providers: Sequence[str], attachment_names: Sequence[str] = ()) -> HistoryEntry:
        """Insert a new entry and prune the table to the retention cap."""
        ...

    def delete(self, entry_id: str) -> None:
        ...

    def clear(self) -> None:
        ...


class IUnitOfWork(Protocol):
    """Transactional boundary aggregating repository instances.

    Writes are committed on clean scope exit and rolled back otherwise.
    """

    keys: IKeyStoreRepo
    history: IHistoryRepo

    def __enter__(self) -> "IUnitOfWork":  # pragma: no cover
        ...

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        """Undo all uncommitted changes (idempotent)."""
        ...
