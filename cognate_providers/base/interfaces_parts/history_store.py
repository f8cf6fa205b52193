"""HistoryStore Protocol (single-class module)."""

from __future__ import annotations

from typing import List, Protocol, Sequence, runtime_checkable

from ..models import HistoryEntry


@runtime_checkable
class HistoryStore(Protocol):
    """Persistent list of submitted prompts, newest first."""

    def list(self) -> List[HistoryEntry]:
        ...

    def add(self, text: str, providers: Sequence[str], attachment_names: Sequence[str] = ()) -> HistoryEntry:
        ...

    def delete(self, entry_id: str) -> None:
        ...

    def clear(self) -> None:
        ...
