"""
HistoryEntry DTO: one persisted prompt submission.

``created_at`` is epoch milliseconds, matching the ordering key of the
history store.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class HistoryEntry:
    id: str
    text: str
    created_at: int
    providers: List[str] = field(default_factory=list)
    attachment_names: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["HistoryEntry"]
