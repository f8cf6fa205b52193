"""Per-round result board.

A board is published once, with one ``pending`` entry per provider, before any
provider call starts. Outcomes are merged by provider id. Each entry
transitions exactly once; a merge for an unknown or already-terminal id is
ignored. Subscribers receive a fresh snapshot after every accepted change.

Merges are synchronous, so under a single asyncio loop a merge can never
interleave with another one.
"""
from __future__ import annotations

import logging
import uuid
from typing import Callable, Dict, Iterable, List, Optional

from ..base.logging import LogContext, get_logger, log_event
from ..base.models import AdapterOutcome, CanonicalResult

Subscriber = Callable[[List[CanonicalResult]], None]

_logger = get_logger("dispatch.board")


class ResultBoard:
    """Ordered map of provider id to :class:`CanonicalResult` for one round."""

    def __init__(self, provider_ids: Iterable[str], round_id: Optional[str] = None) -> None:
        self.round_id = round_id or uuid.uuid4().hex
        self._results: Dict[str, CanonicalResult] = {}
        for pid in provider_ids:
            if pid not in self._results:
                self._results[pid] = CanonicalResult.pending(pid)
        self._subscribers: List[Subscriber] = []

    def __len__(self) -> int:
        return len(self._results)

    def snapshot(self) -> List[CanonicalResult]:
        return list(self._results.values())

    def get(self, provider_id: str) -> Optional[CanonicalResult]:
        return self._results.get(provider_id)

    @property
    def complete(self) -> bool:
        return all(r.is_terminal for r in self._results.values())

    def subscribe(self, callback: Subscriber, *, replay: bool = True) -> Callable[[], None]:
        """Register ``callback``; with ``replay`` it immediately gets the current snapshot.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)
        if replay:
            self._notify_one(callback, self.snapshot())

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def merge(self, provider_id: str, outcome: AdapterOutcome) -> Optional[CanonicalResult]:
        """Finalize the entry for ``provider_id``; return it, or ``None`` if ignored."""
        current = self._results.get(provider_id)
        if current is None or current.is_terminal:
            return None
        finalized = current.finalize(outcome)
        self._results[provider_id] = finalized
        snapshot = self.snapshot()
        for callback in list(self._subscribers):
            self._notify_one(callback, snapshot)
        return finalized

    def _notify_one(self, callback: Subscriber, snapshot: List[CanonicalResult]) -> None:
        try:
            callback(snapshot)
        except Exception as exc:
            log_event(
                _logger,
                "board.subscriber_error",
                LogContext(round_id=self.round_id),
                level=logging.WARNING,
                error=str(exc),
                exc_type=type(exc).__name__,
            )


__all__ = ["ResultBoard", "Subscriber"]
