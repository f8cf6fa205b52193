"""Dispatcher: run one prompt against every selected provider concurrently.

Round lifecycle
---------------
1. ``open_round`` validates the input. An empty prompt or an empty selection
   is a no-op: no board, no history entry, no provider call.
2. A new :class:`ResultBoard` is published with every entry ``pending`` and
   becomes ``current``. When a history store is configured the submission is
   recorded before any provider call starts.
3. ``run_round`` fans out one branch per provider with ``asyncio.gather``.
   Each branch merges its own outcome by provider id; a branch that raises
   unexpectedly becomes that provider's ``error`` entry.

Every round owns its board. A late outcome from an older round is merged into
that older board and never touches ``current``.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, AsyncIterator, List, Optional, Sequence, Tuple

from ..base.errors import extract_error_message
from ..base.factory import ProviderFactory
from ..base.interfaces import CredentialResolver, HistoryStore
from ..base.logging import LogContext, get_logger, log_event, normalized_log_event
from ..base.models import AdapterOutcome, Attachment, CanonicalResult, ProviderSpec, ResultStatus
from .board import ResultBoard, Subscriber
from .send import send_prompt

_logger = get_logger("dispatch")


@dataclass(frozen=True)
class DispatchRound:
    """Everything ``run_round`` needs once the board has been published."""

    board: ResultBoard
    prompt: str
    providers: Tuple[ProviderSpec, ...]
    attachments: Tuple[Attachment, ...]


class Dispatcher:
    """Fan a prompt out to providers and collect results on a per-round board."""

    def __init__(
        self,
        resolver: CredentialResolver,
        factory: Any = None,
        history: Optional[HistoryStore] = None,
    ) -> None:
        self._resolver = resolver
        self._factory = factory or ProviderFactory
        self._history = history
        self._current: Optional[ResultBoard] = None

    @property
    def current(self) -> Optional[ResultBoard]:
        """Board of the most recently opened round (``None`` before the first)."""
        return self._current

    # ------------------------------------------------------------------
    # Round phases
    # ------------------------------------------------------------------

    def open_round(
        self,
        prompt: str,
        providers: Sequence[ProviderSpec],
        attachments: Sequence[Attachment] = (),
    ) -> Optional[DispatchRound]:
        """Publish a pending board for the selected providers, or return ``None``."""
        selected = tuple(p for p in providers if p.selected)
        if not prompt or not selected:
            return None

        board = ResultBoard(p.id for p in selected)
        self._current = board
        files = tuple(attachments)
        ctx = LogContext(round_id=board.round_id)
        log_event(
            _logger,
            "dispatch.start",
            ctx,
            providers=[p.id for p in selected],
            attachments=len(files),
        )
        return DispatchRound(board=board, prompt=prompt, providers=selected, attachments=files)

    async def run_round(self, round_: DispatchRound) -> List[CanonicalResult]:
        """Record history, run all branches of ``round_`` and return the terminal entries in order."""
        await self._record_history(round_)
        await asyncio.gather(
            *(self._branch(round_, spec) for spec in round_.providers),
            return_exceptions=True,
        )
        board = round_.board
        log_event(
            _logger,
            "dispatch.end",
            LogContext(round_id=board.round_id),
            succeeded=sum(1 for r in board.snapshot() if r.status is ResultStatus.SUCCESS),
            failed=sum(1 for r in board.snapshot() if r.status is ResultStatus.ERROR),
        )
        return board.snapshot()

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    async def dispatch(
        self,
        prompt: str,
        providers: Sequence[ProviderSpec],
        attachments: Sequence[Attachment] = (),
        on_update: Optional[Subscriber] = None,
    ) -> List[CanonicalResult]:
        """Run one full round; ``[]`` when the prompt is blank or nothing is selected."""
        round_ = self.open_round(prompt, providers, attachments)
        if round_ is None:
            return []
        if on_update is not None:
            round_.board.subscribe(on_update)
        return await self.run_round(round_)

    async def stream(
        self,
        prompt: str,
        providers: Sequence[ProviderSpec],
        attachments: Sequence[Attachment] = (),
    ) -> AsyncIterator[List[CanonicalResult]]:
        """Yield the pending snapshot, then a fresh snapshot per finalized result."""
        round_ = self.open_round(prompt, providers, attachments)
        if round_ is None:
            return
        queue: "asyncio.Queue[List[CanonicalResult]]" = asyncio.Queue()
        unsubscribe = round_.board.subscribe(queue.put_nowait)
        task = asyncio.ensure_future(self.run_round(round_))
        try:
            while True:
                snapshot = await queue.get()
                yield snapshot
                if all(r.is_terminal for r in snapshot):
                    break
        finally:
            unsubscribe()
            await task

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _branch(self, round_: DispatchRound, spec: ProviderSpec) -> None:
        try:
            outcome = await send_prompt(
                spec,
                round_.prompt,
                round_.attachments,
                resolver=self._resolver,
                factory=self._factory,
            )
        except Exception as exc:
            outcome = AdapterOutcome.failure(extract_error_message(exc))
        result = round_.board.merge(spec.id, outcome)
        if result is None:
            return
        normalized_log_event(
            _logger,
            "dispatch.finalize",
            LogContext(provider=spec.id, model=spec.model or None, round_id=round_.board.round_id, result_id=result.id),
            phase="finalize",
            level=logging.INFO if outcome.ok else logging.WARNING,
            elapsed_ms=result.elapsed_ms,
            tokens=result.token_usage,
            status=result.status.value,
        )

    async def _record_history(self, round_: DispatchRound) -> None:
        if self._history is None:
            return
        try:
            await asyncio.to_thread(
                self._history.add,
                round_.prompt,
                [p.id for p in round_.providers],
                [a.name for a in round_.attachments],
            )
        except Exception as exc:
            log_event(
                _logger,
                "history.error",
                LogContext(round_id=round_.board.round_id),
                level=logging.WARNING,
                error=str(exc),
            )


__all__ = ["Dispatcher", "DispatchRound"]
