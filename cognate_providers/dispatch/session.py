"""PromptSession: the catalog, the pending attachments and a dispatcher together.

``submit`` sends the prompt to the selected catalog entries with the
currently pending attachments, and clears those attachments once the round
has been opened so the next prompt starts with an empty set.
"""
from __future__ import annotations

from typing import List, Optional

from ..attachments import AttachmentSet
from ..base.models import CanonicalResult
from ..catalog import ProviderCatalog
from .board import ResultBoard, Subscriber
from .dispatcher import Dispatcher


class PromptSession:
    def __init__(
        self,
        dispatcher: Dispatcher,
        catalog: Optional[ProviderCatalog] = None,
        attachments: Optional[AttachmentSet] = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.catalog = catalog if catalog is not None else ProviderCatalog()
        self.attachments = attachments if attachments is not None else AttachmentSet()

    @property
    def current(self) -> Optional[ResultBoard]:
        return self.dispatcher.current

    async def submit(self, prompt: str, on_update: Optional[Subscriber] = None) -> List[CanonicalResult]:
        """Dispatch ``prompt``; an empty prompt or empty selection changes nothing."""
        round_ = self.dispatcher.open_round(prompt, self.catalog.selected(), self.attachments.snapshot())
        if round_ is None:
            return []
        self.attachments.clear_attachments()
        if on_update is not None:
            round_.board.subscribe(on_update)
        return await self.dispatcher.run_round(round_)


__all__ = ["PromptSession"]
