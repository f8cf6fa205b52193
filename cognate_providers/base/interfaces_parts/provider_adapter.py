"""ProviderAdapter Protocol (single-class module).

Defines the one call contract every provider adapter implements.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from ..models import AdapterOutcome, Attachment, ProviderSpec


@runtime_checkable
class ProviderAdapter(Protocol):
    """Translate a canonical request into one vendor call.

    Implementations never raise for provider failures; every transport,
    upload or parsing error is encoded as ``AdapterOutcome.failure``.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider id, e.g. ``"openai"``."""
        ...

    async def call(
        self,
        provider: ProviderSpec,
        prompt: str,
        credential: str,
        attachments: Optional[Sequence[Attachment]] = None,
    ) -> AdapterOutcome:
        ...
