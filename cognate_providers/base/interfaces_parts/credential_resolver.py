"""CredentialResolver Protocol (single-class module)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CredentialResolver(Protocol):
    """Resolve the API key for a provider id, or ``None`` when absent."""

    async def resolve(self, provider_id: str) -> Optional[str]:
        ...
