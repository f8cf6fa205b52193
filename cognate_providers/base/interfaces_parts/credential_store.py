"""CredentialStore Protocol (single-class module).

Async persistent key storage consulted after environment variables.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CredentialStore(Protocol):
    async def get(self, provider_id: str) -> Optional[str]:
        ...

    async def set(self, provider_id: str, api_key: str) -> None:
        ...

    async def delete(self, provider_id: str) -> None:
        ...
