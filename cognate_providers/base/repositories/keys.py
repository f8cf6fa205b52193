"""
Keys Repository

Purpose
- Centralize API key resolution for providers.
- Prefer environment variables; fall back to the persistent key store.

Design
- Non-throwing accessors that return None if a key is not resolved.
- Blank, whitespace-only and placeholder values count as absent.
- The env var map lives in ``cognate_providers.config.env``.

Usage
- repo = KeysRepository(store=SqliteCredentialStore(...))
- key = await repo.resolve("openai")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ...config.env import is_placeholder, resolve_provider_key
from ..interfaces import CredentialStore


@dataclass
class KeyResolution:
    provider: str
    api_key: Optional[str]
    source: str  # "env", "store", "none"
    extra: Dict[str, Any] = field(default_factory=dict)


def _usable(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = str(value).strip()
    if not cleaned or is_placeholder(cleaned):
        return None
    return cleaned


class KeysRepository:
    """
    Resolve provider credentials with a strict priority order:

    1) Environment variables (canonical name, then aliases)
    2) Persistent key store, when one is configured
    3) None

    Implements the ``CredentialResolver`` protocol through :meth:`resolve`.
    """

    def __init__(self, store: Optional[CredentialStore] = None) -> None:
        self._store = store

    @property
    def store(self) -> Optional[CredentialStore]:
        return self._store

    async def resolve(self, provider_id: str) -> Optional[str]:
        return (await self.get_resolution(provider_id)).api_key

    async def get_resolution(self, provider_id: str) -> KeyResolution:
        p = (provider_id or "").lower().strip()
        val, used = resolve_provider_key(p)
        if val:
            return KeyResolution(provider=p, api_key=val, source="env", extra={"env_var": used})

        if self._store is not None:
            stored = _usable(await self._store.get(p))
            if stored:
                return KeyResolution(provider=p, api_key=stored, source="store")

        return KeyResolution(provider=p, api_key=None, source="none")


__all__ = ["KeyResolution", "KeysRepository"]
