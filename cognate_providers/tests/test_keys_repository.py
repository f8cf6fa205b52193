"""KeysRepository resolution order: environment, then key store, then nothing."""

from __future__ import annotations

from typing import Dict, Optional

import pytest

from cognate_providers.base.repositories.keys import KeysRepository
from cognate_providers.persistence.sqlite import SqliteCredentialStore


class _DictStore:
    def __init__(self, data: Optional[Dict[str, str]] = None) -> None:
        self.data = dict(data or {})

    async def get(self, provider_id: str) -> Optional[str]:
        return self.data.get(provider_id)

    async def set(self, provider_id: str, api_key: str) -> None:
        self.data[provider_id] = api_key

    async def delete(self, provider_id: str) -> None:
        self.data.pop(provider_id, None)


@pytest.mark.asyncio
async def test_env_precedence_over_store(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "from_env")  # pragma: allowlist secret - dummy test value
    repo = KeysRepository(store=_DictStore({"openai": "from_store"}))
    res = await repo.get_resolution("openai")
    assert res.api_key == "from_env" and res.source == "env"  # nosec B101
    assert res.extra["env_var"] == "OPENAI_API_KEY"  # nosec B101


@pytest.mark.asyncio
async def test_store_used_when_env_missing():
    repo = KeysRepository(store=_DictStore({"anthropic": "  sk-ant  "}))
    res = await repo.get_resolution("anthropic")
    assert res.api_key == "sk-ant" and res.source == "store"  # nosec B101


@pytest.mark.asyncio
async def test_blank_and_placeholder_store_values_count_as_absent():
    repo = KeysRepository(store=_DictStore({"openai": "   ", "deepseek": "placeholder"}))
    assert await repo.resolve("openai") is None  # nosec B101
    assert await repo.resolve("deepseek") is None  # nosec B101


@pytest.mark.asyncio
async def test_missing_key_returns_none():
    res = await KeysRepository().get_resolution("nope")
    assert res.api_key is None and res.source == "none"  # nosec B101


@pytest.mark.asyncio
async def test_env_alias_resolution(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "alias_val")  # pragma: allowlist secret - dummy test value
    res = await KeysRepository().get_resolution("google")
    assert res.api_key == "alias_val" and res.source == "env"  # nosec B101


@pytest.mark.asyncio
async def test_sqlite_store_round_trip(db_path):
    store = SqliteCredentialStore(db_path)
    repo = KeysRepository(store=store)
    await store.set("deepseek", "ds-123")
    assert await repo.resolve("deepseek") == "ds-123"  # nosec B101
    await store.delete("deepseek")
    assert await repo.resolve("deepseek") is None  # nosec B101
