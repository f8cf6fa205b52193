"""Shared test doubles and builders for the providers test suite."""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any, List, Optional, Sequence
from unittest.mock import AsyncMock

from cognate_providers.base.models import AdapterOutcome, Attachment, ProviderSpec


class StaticResolver:
    """Credential resolver returning fixed keys and recording lookups."""

    def __init__(self, keys: Optional[dict] = None) -> None:
        self.keys = dict(keys or {})
        self.calls: List[str] = []

    async def resolve(self, provider_id: str) -> Optional[str]:
        self.calls.append(provider_id)
        return self.keys.get(provider_id)


class ScriptedAdapter:
    """Adapter double: records calls and returns (or raises) a scripted value."""

    def __init__(self, provider_id: str, outcome: Any = None) -> None:
        self.provider_id = provider_id
        self.outcome = outcome if outcome is not None else AdapterOutcome.success(f"{provider_id} says hi", 7)
        self.calls: List[tuple] = []

    @property
    def provider_name(self) -> str:
        return self.provider_id

    async def call(
        self,
        provider: ProviderSpec,
        prompt: str,
        credential: str,
        attachments: Optional[Sequence[Attachment]] = None,
    ) -> AdapterOutcome:
        self.calls.append((provider.id, prompt, credential, list(attachments or [])))
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


def register_adapters(factory: type, adapters: dict) -> None:
    """Register prebuilt adapter instances on an isolated factory subclass."""
    for provider_id, adapter in adapters.items():
        factory.register(provider_id, lambda adapter=adapter: adapter)


def make_spec(provider_id: str, selected: bool = True, model: str = "", max_tokens: int = 1024) -> ProviderSpec:
    return ProviderSpec(
        id=provider_id,
        display_name=provider_id.title(),
        selected=selected,
        model=model,
        max_tokens=max_tokens,
    )


def make_attachment(
    name: str = "doc.pdf",
    data: bytes = b"%PDF-1.4 test",
    mime_type: str = "application/pdf",
) -> Attachment:
    return Attachment(id=f"att-{name}", name=name, mime_type=mime_type, size=len(data), data=data)


def usage(**fields: int) -> SimpleNamespace:
    return SimpleNamespace(**fields)


def api_error(message: str, status_code: int = 400) -> Exception:
    """Exception shaped like an SDK ``APIStatusError`` with a JSON body."""
    exc = Exception(f"Error code: {status_code}")
    exc.status_code = status_code  # type: ignore[attr-defined]
    exc.body = {"error": {"message": message}}  # type: ignore[attr-defined]
    return exc


def async_client(**attrs: Any) -> SimpleNamespace:
    """Namespace whose leaves are ``AsyncMock`` callables (SDK client stand-in)."""
    return SimpleNamespace(close=AsyncMock(), **attrs)


def assert_true(condition: bool, message: str) -> None:
    """Raise AssertionError with ``message`` when ``condition`` is false."""
    if not condition:
        raise AssertionError(message)
