"""Configuration checks in ``send_prompt`` happen before any adapter runs."""
from __future__ import annotations

import pytest

from cognate_providers.base.models import ResultStatus
from cognate_providers.dispatch import send_prompt
from cognate_providers.tests.utils import (
    ScriptedAdapter,
    StaticResolver,
    make_attachment,
    make_spec,
    register_adapters,
)


@pytest.mark.asyncio
async def test_missing_key_fails_without_calling_adapter(isolated_factory):
    adapter = ScriptedAdapter("openai")
    register_adapters(isolated_factory, {"openai": adapter})

    outcome = await send_prompt(make_spec("openai"), "hi", resolver=StaticResolver(), factory=isolated_factory)

    assert outcome.status is ResultStatus.ERROR
    assert outcome.error_message == "OpenAI API key is not set."
    assert outcome.elapsed_ms == 0
    assert adapter.calls == []


@pytest.mark.asyncio
async def test_unsupported_provider_message(isolated_factory):
    resolver = StaticResolver({"mistral": "k"})
    outcome = await send_prompt(make_spec("mistral"), "hi", resolver=resolver, factory=isolated_factory)
    assert outcome.error_message == 'Provider with ID "mistral" is not supported.'
    assert resolver.calls == []


@pytest.mark.asyncio
async def test_credential_and_prompt_forwarded(isolated_factory):
    adapter = ScriptedAdapter("anthropic")
    register_adapters(isolated_factory, {"anthropic": adapter})

    outcome = await send_prompt(
        make_spec("anthropic"),
        "hello",
        [make_attachment()],
        resolver=StaticResolver({"anthropic": "sk-ant"}),
        factory=isolated_factory,
    )

    assert outcome.ok
    (call,) = adapter.calls
    assert call[:3] == ("anthropic", "hello", "sk-ant")
    assert [a.name for a in call[3]] == ["doc.pdf"]


@pytest.mark.asyncio
async def test_attachments_not_forwarded_to_deepseek(isolated_factory):
    adapter = ScriptedAdapter("deepseek")
    register_adapters(isolated_factory, {"deepseek": adapter})

    await send_prompt(
        make_spec("deepseek"),
        "hello",
        [make_attachment()],
        resolver=StaticResolver({"deepseek": "ds"}),
        factory=isolated_factory,
    )

    assert adapter.calls[0][3] == []


@pytest.mark.asyncio
async def test_adapter_init_failure_becomes_error(isolated_factory):
    def _broken():
        raise RuntimeError("sdk missing")

    isolated_factory.register("openai", _broken)
    outcome = await send_prompt(
        make_spec("openai"), "hi", resolver=StaticResolver({"openai": "k"}), factory=isolated_factory
    )
    assert outcome.status is ResultStatus.ERROR
    assert "sdk missing" in outcome.error_message


@pytest.mark.asyncio
async def test_credential_lookup_failure_becomes_error(isolated_factory):
    class _UnreadableStore:
        async def resolve(self, provider_id):
            raise OSError("unable to open database file")

    adapter = ScriptedAdapter("openai")
    register_adapters(isolated_factory, {"openai": adapter})

    outcome = await send_prompt(make_spec("openai"), "hi", resolver=_UnreadableStore(), factory=isolated_factory)

    assert outcome.status is ResultStatus.ERROR
    assert "unable to open database file" in outcome.error_message
    assert adapter.calls == []
