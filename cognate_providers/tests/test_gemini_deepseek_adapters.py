"""Inline-attachment (Gemini) and attachment-free (DeepSeek) adapters."""
from __future__ import annotations

import base64
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from cognate_providers.deepseek import client as deepseek_client
from cognate_providers.deepseek.client import DeepSeekAdapter
from cognate_providers.gemini import client as gemini_client
from cognate_providers.gemini.client import GeminiAdapter
from cognate_providers.tests.utils import async_client, make_attachment, make_spec


@pytest.fixture()
def fake_genai(monkeypatch):
    response = SimpleNamespace(
        text="gemini says",
        usage_metadata=SimpleNamespace(prompt_token_count=30, candidates_token_count=9),
    )
    model = SimpleNamespace(generate_content_async=AsyncMock(return_value=response))
    configure = MagicMock()
    generative_model = MagicMock(return_value=model)
    monkeypatch.setattr(gemini_client.genai, "configure", configure)
    monkeypatch.setattr(gemini_client.genai, "GenerativeModel", generative_model)
    return SimpleNamespace(configure=configure, GenerativeModel=generative_model, model=model)


@pytest.mark.asyncio
async def test_gemini_plain_prompt(fake_genai):
    outcome = await GeminiAdapter().call(make_spec("google", max_tokens=300), "Hi", "g-key")

    assert outcome.ok
    assert outcome.content == "gemini says"
    assert (outcome.token_usage.prompt_tokens, outcome.token_usage.completion_tokens) == (30, 9)
    fake_genai.configure.assert_called_once_with(api_key="g-key")
    fake_genai.GenerativeModel.assert_called_once_with(
        model_name="gemini-2.5-pro",
        generation_config={"max_output_tokens": 300},
    )
    fake_genai.model.generate_content_async.assert_awaited_once_with("Hi")


@pytest.mark.asyncio
async def test_gemini_inline_parts_precede_text(fake_genai):
    data = b"%PDF-1.5 inline"
    await GeminiAdapter().call(make_spec("google"), "Read this", "g-key", [make_attachment("a.pdf", data)])

    (contents,) = fake_genai.model.generate_content_async.await_args.args
    assert contents == [
        {"inline_data": {"mime_type": "application/pdf", "data": base64.b64encode(data).decode("ascii")}},
        "Read this",
    ]


@pytest.mark.asyncio
async def test_gemini_error_is_captured(fake_genai):
    fake_genai.model.generate_content_async.side_effect = RuntimeError("quota exhausted")
    outcome = await GeminiAdapter().call(make_spec("google"), "Hi", "g-key")
    assert outcome.error_message == "quota exhausted"
    assert outcome.elapsed_ms == 0


@pytest.fixture()
def fake_deepseek(monkeypatch):
    reply = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content="deepseek says"))],
        usage=SimpleNamespace(prompt_tokens=5, completion_tokens=2),
    )
    client = async_client(chat=SimpleNamespace(completions=SimpleNamespace(create=AsyncMock(return_value=reply))))
    created = []

    def _factory(**kwargs):
        created.append(kwargs)
        return client

    monkeypatch.setattr(deepseek_client.openai, "AsyncOpenAI", _factory)
    client.created = created
    return client


@pytest.mark.asyncio
async def test_deepseek_uses_base_url_and_ignores_attachments(fake_deepseek):
    outcome = await DeepSeekAdapter().call(make_spec("deepseek", max_tokens=64), "Hi", "ds", [make_attachment()])

    assert outcome.ok
    assert outcome.content == "deepseek says"
    assert outcome.token_usage.total_tokens == 7
    assert fake_deepseek.created == [{"api_key": "ds", "base_url": "https://api.deepseek.com"}]
    fake_deepseek.chat.completions.create.assert_awaited_once_with(
        model="deepseek-chat",
        messages=[{"role": "user", "content": "Hi"}],
        max_tokens=64,
    )


@pytest.mark.asyncio
async def test_deepseek_base_url_override(fake_deepseek, monkeypatch):
    monkeypatch.setenv("DEEPSEEK_BASE_URL", "http://localhost:8000/v1")
    await DeepSeekAdapter().call(make_spec("deepseek"), "Hi", "ds")
    assert fake_deepseek.created[0]["base_url"] == "http://localhost:8000/v1"


@pytest.mark.asyncio
async def test_deepseek_empty_choices_yield_empty_text(fake_deepseek):
    fake_deepseek.chat.completions.create.return_value = SimpleNamespace(choices=[], usage=None)
    outcome = await DeepSeekAdapter().call(make_spec("deepseek"), "Hi", "ds")
    assert outcome.ok and outcome.content == ""
