"""DeepSeekAdapter using the OpenAI-compatible Chat Completions API.

Reuses ``openai.AsyncOpenAI`` pointed at the DeepSeek base URL (configurable
via ``DEEPSEEK_BASE_URL`` or the config file). DeepSeek has no document
input, so attachments are never forwarded; only the prompt is sent.
"""

from __future__ import annotations

from typing import Any, List

import openai

from ..base.adapter import BaseProviderAdapter
from ..base.models import CanonicalRequest
from ..config import get_provider_config
from ..config.defaults import DEEPSEEK_DEFAULT_BASE_URL

__all__ = ["DeepSeekAdapter"]


class DeepSeekAdapter(BaseProviderAdapter):
    """DeepSeek chat adapter (attachments ignored)."""

    provider_id = "deepseek"

    def _make_client(self, credential: str) -> Any:
        base_url = get_provider_config("deepseek").get("base_url") or DEEPSEEK_DEFAULT_BASE_URL
        return openai.AsyncOpenAI(api_key=credential, base_url=base_url)

    async def _generate(self, client: Any, model: str, request: CanonicalRequest, blocks: List[Any]) -> Any:
        return await client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": request.prompt}],
            max_tokens=request.max_tokens,
        )

    def _extract_text(self, raw: Any) -> str:
        choices = getattr(raw, "choices", None) or []
        if not choices:
            return ""
        message = getattr(choices[0], "message", None)
        return getattr(message, "content", None) or ""
