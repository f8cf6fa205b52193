"""OpenAI adapter built on the shared :class:`BaseProviderAdapter`.

Uses the Responses API through ``openai.AsyncOpenAI``:

* attachments are uploaded with ``files.create(purpose="user_data")`` and
  referenced as ``input_file`` blocks ahead of the ``input_text`` block
* without attachments the raw prompt string is sent as ``input``
* the generated text is the flattened ``output_text`` field

Token usage, timing, logging and error capture come from the base class.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Dict, List

import openai

from ..base.adapter import BaseProviderAdapter, instruction_text
from ..base.models import Attachment, CanonicalRequest
from ..config.defaults import ACCEPTED_MIME_TYPE

__all__ = ["OpenAIAdapter"]


class OpenAIAdapter(BaseProviderAdapter):
    """OpenAI Responses API adapter (reference-style attachments)."""

    provider_id = "openai"

    def _make_client(self, credential: str) -> Any:
        return openai.AsyncOpenAI(api_key=credential)

    async def _upload(self, client: Any, path: Path, attachment: Attachment) -> str:
        data = await asyncio.to_thread(path.read_bytes)
        uploaded = await client.files.create(file=(attachment.name, data, ACCEPTED_MIME_TYPE), purpose="user_data")
        return uploaded.id

    def _reference_block(self, file_id: str) -> Dict[str, Any]:
        return {"type": "input_file", "file_id": file_id}

    async def _generate(self, client: Any, model: str, request: CanonicalRequest, blocks: List[Any]) -> Any:
        if blocks:
            content = [*blocks, {"type": "input_text", "text": instruction_text(request.prompt)}]
            payload: Any = [{"role": "user", "content": content}]
        else:
            payload = request.prompt
        return await client.responses.create(
            model=model,
            max_output_tokens=request.max_tokens,
            input=payload,
        )

    def _extract_text(self, raw: Any) -> str:
        return getattr(raw, "output_text", None) or ""
