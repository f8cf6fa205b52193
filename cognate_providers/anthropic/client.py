"""AnthropicAdapter.

Uses ``anthropic.AsyncAnthropic``. Requests without attachments go through the
stable Messages API (``messages.create``). Requests with PDF attachments use
the beta Files API: each PDF is uploaded with ``beta.files.upload`` and
referenced as a ``document`` block, and the message is sent through
``beta.messages.create`` with the same beta flag.

The generated text is every text-typed content block joined by newlines;
thinking and tool blocks are ignored.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Dict, List

import anthropic

from ..base.adapter import BaseProviderAdapter, instruction_text
from ..base.models import Attachment, CanonicalRequest
from ..base.tokens import join_text_blocks
from ..config.defaults import ACCEPTED_MIME_TYPE, ANTHROPIC_FILES_BETA

__all__ = ["AnthropicAdapter"]


class AnthropicAdapter(BaseProviderAdapter):
    """Anthropic Messages adapter (reference-style attachments)."""

    provider_id = "anthropic"

    def _make_client(self, credential: str) -> Any:
        return anthropic.AsyncAnthropic(api_key=credential)

    async def _upload(self, client: Any, path: Path, attachment: Attachment) -> str:
        data = await asyncio.to_thread(path.read_bytes)
        uploaded = await client.beta.files.upload(
            file=(attachment.name, data, ACCEPTED_MIME_TYPE),
            betas=[ANTHROPIC_FILES_BETA],
        )
        return uploaded.id

    def _reference_block(self, file_id: str) -> Dict[str, Any]:
        return {"type": "document", "source": {"type": "file", "file_id": file_id}}

    async def _generate(self, client: Any, model: str, request: CanonicalRequest, blocks: List[Any]) -> Any:
        if not blocks:
            return await client.messages.create(
                model=model,
                max_tokens=request.max_tokens,
                messages=[{"role": "user", "content": request.prompt}],
            )
        content = [*blocks, {"type": "text", "text": instruction_text(request.prompt)}]
        return await client.beta.messages.create(
            model=model,
            max_tokens=request.max_tokens,
            messages=[{"role": "user", "content": content}],
            betas=[ANTHROPIC_FILES_BETA],
        )

    def _extract_text(self, raw: Any) -> str:
        return join_text_blocks(getattr(raw, "content", None))
