"""GeminiAdapter.

Uses google-generativeai (``google-generativeai>=0.8``) ``GenerativeModel``
with ``generate_content_async``. The provider id is ``google``.

Gemini has no upload step here: PDF bytes are base64 encoded into
``inline_data`` parts that precede the text part. Without attachments the
prompt string alone is sent.
"""

from __future__ import annotations

import base64
from typing import Any, Dict, List

import google.generativeai as genai

from ..base.adapter import BaseProviderAdapter, instruction_text
from ..base.models import Attachment, CanonicalRequest
from ..config.defaults import ACCEPTED_MIME_TYPE

__all__ = ["GeminiAdapter"]


class GeminiAdapter(BaseProviderAdapter):
    """Gemini adapter (inline-style attachments)."""

    provider_id = "google"

    def _make_client(self, credential: str) -> Any:
        genai.configure(api_key=credential)
        return genai

    def _inline_block(self, attachment: Attachment) -> Dict[str, Any]:
        return {
            "inline_data": {
                "mime_type": ACCEPTED_MIME_TYPE,
                "data": base64.b64encode(attachment.data).decode("ascii"),
            }
        }

    async def _generate(self, client: Any, model: str, request: CanonicalRequest, blocks: List[Any]) -> Any:
        generative_model = client.GenerativeModel(
            model_name=model,
            generation_config={"max_output_tokens": request.max_tokens},
        )
        contents: Any = [*blocks, instruction_text(request.prompt)] if blocks else request.prompt
        return await generative_model.generate_content_async(contents)

    def _extract_text(self, raw: Any) -> str:
        return getattr(raw, "text", None) or ""

    async def _close_client(self, client: Any) -> None:
        # module-level SDK configuration, nothing to close
        return None
