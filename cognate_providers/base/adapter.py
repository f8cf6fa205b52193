"""Shared call skeleton for provider adapters.

Every adapter exposes the same coroutine::

    await adapter.call(provider, prompt, credential, attachments=None) -> AdapterOutcome

and never raises for provider failures. The skeleton below owns the parts
that are identical across providers:

1. start timestamp
2. attachment preparation, driven by the capability table (upload and
   reference by id, inline base64, or nothing)
3. chat.start / chat.end / chat.error structured logging
4. end timestamp and elapsed milliseconds
5. token usage extraction through the ordered per-provider paths
6. exception capture: message fallback chain, error-code classification,
   ``elapsed_ms`` reset to zero

Concrete adapters only supply the wire shape: client construction, the
upload call or inline block, the generation call and text extraction.

Temp files created for uploads live in a per-invocation :class:`StagedFiles`
scope and are removed on every exit path.
"""

from __future__ import annotations

import contextlib
import inspect
import logging
import time
from typing import Any, ClassVar, List, Optional, Sequence

from ..config.defaults import DEFAULT_ATTACHMENT_INSTRUCTION
from .capabilities import ProviderCapabilities, UploadStyle, get_capabilities
from .errors import classify_exception, extract_error_message
from .logging import LogContext, get_logger, normalized_log_event
from .models import AdapterOutcome, Attachment, CanonicalRequest, ProviderSpec
from .staging import StagedFiles
from .tokens import extract_token_usage
from .utils.documents import is_pdf


def instruction_text(prompt: str) -> str:
    """Text block for multi-part requests; empty prompts get the default instruction."""
    return prompt if prompt and prompt.strip() else DEFAULT_ATTACHMENT_INSTRUCTION


def _elapsed_ms(start: float) -> int:
    return max(0, int(round((time.perf_counter() - start) * 1000.0)))


class BaseProviderAdapter:
    """Template for one provider's canonical-to-native translation.

    Subclasses set ``provider_id`` and implement ``_make_client``,
    ``_generate`` and ``_extract_text``. Attachment-capable adapters also
    implement ``_upload`` + ``_reference_block`` (reference style) or
    ``_inline_block`` (inline style).
    """

    provider_id: ClassVar[str] = ""

    def __init__(self) -> None:
        caps = get_capabilities(self.provider_id)
        if caps is None:
            raise ValueError(f"no capability entry for provider '{self.provider_id}'")
        self.capabilities: ProviderCapabilities = caps
        self._logger = get_logger(f"providers.{self.provider_id}")

    @property
    def provider_name(self) -> str:
        return self.provider_id

    @property
    def default_model(self) -> str:
        return self.capabilities.default_model

    def resolve_model(self, provider: ProviderSpec) -> str:
        return (provider.model or "").strip() or self.default_model

    # ------------------------------------------------------------------
    # Public contract
    # ------------------------------------------------------------------

    async def call(
        self,
        provider: ProviderSpec,
        prompt: str,
        credential: str,
        attachments: Optional[Sequence[Attachment]] = None,
    ) -> AdapterOutcome:
        """Run one provider call and map every outcome to :class:`AdapterOutcome`."""
        model = self.resolve_model(provider)
        ctx = LogContext(provider=self.provider_id, model=model)
        request = CanonicalRequest(provider=provider, prompt=prompt, attachments=tuple(attachments or ()))
        start = time.perf_counter()
        client: Any = None
        try:
            client = self._make_client(credential)
            async with StagedFiles(self.provider_id) as staged:
                blocks = await self._prepare_attachments(client, request.attachments, staged, ctx)
                normalized_log_event(
                    self._logger,
                    "chat.start",
                    ctx,
                    phase="start",
                    max_tokens=provider.max_tokens,
                    attachments=len(blocks),
                )
                raw = await self._generate(client, model, request, blocks)
                elapsed_ms = _elapsed_ms(start)
            text = self._extract_text(raw)
            usage = extract_token_usage(self.provider_id, raw)
            normalized_log_event(
                self._logger,
                "chat.end",
                ctx,
                phase="finalize",
                elapsed_ms=elapsed_ms,
                tokens=usage,
            )
            return AdapterOutcome.success(text, elapsed_ms, usage)
        except Exception as exc:
            message = extract_error_message(exc)
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                level=logging.ERROR,
                error_code=classify_exception(exc).value,
                error=message,
                exc_type=type(exc).__name__,
            )
            return AdapterOutcome.failure(message)
        finally:
            if client is not None:
                await self._close_client(client)

    # ------------------------------------------------------------------
    # Attachment handling
    # ------------------------------------------------------------------

    async def _prepare_attachments(
        self,
        client: Any,
        attachments: Sequence[Attachment],
        staged: StagedFiles,
        ctx: LogContext,
    ) -> List[Any]:
        """Turn accepted attachments into provider-native content blocks.

        Non-PDF entries are skipped one by one. An upload failure propagates so
        that only this provider's call is aborted.
        """
        if not attachments or not self.capabilities.supports_attachments:
            return []
        style = self.capabilities.upload_style
        blocks: List[Any] = []
        for attachment in attachments:
            if not is_pdf(attachment.name, attachment.mime_type):
                continue
            if style is UploadStyle.REFERENCE:
                path = await staged.stage(attachment)
                normalized_log_event(
                    self._logger, "upload.start", ctx, phase="upload", file_name=attachment.name, size=attachment.size
                )
                file_id = await self._upload(client, path, attachment)
                normalized_log_event(
                    self._logger, "upload.end", ctx, phase="upload", file_name=attachment.name, file_id=file_id
                )
                blocks.append(self._reference_block(file_id))
            elif style is UploadStyle.INLINE:
                blocks.append(self._inline_block(attachment))
        return blocks

    async def _upload(self, client: Any, path: Any, attachment: Attachment) -> str:
        raise NotImplementedError(f"{self.provider_id} does not upload files")

    def _reference_block(self, file_id: str) -> Any:
        raise NotImplementedError(f"{self.provider_id} does not reference uploaded files")

    def _inline_block(self, attachment: Attachment) -> Any:
        raise NotImplementedError(f"{self.provider_id} does not inline attachments")

    # ------------------------------------------------------------------
    # Wire hooks
    # ------------------------------------------------------------------

    def _make_client(self, credential: str) -> Any:
        raise NotImplementedError

    async def _generate(self, client: Any, model: str, request: CanonicalRequest, blocks: List[Any]) -> Any:
        raise NotImplementedError

    def _extract_text(self, raw: Any) -> str:
        raise NotImplementedError

    async def _close_client(self, client: Any) -> None:
        close = getattr(client, "close", None)
        if not callable(close):
            return
        with contextlib.suppress(Exception):
            result = close()
            if inspect.isawaitable(result):
                await result


__all__ = ["BaseProviderAdapter", "instruction_text"]
