"""Single-provider dispatch entry point.

``send_prompt`` validates configuration before any network access:

* the provider id must be registered with the factory, otherwise
  ``Provider with ID "<id>" is not supported.``
* a credential must resolve, otherwise ``<Display> API key is not set.``;
  a lookup that raises (e.g. an unreadable key store) becomes an error
  outcome carrying the exception message

Neither failure reaches an adapter. Attachments are forwarded only to
providers whose capability row accepts them.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..base.capabilities import display_name, supports_attachments
from ..base.errors import (
    ErrorCode,
    MISSING_API_KEY_TEMPLATE,
    UNSUPPORTED_PROVIDER_TEMPLATE,
    classify_exception,
    extract_error_message,
)
from ..base.factory import ProviderFactory, UnknownProviderError
from ..base.interfaces import CredentialResolver
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import AdapterOutcome, Attachment, ProviderSpec

_logger = get_logger("dispatch")


def _config_failure(provider: ProviderSpec, code: ErrorCode, message: str) -> AdapterOutcome:
    normalized_log_event(
        _logger,
        "chat.error",
        LogContext(provider=provider.id, model=provider.model or None),
        phase="configure",
        level=logging.WARNING,
        error_code=code.value,
        error=message,
    )
    return AdapterOutcome.failure(message)


async def send_prompt(
    provider: ProviderSpec,
    prompt: str,
    attachments: Optional[Sequence[Attachment]] = None,
    *,
    resolver: CredentialResolver,
    factory: Any = ProviderFactory,
) -> AdapterOutcome:
    """Call one provider and return its outcome; configuration errors never raise."""
    if not factory.is_supported(provider.id):
        return _config_failure(
            provider,
            ErrorCode.UNSUPPORTED_PROVIDER,
            UNSUPPORTED_PROVIDER_TEMPLATE.format(provider_id=provider.id),
        )

    try:
        credential = await resolver.resolve(provider.id)
    except Exception as exc:
        return _config_failure(provider, classify_exception(exc), extract_error_message(exc))
    if not credential:
        return _config_failure(
            provider,
            ErrorCode.MISSING_CREDENTIAL,
            MISSING_API_KEY_TEMPLATE.format(display=display_name(provider.id)),
        )

    try:
        adapter = factory.create(provider.id)
    except UnknownProviderError as exc:
        return _config_failure(provider, ErrorCode.UNSUPPORTED_PROVIDER, str(exc))

    forwarded = list(attachments or ()) if supports_attachments(provider.id) else []
    return await adapter.call(provider, prompt, credential, forwarded)


__all__ = ["send_prompt"]
