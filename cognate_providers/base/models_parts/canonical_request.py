"""
CanonicalRequest DTO: the provider-agnostic input of one adapter call.

Constructed per dispatch branch and never persisted.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .attachment import Attachment
from .provider_spec import ProviderSpec


@dataclass(frozen=True)
class CanonicalRequest:
    """Prompt, provider settings and the attachments forwarded to an adapter."""

    provider: ProviderSpec
    prompt: str
    attachments: Tuple[Attachment, ...] = ()

    @property
    def model(self) -> str:
        return self.provider.model

    @property
    def max_tokens(self) -> int:
        return self.provider.max_tokens


__all__ = ["CanonicalRequest"]
