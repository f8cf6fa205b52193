"""Provider capability table.

Adapters form a closed set of variants behind one call contract. Instead of
inferring capabilities from mixins, each provider id has one flat row that
says whether it accepts document attachments and how they are delivered:

* ``reference`` - bytes are uploaded first and referenced by file id
* ``inline``    - bytes are base64 encoded into the generation request
* ``none``      - attachments are not forwarded at all
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from ...config.defaults import (
    ANTHROPIC_DEFAULT_MODEL,
    DEEPSEEK_DEFAULT_MODEL,
    GEMINI_DEFAULT_MODEL,
    OPENAI_DEFAULT_MODEL,
)


class UploadStyle(str, Enum):
    REFERENCE = "reference"
    INLINE = "inline"
    NONE = "none"


@dataclass(frozen=True)
class ProviderCapabilities:
    """Static capability row for one provider id."""

    provider_id: str
    display_name: str
    supports_attachments: bool
    upload_style: UploadStyle
    default_model: str


CAPABILITIES: Dict[str, ProviderCapabilities] = {
    "openai": ProviderCapabilities("openai", "OpenAI", True, UploadStyle.REFERENCE, OPENAI_DEFAULT_MODEL),
    "anthropic": ProviderCapabilities("anthropic", "Anthropic", True, UploadStyle.REFERENCE, ANTHROPIC_DEFAULT_MODEL),
    "google": ProviderCapabilities("google", "Google", True, UploadStyle.INLINE, GEMINI_DEFAULT_MODEL),
    "deepseek": ProviderCapabilities("deepseek", "DeepSeek", False, UploadStyle.NONE, DEEPSEEK_DEFAULT_MODEL),
}


def get_capabilities(provider_id: str) -> Optional[ProviderCapabilities]:
    """Return the capability row for ``provider_id`` or ``None`` when unknown."""
    return CAPABILITIES.get((provider_id or "").lower().strip())


def supports_attachments(provider_id: str) -> bool:
    caps = get_capabilities(provider_id)
    return bool(caps and caps.supports_attachments)


def display_name(provider_id: str) -> str:
    """Short vendor label used in configuration error messages."""
    caps = get_capabilities(provider_id)
    return caps.display_name if caps else provider_id


__all__ = [
    "UploadStyle",
    "ProviderCapabilities",
    "CAPABILITIES",
    "get_capabilities",
    "supports_attachments",
    "display_name",
]
