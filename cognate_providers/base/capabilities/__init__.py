"""Capabilities package: the flat per-provider capability table."""

from .core import (
    CAPABILITIES,
    ProviderCapabilities,
    UploadStyle,
    display_name,
    get_capabilities,
    supports_attachments,
)

__all__ = [
    "CAPABILITIES",
    "ProviderCapabilities",
    "UploadStyle",
    "display_name",
    "get_capabilities",
    "supports_attachments",
]
