"""Errors parts package public surface.

Prefer importing from `cognate_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .attachment_error import AttachmentReadError
from .classification import classify_exception
from .messages import extract_error_message

__all__ = [
    "ErrorCode",
    "ProviderError",
    "AttachmentReadError",
    "classify_exception",
    "extract_error_message",
]
