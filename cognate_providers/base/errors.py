"""Unified provider error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``cognate_providers.base.errors_parts`` and the fixed configuration-error
message templates.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.attachment_error import AttachmentReadError
from .errors_parts.classification import classify_exception
from .errors_parts.messages import extract_error_message

# pragma: allowlist secret - message templates, not credentials
MISSING_API_KEY_TEMPLATE = "{display} API key is not set."
UNSUPPORTED_PROVIDER_TEMPLATE = 'Provider with ID "{provider_id}" is not supported.'

__all__ = [
    "ErrorCode",
    "ProviderError",
    "AttachmentReadError",
    "classify_exception",
    "extract_error_message",
    "MISSING_API_KEY_TEMPLATE",
    "UNSUPPORTED_PROVIDER_TEMPLATE",
]
