"""cognate_providers package

Send one prompt, with optional PDF attachments, to several LLM providers at
once and collect one normalized result per provider.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`,
      :class:`AttachmentReadError`
    - Catalog: :class:`ProviderCatalog`
    - Attachments: :class:`AttachmentSet`, :class:`FileBlob`
    - Dispatch: :class:`Dispatcher`, :class:`PromptSession`,
      :class:`ResultBoard`, :func:`send_prompt`
    - Factory: :func:`create`
"""

from .attachments import AttachmentSet, FileBlob, is_pdf
from .base.errors import AttachmentReadError, ErrorCode, ProviderError
from .base.factory import ProviderFactory, UnknownProviderError
from .base.models import (
    Attachment,
    CanonicalResult,
    ProviderSpec,
    ResultStatus,
    TokenUsage,
)
from .base.repositories.keys import KeysRepository
from .catalog import ProviderCatalog
from .dispatch import Dispatcher, PromptSession, ResultBoard, send_prompt

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Exceptions
    "ProviderError",
    "ErrorCode",
    "AttachmentReadError",
    # Models
    "Attachment",
    "CanonicalResult",
    "ProviderSpec",
    "ResultStatus",
    "TokenUsage",
    # Building blocks
    "AttachmentSet",
    "FileBlob",
    "is_pdf",
    "KeysRepository",
    "ProviderCatalog",
    "ProviderFactory",
    # Dispatch
    "Dispatcher",
    "PromptSession",
    "ResultBoard",
    "send_prompt",
    # Core helpers
    "create",
]


def create(provider_id: str):
    """Instantiate a provider adapter via ``ProviderFactory``.

    Raises
    ------
    ProviderError
        When the id is unknown or the adapter fails to initialize.
    """
    try:
        return ProviderFactory.create(provider_id)
    except UnknownProviderError as e:
        raise ProviderError(
            code=ErrorCode.UNSUPPORTED_PROVIDER,
            message=f"Failed to create provider '{provider_id}': {e}",
            provider=provider_id,
        ) from e
