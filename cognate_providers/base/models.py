"""
Provider-agnostic canonical models (DTOs) public surface.

Re-exports the one-class-per-file implementations under
``cognate_providers.base.models_parts``.
"""

from .models_parts.adapter_outcome import AdapterOutcome
from .models_parts.attachment import Attachment
from .models_parts.canonical_request import CanonicalRequest
from .models_parts.canonical_result import CanonicalResult
from .models_parts.history_entry import HistoryEntry
from .models_parts.provider_spec import ProviderSpec
from .models_parts.result_status import ResultStatus
from .models_parts.token_usage import TokenUsage

__all__ = [
    "AdapterOutcome",
    "Attachment",
    "CanonicalRequest",
    "CanonicalResult",
    "HistoryEntry",
    "ProviderSpec",
    "ResultStatus",
    "TokenUsage",
]
