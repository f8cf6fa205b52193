"""One-class-per-file canonical DTOs; import from ``cognate_providers.base.models``."""

from .adapter_outcome import AdapterOutcome
from .attachment import Attachment
from .canonical_request import CanonicalRequest
from .canonical_result import CanonicalResult
from .history_entry import HistoryEntry
from .provider_spec import ProviderSpec
from .result_status import ResultStatus
from .token_usage import TokenUsage

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
