"""
Providers Base Package

Exports provider-agnostic contracts, DTOs, repositories, and the provider factory
for use within the providers layer:

- Interfaces: adapter, credential resolver and store boundaries
- Models (DTOs): canonical request/result objects
- Repositories: credential resolution
- Factory: lazy creation of provider adapters by canonical id
"""

from .factory import ProviderFactory, UnknownProviderError
from .interfaces import (
    CredentialResolver,
    CredentialStore,
    HistoryStore,
    ProviderAdapter,
)
from .models import (
    AdapterOutcome,
    Attachment,
    CanonicalRequest,
    CanonicalResult,
    HistoryEntry,
    ProviderSpec,
    ResultStatus,
    TokenUsage,
)
from .repositories.keys import KeyResolution, KeysRepository

__all__ = [
    # Models
    "AdapterOutcome",
    "Attachment",
    "CanonicalRequest",
    "CanonicalResult",
    "HistoryEntry",
    "ProviderSpec",
    "ResultStatus",
    "TokenUsage",
    # Interfaces
    "ProviderAdapter",
    "CredentialResolver",
    "CredentialStore",
    "HistoryStore",
    # Repositories
    "KeysRepository",
    "KeyResolution",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
]
