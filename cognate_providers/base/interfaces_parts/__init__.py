"""Single-class Protocol modules for the providers layer."""

from .credential_resolver import CredentialResolver
from .credential_store import CredentialStore
from .history_store import HistoryStore
from .provider_adapter import ProviderAdapter

__all__ = [
    "ProviderAdapter",
    "CredentialResolver",
    "CredentialStore",
    "HistoryStore",
]
