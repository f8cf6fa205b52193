"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports Protocols split into single-class modules under
``cognate_providers.base.interfaces_parts`` while keeping imports stable for
upstream code.
"""

from __future__ import annotations

from .interfaces_parts import (
    CredentialResolver,
    CredentialStore,
    HistoryStore,
    ProviderAdapter,
)

__all__ = [
    "ProviderAdapter",
    "CredentialResolver",
    "CredentialStore",
    "HistoryStore",
]
