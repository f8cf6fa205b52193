"""DI container for the providers layer.

Composition root shared by the HTTP service and the CLI.
"""
from __future__ import annotations

from .container import ProvidersContainer

__all__ = ["ProvidersContainer"]
