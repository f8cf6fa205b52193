"""Persistence interfaces package.

Defines repository protocols for API keys and prompt history, plus a Unit of
Work abstraction. Concrete implementations live under ``persistence/sqlite``.
"""

from .repos import (  # noqa: F401
    IHistoryRepo,
    IKeyStoreRepo,
    IUnitOfWork,
)
