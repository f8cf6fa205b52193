"""Public re-exports for SQLite repository adapters and Unit of Work."""

from .history_repo import HistoryRepoSqlite
from .keystore_repo import KeyStoreRepoSqlite
from .unit_of_work import UnitOfWorkSqlite

__all__ = [
    "KeyStoreRepoSqlite",
    "HistoryRepoSqlite",
    "UnitOfWorkSqlite",
]
