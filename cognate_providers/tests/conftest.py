"""Pytest configuration for the providers test suite.

Every test runs with provider credential variables removed and config caches
reset, so results never depend on the developer's shell or ``.env`` file.
"""

from __future__ import annotations

import sqlite3
from typing import Iterator

import pytest

from cognate_providers.base.factory import ProviderFactory
from cognate_providers.config import reset_config_cache
from cognate_providers.persistence.sqlite.engine import create_connection, init_schema

_CREDENTIAL_VARS = (
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "DEEPSEEK_API_KEY",
)
_CONFIG_VARS = (
    "COGNATE_CONFIG_FILE",
    "COGNATE_DB_PATH",
    "OPENAI_MODEL",
    "OPENAI_MAX_TOKENS",
    "ANTHROPIC_MODEL",
    "GOOGLE_MODEL",
    "DEEPSEEK_MODEL",
    "DEEPSEEK_BASE_URL",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Strip credentials and config overrides; point ``.env`` at a missing file."""
    for name in _CREDENTIAL_VARS + _CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def isolated_factory() -> Iterator[type]:
    """A ``ProviderFactory`` subclass whose registrations do not leak."""

    class _Factory(ProviderFactory):
        pass

    yield _Factory


@pytest.fixture()
def db_path(tmp_path) -> str:
    return str(tmp_path / "cognate.db")


@pytest.fixture()
def conn(db_path: str) -> Iterator[sqlite3.Connection]:
    """Fresh SQLite connection with the schema initialized."""
    connection = create_connection(db_path)
    init_schema(connection)
    try:
        yield connection
    finally:
        connection.close()
