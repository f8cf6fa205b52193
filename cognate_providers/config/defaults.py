"""cognate_providers.config.defaults
=================================

Central place for small, stable default values used across the
cognate_providers package and the lightweight service layer. These defaults
can be overridden via environment variables or external configuration, but
provide sensible fallbacks for local development and tests.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep adapters, the dispatcher and the service layer free of magic literals.

This module intentionally avoids importing from other provider packages to
prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Service / HTTP layer ----

# Comma-separated list of allowed origins for the dev server.
PROVIDER_SERVICE_CORS_DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


# ---- Provider catalog ----
# Known provider identifiers in catalog order. Credential writes for any other
# identifier are ignored.
KNOWN_PROVIDERS = ("openai", "anthropic", "google", "deepseek")

# Default output token budget applied to every catalog entry.
DEFAULT_MAX_TOKENS = 8192


# ---- Provider-specific sane defaults ----
# OpenAI defaults (SDK uses api.openai.com when base_url omitted).
OPENAI_DEFAULT_MODEL = "gpt-5"

# Anthropic defaults
ANTHROPIC_DEFAULT_MODEL = "claude-opus-4-1-20250805"
# Beta flag required by the Anthropic Files API.
ANTHROPIC_FILES_BETA = "files-api-2025-04-14"

# Google Gemini defaults
GEMINI_DEFAULT_MODEL = "gemini-2.5-pro"

# Deepseek defaults (OpenAI-compatible endpoint)
DEEPSEEK_DEFAULT_MODEL = "deepseek-chat"
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com"


# ---- Attachments ----
ACCEPTED_MIME_TYPE = "application/pdf"
ACCEPTED_EXTENSION = ".pdf"
# Instruction sent when attachments are present but the prompt is empty.
DEFAULT_ATTACHMENT_INSTRUCTION = "Analyze the attached PDFs."
# Prefix for staged upload files in the system temp directory.
TEMP_FILE_PREFIX = "cognate-"


# ---- Errors ----
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


# ---- History ----
HISTORY_MAX_ENTRIES = 500


# ---- SQLite config (infrastructure) ----
# Standard busy timeout to mitigate lock contention (milliseconds).
SQLITE_BUSY_TIMEOUT_MS = 5000
# Journal and sync mode optimized for local development and light concurrency.
SQLITE_JOURNAL_MODE = "WAL"
SQLITE_SYNCHRONOUS = "NORMAL"
# Database location; COGNATE_DB_PATH overrides it.
SQLITE_DEFAULT_DB_PATH = "~/.cognate/cognate.db"


__all__ = [
    # Service
    "PROVIDER_SERVICE_CORS_DEFAULT_ORIGINS",
    # Catalog
    "KNOWN_PROVIDERS",
    "DEFAULT_MAX_TOKENS",
    # Provider defaults
    "OPENAI_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_FILES_BETA",
    "GEMINI_DEFAULT_MODEL",
    "DEEPSEEK_DEFAULT_MODEL",
    "DEEPSEEK_DEFAULT_BASE_URL",
    # Attachments
    "ACCEPTED_MIME_TYPE",
    "ACCEPTED_EXTENSION",
    "DEFAULT_ATTACHMENT_INSTRUCTION",
    "TEMP_FILE_PREFIX",
    # Errors
    "UNEXPECTED_ERROR_MESSAGE",
    # History
    "HISTORY_MAX_ENTRIES",
    # SQLite
    "SQLITE_BUSY_TIMEOUT_MS",
    "SQLITE_JOURNAL_MODE",
    "SQLITE_SYNCHRONOUS",
    "SQLITE_DEFAULT_DB_PATH",
]
