"""
Normalized provider error codes (taxonomy).

Values are lowercase snake_case and are a stable contract for logging. The
two configuration codes are assigned before any network call is attempted.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    MISSING_CREDENTIAL = "missing_credential"
    UNSUPPORTED_PROVIDER = "unsupported_provider"
    ATTACHMENT_READ = "attachment_read"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
