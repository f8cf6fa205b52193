"""
AdapterOutcome DTO: what a provider adapter returns for one call.

Adapters never raise; every path ends in one of the two constructors below.
A failure always reports ``elapsed_ms == 0`` because error timing is not
meaningful to callers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .result_status import ResultStatus
from .token_usage import TokenUsage


@dataclass(frozen=True)
class AdapterOutcome:
    """Terminal result of one adapter invocation.

    Attributes:
        status: ``success`` or ``error`` (never ``pending``).
        content: Extracted plain text (empty on error).
        elapsed_ms: Wall time of the provider call in milliseconds.
        token_usage: Prompt/completion counts.
        error_message: Human-readable failure message when status is error.
    """

    status: ResultStatus
    content: str = ""
    elapsed_ms: int = 0
    token_usage: TokenUsage = field(default_factory=TokenUsage)
    error_message: Optional[str] = None

    @classmethod
    def success(cls, content: str, elapsed_ms: int, token_usage: Optional[TokenUsage] = None) -> "AdapterOutcome":
        return cls(
            status=ResultStatus.SUCCESS,
            content=content,
            elapsed_ms=max(0, int(elapsed_ms)),
            token_usage=token_usage or TokenUsage(),
        )

    @classmethod
    def failure(cls, message: str) -> "AdapterOutcome":
        return cls(status=ResultStatus.ERROR, elapsed_ms=0, error_message=message)

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "content": self.content,
            "elapsed_ms": self.elapsed_ms,
            "token_usage": self.token_usage.to_dict(),
            "error_message": self.error_message,
        }


__all__ = ["AdapterOutcome"]
