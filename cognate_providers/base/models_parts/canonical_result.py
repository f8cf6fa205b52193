"""
CanonicalResult DTO: one provider's entry in a dispatch round.

Created ``pending`` when the round starts and finalized exactly once with the
adapter outcome. ``finalize`` returns a new object; the result board swaps it
in by provider id.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from .adapter_outcome import AdapterOutcome
from .result_status import ResultStatus
from .token_usage import TokenUsage


@dataclass(frozen=True)
class CanonicalResult:
    """Provider-agnostic result observed by callers.

    Attributes:
        id: Unique per result; never reused across rounds.
        provider_id: Provider this entry belongs to.
        status: ``pending`` until the adapter resolves, then terminal.
        content: Generated text.
        elapsed_ms: Provider call duration (0 on error).
        token_usage: Prompt/completion counts.
        error_message: Set when status is ``error``.
    """

    id: str
    provider_id: str
    status: ResultStatus = ResultStatus.PENDING
    content: str = ""
    elapsed_ms: int = 0
    token_usage: TokenUsage = field(default_factory=TokenUsage)
    error_message: Optional[str] = None

    @classmethod
    def pending(cls, provider_id: str) -> "CanonicalResult":
        return cls(id=uuid.uuid4().hex, provider_id=provider_id)

    @property
    def is_terminal(self) -> bool:
        return self.status.terminal

    def finalize(self, outcome: AdapterOutcome) -> "CanonicalResult":
        """Return a terminal copy merged with ``outcome`` (id and provider kept)."""
        if self.is_terminal:
            raise ValueError(f"result for '{self.provider_id}' is already {self.status.value}")
        return replace(
            self,
            status=outcome.status,
            content=outcome.content,
            elapsed_ms=outcome.elapsed_ms,
            token_usage=outcome.token_usage,
            error_message=outcome.error_message,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "provider_id": self.provider_id,
            "status": self.status.value,
            "content": self.content,
            "elapsed_ms": self.elapsed_ms,
            "token_usage": self.token_usage.to_dict(),
            "error_message": self.error_message,
        }


__all__ = ["CanonicalResult"]
