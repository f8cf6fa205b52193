"""
TokenUsage DTO: prompt/completion token counts reported by a provider.

Counts default to zero when the provider response omits them.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class TokenUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["TokenUsage"]
