"""Lifecycle states of a canonical result."""
from __future__ import annotations

from enum import Enum


class ResultStatus(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"

    @property
    def terminal(self) -> bool:
        return self is not ResultStatus.PENDING


__all__ = ["ResultStatus"]
