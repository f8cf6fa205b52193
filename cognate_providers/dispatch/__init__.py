"""Prompt dispatch: single-provider calls and concurrent multi-provider rounds."""

from .board import ResultBoard
from .dispatcher import Dispatcher, DispatchRound
from .send import send_prompt
from .session import PromptSession

__all__ = [
    "Dispatcher",
    "DispatchRound",
    "PromptSession",
    "ResultBoard",
    "send_prompt",
]
