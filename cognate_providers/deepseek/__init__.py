"""DeepSeek provider package (OpenAI-compatible chat completions)."""

from .client import DeepSeekAdapter

__all__ = ["DeepSeekAdapter"]
