"""Google Gemini provider package (provider id ``google``)."""

from .client import GeminiAdapter

__all__ = ["GeminiAdapter"]
