"""
OpenAI provider package.

Exports:
- OpenAIAdapter: Responses API adapter with uploaded-file references
"""

from .client import OpenAIAdapter

__all__ = ["OpenAIAdapter"]
