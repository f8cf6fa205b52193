"""Anthropic provider package."""

from .client import AnthropicAdapter

__all__ = ["AnthropicAdapter"]
