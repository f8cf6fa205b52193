"""Token usage and text extraction helpers.

Provider responses name their usage counters differently, and the same
provider sometimes changes names across SDK versions. Each provider therefore
declares an explicit ordered list of attribute paths for the prompt side and
the completion side. The first path that resolves to a non-negative integer
wins; a side with no match defaults to zero.

Paths are dotted strings resolved against SDK objects (attribute access) or
plain mappings (key access), so the same helpers work for real SDK responses
and for dict-shaped test doubles.

Supported Providers
-------------------
openai:
    ``usage.input_tokens`` (Responses API), ``usage.prompt_tokens``
    ``usage.output_tokens``, ``usage.completion_tokens``
anthropic:
    ``usage.input_tokens`` / ``usage.output_tokens``
google:
    ``usage.input_tokens``, ``usage_metadata.prompt_token_count``
    ``usage.output_tokens``, ``usage_metadata.candidates_token_count``
deepseek:
    ``usage.prompt_tokens`` / ``usage.completion_tokens``

The helpers never raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ..models import TokenUsage

_MISSING = object()


@dataclass(frozen=True)
class UsagePaths:
    """Ordered extraction attempts for one provider."""

    prompt: Tuple[str, ...]
    completion: Tuple[str, ...]


USAGE_PATHS: Dict[str, UsagePaths] = {
    "openai": UsagePaths(
        prompt=("usage.input_tokens", "usage.prompt_tokens"),
        completion=("usage.output_tokens", "usage.completion_tokens"),
    ),
    "anthropic": UsagePaths(
        prompt=("usage.input_tokens",),
        completion=("usage.output_tokens",),
    ),
    "google": UsagePaths(
        prompt=("usage.input_tokens", "usage_metadata.prompt_token_count"),
        completion=("usage.output_tokens", "usage_metadata.candidates_token_count"),
    ),
    "deepseek": UsagePaths(
        prompt=("usage.prompt_tokens",),
        completion=("usage.completion_tokens",),
    ),
}


def resolve_path(obj: Any, path: str) -> Any:
    """Resolve a dotted path against attributes or mapping keys.

    Returns ``None`` when any segment is absent.
    """
    current = obj
    for segment in path.split("."):
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(segment, _MISSING)
        else:
            current = getattr(current, segment, _MISSING)
        if current is _MISSING:
            return None
    return current


def _coerce_int(value: Any) -> Optional[int]:
    """Coerce to a non-negative ``int``; booleans and junk become ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        iv = int(value)
    except (TypeError, ValueError):
        return None
    return iv if iv >= 0 else None


def first_int(obj: Any, paths: Iterable[str]) -> int:
    """Return the first non-absent integer found along ``paths`` (default 0)."""
    for path in paths:
        value = _coerce_int(resolve_path(obj, path))
        if value is not None:
            return value
    return 0


def extract_token_usage(provider_id: str, raw_response: Any) -> TokenUsage:
    """Map a raw provider response to :class:`TokenUsage` for ``provider_id``."""
    paths = USAGE_PATHS.get(provider_id)
    if paths is None or raw_response is None:
        return TokenUsage()
    return TokenUsage(
        prompt_tokens=first_int(raw_response, paths.prompt),
        completion_tokens=first_int(raw_response, paths.completion),
    )


def join_text_blocks(blocks: Any) -> str:
    """Concatenate text-typed content segments in order, joined by newline.

    Non-text segments (tool use, thinking, documents) are skipped. Accepts SDK
    block objects or mappings.
    """
    if not isinstance(blocks, (list, tuple)):
        return ""
    parts = []
    for block in blocks:
        if resolve_path(block, "type") != "text":
            continue
        text = resolve_path(block, "text")
        if isinstance(text, str):
            parts.append(text)
    return "\n".join(parts)


__all__ = [
    "UsagePaths",
    "USAGE_PATHS",
    "resolve_path",
    "first_int",
    "extract_token_usage",
    "join_text_blocks",
]
