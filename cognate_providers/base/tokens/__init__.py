"""Token usage and text extraction helpers."""

from .extraction import (
    USAGE_PATHS,
    UsagePaths,
    extract_token_usage,
    first_int,
    join_text_blocks,
    resolve_path,
)

__all__ = [
    "USAGE_PATHS",
    "UsagePaths",
    "extract_token_usage",
    "first_int",
    "join_text_blocks",
    "resolve_path",
]
