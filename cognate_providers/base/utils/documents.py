"""Document type checks shared by the attachment encoder and the adapters."""

from __future__ import annotations

from ...config.defaults import ACCEPTED_EXTENSION, ACCEPTED_MIME_TYPE


def is_pdf(name: str | None, mime_type: str | None) -> bool:
    """Return True when the declared mime type OR the file suffix says PDF.

    Either signal is sufficient; the suffix check is case-insensitive.
    """
    if (mime_type or "").strip().lower() == ACCEPTED_MIME_TYPE:
        return True
    return (name or "").strip().lower().endswith(ACCEPTED_EXTENSION)


__all__ = ["is_pdf"]
