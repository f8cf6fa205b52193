"""
Attachment DTO: a normalized user-supplied document.

The payload is immutable once created (``bytes`` inside a frozen dataclass).
``to_dict`` omits the raw payload to keep logs and API listings small.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Attachment:
    """A document queued for the next dispatch round.

    Attributes:
        id: Unique identifier (uuid4 hex string).
        name: Original file name.
        mime_type: Declared mime type (``application/pdf`` when unknown).
        size: Payload size in bytes.
        data: Raw file bytes.
    """

    id: str
    name: str
    mime_type: str
    size: int
    data: bytes = field(repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "mime_type": self.mime_type, "size": self.size}


__all__ = ["Attachment"]
