"""FileBlob: a user-supplied file awaiting acceptance.

The reader is a zero-argument callable returning the full payload; it runs on
a worker thread so large files never block the event loop.
"""
from __future__ import annotations

import mimetypes
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Union


@dataclass(frozen=True)
class FileBlob:
    """Name, declared mime type and a deferred reader for one file."""

    name: str
    mime_type: str
    reader: Callable[[], bytes] = field(repr=False)

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike]) -> "FileBlob":
        p = Path(path)
        guessed, _ = mimetypes.guess_type(p.name)
        return cls(name=p.name, mime_type=guessed or "", reader=p.read_bytes)

    @classmethod
    def from_bytes(cls, name: str, data: bytes, mime_type: str = "") -> "FileBlob":
        payload = bytes(data)
        return cls(name=name, mime_type=mime_type or "", reader=lambda: payload)

    def read(self) -> bytes:
        return self.reader()


__all__ = ["FileBlob"]
