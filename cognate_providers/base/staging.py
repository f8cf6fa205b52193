"""Scoped temporary files for upload-then-reference adapters.

Providers with a file upload endpoint need the attachment on disk first. An
adapter opens one :class:`StagedFiles` scope per invocation; every file staged
inside it is deleted when the scope exits, whether the call succeeded, failed
or returned early. Deleting a file is best effort: an ``OSError`` there is
logged and never replaces the primary result or error.

Usage::

    async with StagedFiles(provider_id="openai") as staged:
        path = await staged.stage(attachment)
        file_id = await upload(path)

File writes and deletes run on a worker thread via ``asyncio.to_thread`` so the
event loop keeps serving other providers while disk I/O happens.
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
import tempfile
from pathlib import Path
from types import TracebackType
from typing import List, Optional, Type

from ..config.defaults import TEMP_FILE_PREFIX
from .logging import LogContext, get_logger, normalized_log_event
from .models import Attachment

_UNSAFE_NAME = re.compile(r"[^A-Za-z0-9._-]+")


def _safe_name(name: str) -> str:
    cleaned = _UNSAFE_NAME.sub("_", os.path.basename(name or "")).strip("._")
    return cleaned or "attachment.pdf"


def _write_temp(prefix: str, suffix_name: str, data: bytes, directory: Optional[str]) -> Path:
    fd, raw_path = tempfile.mkstemp(prefix=prefix, suffix=f"-{suffix_name}", dir=directory)
    with os.fdopen(fd, "wb") as fh:
        fh.write(data)
    return Path(raw_path)


class StagedFiles:
    """Async context manager owning the temp files of one adapter invocation."""

    def __init__(self, provider_id: str, *, directory: Optional[str] = None) -> None:
        self._provider_id = provider_id
        self._directory = directory
        self._paths: List[Path] = []
        self._logger = get_logger(f"providers.{provider_id}")

    @property
    def paths(self) -> List[Path]:
        return list(self._paths)

    async def stage(self, attachment: Attachment) -> Path:
        """Write ``attachment`` bytes to a new temp file and track it for cleanup."""
        path = await asyncio.to_thread(
            _write_temp, TEMP_FILE_PREFIX, _safe_name(attachment.name), attachment.data, self._directory
        )
        self._paths.append(path)
        return path

    async def cleanup(self) -> None:
        """Delete every staged file, logging (not raising) individual failures."""
        paths, self._paths = self._paths, []
        for path in paths:
            try:
                await asyncio.to_thread(os.unlink, path)
            except FileNotFoundError:
                continue
            except OSError as exc:
                normalized_log_event(
                    self._logger,
                    "cleanup.error",
                    LogContext(provider=self._provider_id),
                    phase="cleanup",
                    level=logging.DEBUG,
                    path=str(path),
                    error=str(exc),
                )

    async def __aenter__(self) -> "StagedFiles":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.cleanup()


__all__ = ["StagedFiles"]
