"""Pending attachment set for the next dispatch round.

Only PDFs are accepted (mime type ``application/pdf`` or a ``.pdf`` suffix);
everything else is dropped without error. Accepted files are read one at a
time. A read failure rejects only that file: the others are still appended,
then :class:`AttachmentReadError` reports the failed names.
"""
from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Iterable, List, Tuple

from ..base.errors import AttachmentReadError
from ..base.logging import get_logger, log_event
from ..base.models import Attachment
from ..base.utils.documents import is_pdf
from ..config.defaults import ACCEPTED_MIME_TYPE
from .blob import FileBlob

_logger = get_logger("attachments")


class AttachmentSet:
    """Ordered, mutable collection of :class:`Attachment` values."""

    def __init__(self) -> None:
        self._items: List[Attachment] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(tuple(self._items))

    async def add_attachments(self, files: Iterable[FileBlob]) -> List[Attachment]:
        """Read and append every PDF in ``files``; return the appended entries.

        Raises:
            AttachmentReadError: when at least one accepted file could not be
                read. Successfully read files are appended before raising.
        """
        added: List[Attachment] = []
        failures = {}
        for blob in files:
            if not is_pdf(blob.name, blob.mime_type):
                continue
            try:
                data = await asyncio.to_thread(blob.read)
            except Exception as exc:
                failures[blob.name] = str(exc)
                continue
            attachment = Attachment(
                id=uuid.uuid4().hex,
                name=blob.name,
                mime_type=(blob.mime_type or "").strip() or ACCEPTED_MIME_TYPE,
                size=len(data),
                data=data,
            )
            self._items.append(attachment)
            added.append(attachment)
        if failures:
            log_event(
                _logger,
                "attachments.rejected",
                level=logging.WARNING,
                failed=sorted(failures),
                added=len(added),
            )
            raise AttachmentReadError(failures, added)
        return added

    def remove_attachment(self, attachment_id: str) -> None:
        self._items = [a for a in self._items if a.id != attachment_id]

    def clear_attachments(self) -> None:
        self._items = []

    def snapshot(self) -> Tuple[Attachment, ...]:
        return tuple(self._items)

    def names(self) -> List[str]:
        return [a.name for a in self._items]


__all__ = ["AttachmentSet"]
