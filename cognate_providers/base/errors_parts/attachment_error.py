"""Attachment read failure raised by ``AttachmentSet.add_attachments``."""
from __future__ import annotations

from typing import Dict, List, Sequence, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..models_parts.attachment import Attachment


class AttachmentReadError(Exception):
    """One or more accepted files could not be read.

    Files that were read successfully in the same call have already been added
    to the pending set; they are exposed on ``added``.

    Attributes:
        failures: Mapping of file name to the read error message.
        added: Attachments appended by the same call.
    """

    def __init__(self, failures: Dict[str, str], added: Sequence["Attachment"] = ()) -> None:
        self.failures = dict(failures)
        self.added: List["Attachment"] = list(added)
        names = ", ".join(sorted(self.failures))
        super().__init__(f"Failed to read attachment(s): {names}")


__all__ = ["AttachmentReadError"]
