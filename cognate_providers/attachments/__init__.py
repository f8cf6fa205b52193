"""Attachment encoder: accept PDFs and hold them until the next round."""

from ..base.utils.documents import is_pdf
from .attachment_set import AttachmentSet
from .blob import FileBlob

__all__ = ["AttachmentSet", "FileBlob", "is_pdf"]
