"""AttachmentSet acceptance, read failures and removal semantics."""
from __future__ import annotations

import pytest

from cognate_providers.attachments import AttachmentSet, FileBlob, is_pdf
from cognate_providers.base.errors import AttachmentReadError


def _failing_reader() -> bytes:
    raise OSError("permission denied")


def test_is_pdf_accepts_mime_or_suffix():
    assert is_pdf("report.bin", "application/pdf")
    assert is_pdf("REPORT.PDF", "")
    assert is_pdf("notes.pdf", "text/plain")
    assert not is_pdf("image.png", "image/png")
    assert not is_pdf(None, None)


@pytest.mark.asyncio
async def test_non_pdf_files_are_dropped_silently():
    pending = AttachmentSet()
    added = await pending.add_attachments(
        [
            FileBlob.from_bytes("a.pdf", b"%PDF-a", "application/pdf"),
            FileBlob.from_bytes("b.png", b"\x89PNG", "image/png"),
            FileBlob.from_bytes("c.txt", b"text", "text/plain"),
        ]
    )
    assert [a.name for a in added] == ["a.pdf"]
    assert pending.names() == ["a.pdf"]
    assert added[0].size == len(b"%PDF-a")


@pytest.mark.asyncio
async def test_blank_mime_is_recorded_as_pdf():
    pending = AttachmentSet()
    (att,) = await pending.add_attachments([FileBlob.from_bytes("scan.pdf", b"%PDF", "")])
    assert att.mime_type == "application/pdf"


@pytest.mark.asyncio
async def test_read_failure_keeps_readable_files():
    pending = AttachmentSet()
    files = [
        FileBlob.from_bytes("ok.pdf", b"%PDF-ok", "application/pdf"),
        FileBlob(name="broken.pdf", mime_type="application/pdf", reader=_failing_reader),
    ]
    with pytest.raises(AttachmentReadError) as info:
        await pending.add_attachments(files)
    assert list(info.value.failures) == ["broken.pdf"]
    assert [a.name for a in info.value.added] == ["ok.pdf"]
    assert pending.names() == ["ok.pdf"]


@pytest.mark.asyncio
async def test_reader_error_does_not_stop_later_files():
    def _corrupt_stream() -> bytes:
        raise ValueError("bad stream")

    pending = AttachmentSet()
    files = [
        FileBlob(name="a.pdf", mime_type="application/pdf", reader=_corrupt_stream),
        FileBlob.from_bytes("b.pdf", b"%PDF-b", "application/pdf"),
    ]
    with pytest.raises(AttachmentReadError) as info:
        await pending.add_attachments(files)
    assert info.value.failures == {"a.pdf": "bad stream"}
    assert pending.names() == ["b.pdf"]


@pytest.mark.asyncio
async def test_from_path_reads_file_contents(tmp_path):
    path = tmp_path / "paper.pdf"
    path.write_bytes(b"%PDF-1.7 body")
    pending = AttachmentSet()
    (att,) = await pending.add_attachments([FileBlob.from_path(path)])
    assert att.data == b"%PDF-1.7 body"
    assert att.mime_type == "application/pdf"


@pytest.mark.asyncio
async def test_missing_path_is_reported(tmp_path):
    pending = AttachmentSet()
    with pytest.raises(AttachmentReadError):
        await pending.add_attachments([FileBlob.from_path(tmp_path / "gone.pdf")])
    assert len(pending) == 0


@pytest.mark.asyncio
async def test_remove_and_clear_are_idempotent():
    pending = AttachmentSet()
    a, b = await pending.add_attachments(
        [FileBlob.from_bytes("a.pdf", b"1"), FileBlob.from_bytes("b.pdf", b"2")]
    )
    assert a.id != b.id

    pending.remove_attachment(a.id)
    pending.remove_attachment(a.id)
    assert pending.names() == ["b.pdf"]

    pending.clear_attachments()
    pending.clear_attachments()
    assert pending.snapshot() == ()
