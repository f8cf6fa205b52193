from __future__ import annotations

import pytest

from cognate_providers.base.staging import StagedFiles
from cognate_providers.tests.utils import make_attachment


@pytest.mark.asyncio
async def test_staged_files_removed_on_exit(tmp_path):
    async with StagedFiles("openai", directory=str(tmp_path)) as staged:
        path = await staged.stage(make_attachment("../../etc/report final.pdf", b"%PDF-x"))
        assert path.read_bytes() == b"%PDF-x"
        assert path.parent == tmp_path
        assert path.name.startswith("cognate-") and path.name.endswith("report_final.pdf")
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_staged_files_removed_when_body_raises(tmp_path):
    with pytest.raises(RuntimeError):
        async with StagedFiles("anthropic", directory=str(tmp_path)) as staged:
            await staged.stage(make_attachment())
            raise RuntimeError("upload failed")
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_cleanup_tolerates_already_deleted_file(tmp_path):
    staged = StagedFiles("openai", directory=str(tmp_path))
    path = await staged.stage(make_attachment())
    path.unlink()
    await staged.cleanup()
    assert staged.paths == []
