"""Tests for attachment stores."""

import pytest

from mail_compositor.exceptions import NotFoundError
from mail_compositor.stores import AttachmentStore, FileAttachmentStore


class TestFileAttachmentStore:
    """Tests for FileAttachmentStore."""

    def test_is_attachment_store(self):
        assert isinstance(FileAttachmentStore(), AttachmentStore)

    def test_read_absolute(self, tmp_path):
        path = tmp_path / "a.pdf"
        path.write_bytes(b"%PDF-data")

        assert FileAttachmentStore().read(str(path)) == b"%PDF-data"

    def test_read_relative_to_root(self, tmp_path):
        (tmp_path / "a.pdf").write_bytes(b"data")

        store = FileAttachmentStore(tmp_path)

        assert store.read("a.pdf") == b"data"
        assert store.local_path("a.pdf") == tmp_path / "a.pdf"

    def test_sources_not_transient_by_default(self, tmp_path):
        """Caller files are never offered for deletion by default."""
        assert FileAttachmentStore(tmp_path).transient_path("a.pdf") is None

    def test_transient_sources(self, tmp_path):
        store = FileAttachmentStore(tmp_path, transient=True)

        assert store.transient_path("a.pdf") == tmp_path / "a.pdf"

    def test_missing(self, tmp_path):
        with pytest.raises(NotFoundError) as exc_info:
            FileAttachmentStore(tmp_path).read("missing.pdf")

        assert exc_info.value.path == str(tmp_path / "missing.pdf")


def test_default_transient_path_is_none():
    """Stores report no deletable source unless they opt in."""

    class MemoryStore(AttachmentStore):
        def read(self, source_ref):
            return b""

    assert MemoryStore().transient_path("anything") is None
