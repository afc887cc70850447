"""Tests for temporary file cleanup."""

import logging
from pathlib import Path
from unittest.mock import patch

from mail_compositor.cleanup import cleanup_temp_files


def test_removes_files(tmp_path):
    first = tmp_path / "a.pdf"
    second = tmp_path / "b.pdf"
    first.write_bytes(b"a")
    second.write_bytes(b"b")

    removed = cleanup_temp_files([first, second])

    assert removed == [first, second]
    assert not first.exists()
    assert not second.exists()


def test_skips_missing_and_directories(tmp_path):
    directory = tmp_path / "dir"
    directory.mkdir()

    removed = cleanup_temp_files([tmp_path / "missing.pdf", directory])

    assert removed == []
    assert directory.is_dir()


def test_delete_failure_is_logged_not_raised(tmp_path, caplog):
    target = tmp_path / "locked.pdf"
    target.write_bytes(b"x")

    with patch.object(Path, "unlink", side_effect=PermissionError("locked")):
        with caplog.at_level(logging.WARNING):
            removed = cleanup_temp_files([target])

    assert removed == []
    assert target.exists()
    assert "Could not delete temporary file" in caplog.text
