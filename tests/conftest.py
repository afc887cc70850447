"""Pytest fixtures for mail-compositor tests."""

from datetime import datetime, timezone
from pathlib import Path

import fitz  # PyMuPDF
import pytest

from mail_compositor.config import CompositorConfig

FIXED_TIME = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def build_pdf(labels: list[str]) -> bytes:
    """Build a PDF with one page per label, each page showing its label."""
    doc = fitz.open()
    for label in labels:
        page = doc.new_page()
        page.insert_text((72, 72), label, fontsize=14)
    data = doc.tobytes()
    doc.close()
    return data


def page_texts(source: bytes | Path) -> list[str]:
    """Extract the text of every page of a PDF given as bytes or a path."""
    if isinstance(source, (bytes, bytearray)):
        doc = fitz.open(stream=source, filetype="pdf")
    else:
        doc = fitz.open(str(source))
    try:
        return [page.get_text() for page in doc]
    finally:
        doc.close()


@pytest.fixture
def make_pdf():
    """Factory building PDF bytes from page labels."""
    return build_pdf


@pytest.fixture
def read_texts():
    """Helper returning per-page text of a PDF (bytes or path)."""
    return page_texts


@pytest.fixture
def fixed_time():
    return FIXED_TIME


@pytest.fixture
def config():
    """Engine configuration with a frozen clock."""
    return CompositorConfig({"clock": lambda: FIXED_TIME})


@pytest.fixture
def body_pdf():
    """A one-page rendered email body."""
    return build_pdf(["body-1"])


@pytest.fixture
def attachment_files(tmp_path):
    """Two attachment PDFs on disk: att1 (2 pages) and att2 (3 pages)."""
    attachments_dir = tmp_path / "attachments"
    attachments_dir.mkdir()

    att1 = attachments_dir / "att1.pdf"
    att1.write_bytes(build_pdf(["att1-1", "att1-2"]))

    att2 = attachments_dir / "att2.pdf"
    att2.write_bytes(build_pdf(["att2-1", "att2-2", "att2-3"]))

    return [att1, att2]


@pytest.fixture
def composite_pdf(tmp_path):
    """A six-page composite (body, att1 x2, att2 x3) named with the merge marker."""
    path = tmp_path / "Quarterly_report_2026-01-15T12-00-00_abcd1234_merged.pdf"
    path.write_bytes(
        build_pdf(["body-1", "att1-1", "att1-2", "att2-1", "att2-2", "att2-3"])
    )
    return path
