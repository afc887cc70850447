"""Page sequences backed by PyMuPDF documents.

The engine never looks inside a page. A PageSequence is an ordered run of
opaque PDF pages; every operation that changes the run (slicing, copying,
stamping) produces a new sequence with its own document, so no two components
share pages.
"""

import logging
from pathlib import Path

import fitz  # PyMuPDF

from .exceptions import NotFoundError, ParseError

logger = logging.getLogger(__name__)


class PageSequence:
    """An ordered, exclusively owned run of PDF pages.

    Attributes:
        name: Human-readable label used in logs and errors
    """

    def __init__(self, document: fitz.Document, name: str = "document"):
        self._document = document
        self.name = name

    def __repr__(self) -> str:
        return f"PageSequence({self.name!r}, pages={len(self)})"

    def __len__(self) -> int:
        return self._document.page_count

    @property
    def page_count(self) -> int:
        return len(self)

    @property
    def document(self) -> fitz.Document:
        """The underlying PyMuPDF document."""
        return self._document

    @classmethod
    def empty(cls, name: str = "document") -> "PageSequence":
        return cls(fitz.open(), name=name)

    def slice(self, start: int, end: int) -> "PageSequence":
        """Copy pages [start, end) into a new sequence.

        Args:
            start: First page index (inclusive)
            end: Last page index (exclusive)

        Returns:
            A new PageSequence holding copies of the selected pages

        Raises:
            ValueError: If the range falls outside this sequence
        """
        if not 0 <= start <= end <= len(self):
            raise ValueError(
                f"range [{start}, {end}) is outside {self.name} ({len(self)} pages)"
            )

        document = fitz.open()
        if end > start:
            document.insert_pdf(self._document, from_page=start, to_page=end - 1)
        return PageSequence(document, name=f"{self.name}[{start}:{end}]")

    def copy(self) -> "PageSequence":
        """Return an independent copy of the whole sequence."""
        document = fitz.open(stream=self._document.tobytes(), filetype="pdf")
        return PageSequence(document, name=self.name)

    def to_bytes(self) -> bytes:
        """Serialize the sequence as a compacted PDF."""
        return self._document.tobytes(garbage=3, deflate=True)

    def close(self) -> None:
        if not self._document.is_closed:
            self._document.close()

    def __enter__(self) -> "PageSequence":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def load_pages(data: bytes, name: str = "document") -> PageSequence:
    """Load PDF bytes as a page sequence.

    Args:
        data: Raw PDF bytes
        name: Label for logs and errors (usually the source filename)

    Returns:
        PageSequence with the document's pages

    Raises:
        ParseError: If the bytes are empty, not a PDF, encrypted, or have no pages
    """
    if not data:
        raise ParseError(f"{name} is empty", source=name)

    try:
        document = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise ParseError(f"{name} is not a valid PDF: {e}", source=name) from e

    if document.needs_pass:
        document.close()
        raise ParseError(f"{name} is password protected", source=name)

    if document.page_count == 0:
        document.close()
        raise ParseError(f"{name} has no pages", source=name)

    logger.debug(f"Loaded {name} with {document.page_count} pages")
    return PageSequence(document, name=name)


def load_pdf_file(path: Path) -> PageSequence:
    """Load a PDF file from disk as a page sequence.

    Raises:
        NotFoundError: If the file does not exist
        ParseError: If the file is not a valid PDF
    """
    path = Path(path)
    if not path.is_file():
        raise NotFoundError(f"PDF file not found: {path}", path=str(path))
    return load_pages(path.read_bytes(), name=path.name)
