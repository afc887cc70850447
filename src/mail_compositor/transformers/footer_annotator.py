"""Footer Annotator for stamping pagination onto page sequences.

Stamps a centered footer, ``Page {i} of {N} | Generated: {timestamp}``, at the
bottom of every page using PyMuPDF text insertion. The annotator works on a
copy: the sequence passed in keeps its pages untouched.

Annotation is not idempotent. Running it twice on the same pages stacks a
second footer on top of the first; callers annotate each artifact exactly once
(the composite after merge, and each split output).
"""

import logging
from datetime import datetime, timezone

import fitz  # PyMuPDF

from mail_compositor.config import CompositorConfig
from mail_compositor.pages import PageSequence

from .transformer import PageTransformer

logger = logging.getLogger(__name__)

FOOTER_TEMPLATE = "Page {index} of {total} | Generated: {timestamp}"
FOOTER_COLOR = (0.25, 0.25, 0.25)


def footer_text(index: int, total: int, timestamp: str) -> str:
    return FOOTER_TEMPLATE.format(index=index, total=total, timestamp=timestamp)


class FooterAnnotator(PageTransformer):
    """Stamp "Page i of N" footers with a generation timestamp.

    Attributes:
        config: Engine configuration (font size, margin, timestamp format, clock)
    """

    def __init__(self, config: CompositorConfig | None = None):
        self.config = config or CompositorConfig()

    def transform(self, pages: PageSequence) -> PageSequence:
        return self.annotate(pages)

    def annotate(
        self, pages: PageSequence, generated_at: datetime | None = None
    ) -> PageSequence:
        """Return a copy of ``pages`` with a footer on every page.

        Args:
            pages: Sequence to annotate (left unchanged)
            generated_at: Timestamp to print (default: the configured clock)

        Returns:
            A new PageSequence carrying the footers
        """
        timestamp = self.format_timestamp(generated_at or self.config.clock())
        stamped = pages.copy()
        total = len(stamped)

        for index, page in enumerate(stamped.document, start=1):
            self._stamp_page(page, footer_text(index, total, timestamp))

        logger.debug(f"Stamped footers on {total} pages of {pages.name}")
        return stamped

    def format_timestamp(self, generated_at: datetime) -> str:
        """Format a timestamp in UTC; naive datetimes are taken to be UTC."""
        if generated_at.tzinfo is None:
            generated_at = generated_at.replace(tzinfo=timezone.utc)
        else:
            generated_at = generated_at.astimezone(timezone.utc)
        return generated_at.strftime(self.config.timestamp_format)

    def _stamp_page(self, page: fitz.Page, text: str) -> None:
        """Insert the footer text centered near the bottom edge of a page."""
        size = self.config.footer_font_size
        margin = self.config.footer_margin
        rect = page.rect

        box = fitz.Rect(
            rect.x0 + margin,
            rect.y1 - margin - 2 * size,
            rect.x1 - margin,
            rect.y1 - margin + size,
        )
        overflow = page.insert_textbox(
            box,
            text,
            fontsize=size,
            fontname="helv",
            color=FOOTER_COLOR,
            align=fitz.TEXT_ALIGN_CENTER,
            overlay=True,
        )
        if overflow < 0:
            # Page narrower than the footer: print it left-aligned instead.
            logger.debug(f"Footer does not fit page {page.number}, writing unboxed")
            page.insert_text(
                (rect.x0 + 2, rect.y1 - margin),
                text,
                fontsize=size,
                fontname="helv",
                color=FOOTER_COLOR,
                overlay=True,
            )
