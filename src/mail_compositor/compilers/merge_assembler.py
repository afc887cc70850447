"""Merge Assembler for building composites from a body and attachments.

The composite is the body's pages followed by each attachment's pages in the
order the caller listed them. Nothing in the composite records where one
attachment ends and the next begins, so the assembler hands back the
Manifest describing what it actually merged.
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from mail_compositor.config import CompositorConfig
from mail_compositor.exceptions import NotFoundError, ParseError
from mail_compositor.pages import PageSequence, load_pages
from mail_compositor.stores import AttachmentStore
from schemas.attachment import AttachmentDescriptor
from schemas.manifest import AttachmentInfo, Manifest
from schemas.merge import SkippedSource

from .compiler import Compiler

logger = logging.getLogger(__name__)


@dataclass
class MergeOutcome:
    """Result of assembling a composite.

    Attributes:
        pages: The merged (not yet annotated) composite pages
        manifest: Layout of the body and every attachment that made it in
        skipped: Attachments left out because they could not be loaded
    """

    pages: PageSequence
    manifest: Manifest
    skipped: list[SkippedSource] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)


class MergeAssembler(Compiler):
    """Concatenate an email body with its attachments.

    The MergeAssembler:
    1. Loads the body PDF (failure is fatal)
    2. Reads attachment bytes from the store, concurrently when configured
    3. Loads each attachment, skipping any that cannot be read or parsed
    4. Appends body pages, then attachment pages in caller order

    Attributes:
        config: Engine configuration (max_workers, placeholder_name)
    """

    def __init__(self, config: CompositorConfig | None = None):
        self.config = config or CompositorConfig()

    def merge(
        self, body: PageSequence, attachments: Sequence[PageSequence]
    ) -> PageSequence:
        composite = PageSequence.empty(name="composite")
        composite.document.insert_pdf(body.document)
        for pages in attachments:
            composite.document.insert_pdf(pages.document)

        logger.info(
            f"Merged {len(body)} body pages and {len(attachments)} attachments "
            f"into {len(composite)} pages"
        )
        return composite

    def assemble(
        self,
        body_data: bytes,
        attachments: Sequence[AttachmentDescriptor],
        store: AttachmentStore,
    ) -> MergeOutcome:
        """Load the body and attachments and merge them.

        Args:
            body_data: PDF bytes of the rendered message body
            attachments: Attachments in merge order
            store: Store resolving attachment source references

        Returns:
            MergeOutcome with the composite pages, manifest, and skipped sources

        Raises:
            ParseError: If the body is not a valid PDF
        """
        body = load_pages(body_data, name="email body")
        loaded: list[tuple[AttachmentDescriptor, PageSequence]] = []
        skipped: list[SkippedSource] = []

        try:
            for descriptor, data, error in self._read_sources(attachments, store):
                if error is None:
                    try:
                        pages = load_pages(data, name=descriptor.original_name)
                    except ParseError as e:
                        error = e.message
                    else:
                        self._check_expected_count(descriptor, pages)
                        loaded.append((descriptor, pages))
                        continue

                logger.warning(
                    f"Skipping attachment {descriptor.original_name}: {error}"
                )
                skipped.append(
                    SkippedSource(
                        original_name=descriptor.original_name,
                        source_ref=str(descriptor.source_ref),
                        reason=error,
                    )
                )

            composite = self.merge(body, [pages for _, pages in loaded])
            manifest = Manifest(
                email_page_count=len(body),
                attachment_info=[
                    AttachmentInfo(
                        original_name=descriptor.original_name
                        or self.config.placeholder_name,
                        page_count=len(pages),
                    )
                    for descriptor, pages in loaded
                ],
            )
        finally:
            body.close()
            for _, pages in loaded:
                pages.close()

        return MergeOutcome(pages=composite, manifest=manifest, skipped=skipped)

    def _read_sources(
        self,
        attachments: Sequence[AttachmentDescriptor],
        store: AttachmentStore,
    ) -> list[tuple[AttachmentDescriptor, bytes | None, str | None]]:
        """Read attachment bytes, keeping caller order.

        Reads run on a bounded thread pool; parsing stays on the calling
        thread because PyMuPDF documents are not thread-safe.

        Returns:
            (descriptor, data, error) triples; error is None on success
        """
        if not attachments:
            return []

        workers = min(self.config.max_workers, len(attachments))
        results = []
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(store.read, descriptor.source_ref)
                for descriptor in attachments
            ]
            for descriptor, future in zip(attachments, futures):
                try:
                    results.append((descriptor, future.result(), None))
                except NotFoundError as e:
                    results.append((descriptor, None, e.message))
                except OSError as e:
                    results.append((descriptor, None, f"read failed: {e}"))
        return results

    def _check_expected_count(
        self, descriptor: AttachmentDescriptor, pages: PageSequence
    ) -> None:
        if descriptor.page_count is not None and descriptor.page_count != len(pages):
            logger.warning(
                f"Attachment {descriptor.original_name} expected "
                f"{descriptor.page_count} pages, loaded {len(pages)}"
            )
