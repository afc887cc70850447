"""Split Planner for mapping composite pages back to logical units.

Given a composite's page count and a manifest, produces disjoint, contiguous
page ranges in composite order: the email first, then one range per
attachment.

When the manifest lists no attachments the planner falls back to
auto-detection, assigning every page after the email to a single attachment
under a placeholder name. This is a lossy guess; boundaries between several
attachments cannot be recovered without the manifest produced at merge time.
"""

import logging

from mail_compositor.config import CompositorConfig
from schemas.manifest import AttachmentInfo, Manifest
from schemas.split import PageRange, PlannedRange

logger = logging.getLogger(__name__)


class SplitPlanner:
    """Plan page ranges for splitting a composite.

    Attributes:
        config: Engine configuration (placeholder_name)
    """

    def __init__(self, config: CompositorConfig | None = None):
        self.config = config or CompositorConfig()

    def plan(self, total_pages: int, manifest: Manifest) -> list[PlannedRange]:
        """Compute one page range per logical unit.

        Args:
            total_pages: Page count of the composite
            manifest: Validated manifest (empty attachment_info selects auto-detection)

        Returns:
            PlannedRanges in composite order; empty ranges are never emitted
        """
        if total_pages < 0:
            raise ValueError(f"total_pages must be >= 0, got {total_pages}")

        if manifest.is_auto_detect:
            manifest = self.infer_manifest(total_pages, manifest.email_page_count)

        email_end = min(manifest.email_page_count, total_pages)
        if manifest.email_page_count > total_pages:
            logger.warning(
                f"Manifest claims {manifest.email_page_count} email pages but the "
                f"composite has {total_pages}; clipping"
            )

        ranges: list[PlannedRange] = []
        if email_end > 0:
            ranges.append(
                PlannedRange(kind="email", page_range=PageRange(start=0, end=email_end))
            )

        cursor = email_end
        for index, attachment in enumerate(manifest.attachment_info):
            if cursor >= total_pages:
                dropped = len(manifest.attachment_info) - index
                logger.warning(
                    f"Composite exhausted at page {total_pages}; "
                    f"dropping {dropped} manifest entries"
                )
                break

            end = min(cursor + attachment.page_count, total_pages)
            ranges.append(
                PlannedRange(
                    kind="attachment",
                    original_name=attachment.original_name,
                    page_range=PageRange(start=cursor, end=end),
                )
            )
            cursor = end

        if cursor < total_pages and ranges:
            logger.warning(
                f"Manifest covers {cursor} of {total_pages} pages; "
                f"{total_pages - cursor} trailing pages are not assigned"
            )

        logger.debug(
            "Planned ranges: " + ", ".join(f"{r.kind} {r.page_range}" for r in ranges)
        )
        return ranges

    def infer_manifest(self, total_pages: int, email_page_count: int) -> Manifest:
        """Build the auto-detect manifest: one attachment for all remaining pages.

        Args:
            total_pages: Page count of the composite
            email_page_count: Pages assumed to belong to the email

        Returns:
            Manifest with at most one placeholder attachment
        """
        remaining = total_pages - email_page_count
        attachment_info = []
        if remaining > 0:
            logger.warning(
                f"No attachment layout supplied; assuming one attachment of "
                f"{remaining} pages"
            )
            attachment_info.append(
                AttachmentInfo(
                    original_name=self.config.placeholder_name, page_count=remaining
                )
            )
        return Manifest(
            email_page_count=email_page_count, attachment_info=attachment_info
        )
