"""Orchestrator for end-to-end compose and split runs.

Wires the merge assembler, footer annotator, manifest validator, split
planner, and disassembler together. The orchestrator holds no per-request
state: caller context travels in an explicit RequestContext argument.
"""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from mail_compositor.cleanup import cleanup_temp_files
from mail_compositor.compilers import MergeAssembler
from mail_compositor.config import CompositorConfig
from mail_compositor.disassemblers import Disassembler
from mail_compositor.exceptions import PersistenceError
from mail_compositor.pages import load_pdf_file
from mail_compositor.planners import SplitPlanner
from mail_compositor.renderers import Renderer
from mail_compositor.stores import AttachmentStore
from mail_compositor.transformers import FooterAnnotator
from mail_compositor.validators import ManifestValidator, validate_filename
from schemas.attachment import AttachmentDescriptor
from schemas.context import RequestContext
from schemas.manifest import Manifest
from schemas.merge import ComposeResult
from schemas.split import SplitAnalysis, SplitResult

logger = logging.getLogger(__name__)


class Orchestrator:
    """Compose messages into composites and split composites apart.

    Attributes:
        config: Engine configuration shared by all components
        assembler: MergeAssembler building composites
        annotator: FooterAnnotator stamping composites
        validator: ManifestValidator checking caller manifests
        planner: SplitPlanner computing page ranges
        disassembler: Disassembler writing split outputs
    """

    def __init__(self, config: CompositorConfig | None = None):
        self.config = config or CompositorConfig()
        self.assembler = MergeAssembler(self.config)
        self.annotator = FooterAnnotator(self.config)
        self.validator = ManifestValidator(self.config)
        self.planner = SplitPlanner(self.config)
        self.disassembler = Disassembler(self.config, self.annotator)

    def compose(
        self,
        context: RequestContext,
        body_data: bytes,
        attachments: Sequence[AttachmentDescriptor],
        store: AttachmentStore,
        output_path: Path,
    ) -> ComposeResult:
        """Merge a rendered body with its attachments and write the composite.

        Args:
            context: Caller context for this request
            body_data: PDF bytes of the rendered message body
            attachments: Attachments in merge order
            store: Store resolving attachment source references
            output_path: Where to write the composite

        Returns:
            ComposeResult describing the written composite

        Raises:
            ParseError: If the body is not a valid PDF
            PersistenceError: If the composite cannot be written
        """
        output_path = Path(output_path)
        logger.info(
            f"[{context.request_id}] Composing {output_path.name} "
            f"with {len(attachments)} attachments"
        )

        outcome = self.assembler.assemble(body_data, attachments, store)
        try:
            with self.annotator.annotate(outcome.pages) as stamped:
                data = stamped.to_bytes()
                page_count = len(stamped)
        finally:
            outcome.pages.close()

        try:
            output_path.write_bytes(data)
        except OSError as e:
            logger.error(f"[{context.request_id}] Failed to write {output_path}: {e}")
            raise PersistenceError(
                f"Failed to write {output_path}: {e}", path=str(output_path)
            ) from e

        cleaned_up: list[Path] = []
        if self.config.cleanup_sources:
            transient = [store.transient_path(a.source_ref) for a in attachments]
            cleaned_up = cleanup_temp_files(p for p in transient if p is not None)

        if outcome.skipped:
            logger.warning(
                f"[{context.request_id}] {len(outcome.skipped)} attachments skipped"
            )
        logger.info(
            f"[{context.request_id}] Wrote {output_path} ({page_count} pages)"
        )

        return ComposeResult(
            composite_path=str(output_path),
            page_count=page_count,
            manifest=outcome.manifest,
            skipped=outcome.skipped,
            cleaned_up=[str(p) for p in cleaned_up],
        )

    def compose_message(
        self,
        context: RequestContext,
        message: Any,
        renderer: Renderer,
        attachments: Sequence[AttachmentDescriptor],
        store: AttachmentStore,
        output_path: Path,
    ) -> ComposeResult:
        """Render a message body with ``renderer`` and compose it."""
        body_data = renderer.render(message)
        return self.compose(context, body_data, attachments, store, output_path)

    def analyze(self, context: RequestContext, composite_path: Path) -> SplitAnalysis:
        """Suggest a split for a composite without a manifest.

        Assumes the configured default email page count and treats every
        remaining page as a single attachment.

        Raises:
            ValidationError: If the composite filename is invalid
            NotFoundError: If the composite does not exist
            ParseError: If the composite is not a valid PDF
        """
        composite_path = Path(composite_path)
        validate_filename(composite_path.name)

        with load_pdf_file(composite_path) as composite:
            total_pages = len(composite)

        email_pages = self.config.default_email_page_count
        suggested = self.planner.plan(
            total_pages, Manifest(email_page_count=email_pages)
        )
        logger.info(
            f"[{context.request_id}] Analyzed {composite_path.name}: {total_pages} pages"
        )
        return SplitAnalysis(
            filename=composite_path.name,
            total_pages=total_pages,
            estimated_email_pages=min(email_pages, total_pages),
            estimated_attachment_pages=max(0, total_pages - email_pages),
            suggested_split=suggested,
        )

    def split(
        self,
        context: RequestContext,
        composite_path: Path,
        manifest: Manifest | Mapping | None,
        output_dir: Path,
    ) -> SplitResult:
        """Split a composite into its email and attachment documents.

        The filename and manifest are validated before any file is read.

        Args:
            context: Caller context for this request
            composite_path: Path of the composite PDF
            manifest: Manifest or transport mapping; None or no attachments
                      selects auto-detection
            output_dir: Directory receiving the outputs

        Returns:
            SplitResult listing the written documents

        Raises:
            ValidationError: If the filename or manifest is invalid
            NotFoundError: If the composite does not exist
            ParseError: If the composite is not a valid PDF
            PersistenceError: If an output cannot be written
        """
        composite_path = Path(composite_path)
        validate_filename(composite_path.name)
        manifest = self.validator.validate(manifest)

        with load_pdf_file(composite_path) as composite:
            total_pages = len(composite)
            auto_detected = manifest.is_auto_detect
            if auto_detected:
                logger.warning(
                    f"[{context.request_id}] No attachment layout for "
                    f"{composite_path.name}; auto-detecting"
                )
                manifest = self.planner.infer_manifest(
                    total_pages, manifest.email_page_count
                )
            elif manifest.total_pages != total_pages:
                logger.warning(
                    f"[{context.request_id}] Manifest describes {manifest.total_pages} "
                    f"pages, composite has {total_pages}"
                )

            plan = self.planner.plan(total_pages, manifest)
            result = self.disassembler.disassemble(
                composite,
                plan,
                Path(output_dir),
                composite_path,
                manifest,
                auto_detected=auto_detected,
            )

        logger.info(
            f"[{context.request_id}] Split {composite_path.name} into "
            f"{result.total_files} files"
        )
        return result
