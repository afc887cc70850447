"""Disassembler for cutting composites into independent documents.

Each planned range is sliced out of the composite, stamped with its own
footer, and written to the output directory. Writes happen in plan order and
are not transactional: if one write fails, the remaining ranges are abandoned
and files already written stay on disk.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from mail_compositor import naming
from mail_compositor.config import CompositorConfig
from mail_compositor.exceptions import PersistenceError
from mail_compositor.pages import PageSequence
from mail_compositor.transformers import FooterAnnotator
from schemas.manifest import Manifest
from schemas.split import PlannedRange, SplitOutput, SplitResult

logger = logging.getLogger(__name__)


class Disassembler:
    """Split a composite according to a plan.

    Attributes:
        config: Engine configuration (naming markers, clock)
        annotator: FooterAnnotator applied to every output
    """

    def __init__(
        self,
        config: CompositorConfig | None = None,
        annotator: FooterAnnotator | None = None,
    ):
        self.config = config or CompositorConfig()
        self.annotator = annotator or FooterAnnotator(self.config)

    def disassemble(
        self,
        composite: PageSequence,
        plan: Sequence[PlannedRange],
        output_dir: Path,
        source_path: Path,
        manifest: Manifest,
        auto_detected: bool = False,
    ) -> SplitResult:
        """Write one document per planned range.

        Args:
            composite: Pages of the composite (left unchanged)
            plan: Ranges from the SplitPlanner, in composite order
            output_dir: Directory receiving the outputs
            source_path: Path of the composite (its name seeds the email output name)
            manifest: Manifest the plan was computed from
            auto_detected: Whether the manifest was inferred

        Returns:
            SplitResult listing every written document

        Raises:
            PersistenceError: If the output directory or a file cannot be written
        """
        output_dir = Path(output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(
                f"Cannot create output directory {output_dir}: {e}", path=str(output_dir)
            ) from e

        generated_at = self.config.clock()
        outputs: list[SplitOutput] = []

        for planned in plan:
            page_range = planned.page_range
            filename = self._output_name(planned, source_path.name)
            output_path = output_dir / filename

            with composite.slice(page_range.start, page_range.end) as part:
                with self.annotator.annotate(part, generated_at) as stamped:
                    data = stamped.to_bytes()

            self._write(output_path, data, written=len(outputs))
            logger.debug(f"Wrote {planned.kind} pages {page_range} to {output_path}")

            outputs.append(
                SplitOutput(
                    kind=planned.kind,
                    original_name=planned.original_name,
                    filename=filename,
                    output_path=str(output_path),
                    page_range=page_range,
                )
            )

        logger.info(f"Split {source_path.name} into {len(outputs)} documents")
        return SplitResult(
            source_path=str(source_path),
            output_dir=str(output_dir),
            outputs=outputs,
            manifest=manifest,
            auto_detected=auto_detected,
        )

    def _output_name(self, planned: PlannedRange, composite_name: str) -> str:
        if planned.kind == "email":
            return naming.email_output_name(composite_name, self.config)
        return naming.attachment_output_name(
            planned.original_name or self.config.placeholder_name, self.config
        )

    def _write(self, path: Path, data: bytes, written: int) -> None:
        try:
            path.write_bytes(data)
        except OSError as e:
            logger.error(
                f"Failed to write {path} after {written} outputs; aborting split: {e}"
            )
            raise PersistenceError(f"Failed to write {path}: {e}", path=str(path)) from e
