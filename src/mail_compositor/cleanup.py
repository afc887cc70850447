"""Best-effort removal of transient attachment files."""

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def cleanup_temp_files(paths: Iterable[Path]) -> list[Path]:
    """Delete transient files left behind by a merge.

    Missing paths and directories are skipped. Delete failures are logged
    and never raised; a failed cleanup does not fail the merge.

    Args:
        paths: Files to delete

    Returns:
        Paths that were actually removed
    """
    removed: list[Path] = []
    for path in paths:
        path = Path(path)
        if not path.exists():
            continue
        if path.is_dir():
            logger.debug(f"Skipping directory during cleanup: {path}")
            continue

        try:
            path.unlink()
        except OSError as e:
            logger.warning(f"Could not delete temporary file {path}: {e}")
            continue

        logger.debug(f"Deleted temporary file {path.name}")
        removed.append(path)

    if removed:
        logger.info(f"Cleaned up {len(removed)} temporary files")
    return removed
