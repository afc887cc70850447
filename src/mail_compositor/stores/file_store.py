"""Attachment store backed by local files."""

import logging
from pathlib import Path

from mail_compositor.exceptions import NotFoundError

from .store import AttachmentStore

logger = logging.getLogger(__name__)


class FileAttachmentStore(AttachmentStore):
    """Read attachments that were downloaded to disk.

    Source references are file paths. Relative references resolve against
    ``root`` when one is given. Files are treated as caller-owned unless the
    store is created with ``transient=True``, which marks them as temporary
    downloads that may be deleted once merged.

    Example:
        store = FileAttachmentStore(Path("./downloads/attachments"), transient=True)
        data = store.read("invoice.pdf")
    """

    def __init__(self, root: Path | None = None, transient: bool = False):
        self.root = root
        self.transient = transient

    def local_path(self, source_ref: str) -> Path:
        path = Path(source_ref)
        if self.root is not None and not path.is_absolute():
            path = self.root / path
        return path

    def transient_path(self, source_ref: str) -> Path | None:
        return self.local_path(source_ref) if self.transient else None

    def read(self, source_ref: str) -> bytes:
        path = self.local_path(source_ref)
        if not path.is_file():
            raise NotFoundError(f"Attachment not found: {path}", path=str(path))
        data = path.read_bytes()
        logger.debug(f"Read {len(data)} bytes from {path}")
        return data
