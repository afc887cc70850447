"""Sources of attachment bytes."""

from .file_store import FileAttachmentStore
from .store import AttachmentStore

__all__ = ["AttachmentStore", "FileAttachmentStore"]
