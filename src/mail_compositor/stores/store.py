"""Base class for attachment stores."""

from abc import ABC, abstractmethod
from pathlib import Path


class AttachmentStore(ABC):
    """Abstract source of attachment bytes.

    Stores resolve the opaque ``source_ref`` of an AttachmentDescriptor to raw
    bytes. A missing source raises NotFoundError; other read failures surface
    as OSError. The merge assembler turns both into skip events.
    """

    @abstractmethod
    def read(self, source_ref: str) -> bytes:
        """Return the bytes behind a source reference.

        Args:
            source_ref: Opaque handle from an AttachmentDescriptor

        Returns:
            Raw attachment bytes
        """
        pass

    def transient_path(self, source_ref: str) -> Path | None:
        """Return the local file behind a reference if it is safe to delete.

        Only stores holding their own temporary copies (downloads made for
        this merge) return a path; the orchestrator deletes these after a
        successful merge. Caller-owned files must return None.
        """
        return None
