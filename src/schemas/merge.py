"""Merge result schemas."""

from pydantic import BaseModel

from schemas.manifest import Manifest


class SkippedSource(BaseModel):
    """An attachment left out of a composite because it could not be loaded.

    Attributes:
        original_name: Attachment filename
        source_ref: Reference the attachment store was asked for
        reason: Why loading failed
    """

    original_name: str
    source_ref: str
    reason: str

    model_config = {"frozen": True}


class ComposeResult(BaseModel):
    """Outcome of composing and persisting a message.

    Attributes:
        composite_path: Path of the written composite
        page_count: Total pages in the composite
        manifest: Layout of what was actually merged
        skipped: Attachments that were left out
        cleaned_up: Source files removed after the merge
    """

    composite_path: str
    page_count: int
    manifest: Manifest
    skipped: list[SkippedSource] = []
    cleaned_up: list[str] = []

    model_config = {"frozen": True}

    @property
    def merged(self) -> bool:
        return bool(self.manifest.attachment_info)
