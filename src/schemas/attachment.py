"""Attachment domain objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AttachmentDescriptor:
    """An attachment the caller wants merged after the email body.

    Attributes:
        original_name: Filename the attachment had in the message
        source_ref: Opaque handle resolved by an attachment store
        page_count: Expected page count, if known; the loaded count wins
    """

    original_name: str
    source_ref: str
    page_count: int | None = None


@dataclass(frozen=True)
class DetectedAttachment:
    """An attachment part found in a provider message payload.

    Attributes:
        filename: Part filename
        mime_type: Declared MIME type
        size: Body size in bytes
        attachment_id: Provider id used to fetch the bytes
        is_pdf: Whether the part is a PDF document
    """

    filename: str
    mime_type: str | None
    size: int = 0
    attachment_id: str | None = None
    is_pdf: bool = False
