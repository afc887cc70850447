"""Manifest schemas.

A manifest describes how the pages of a composite map back to logical units:
the rendered email body first, then each attachment in merge order. The
composite itself never embeds a manifest, so callers carry it alongside the
artifact (or fall back to auto-detection when it is lost).

Transport shape (camelCase):
    {
        "emailPageCount": 1,
        "attachmentInfo": [
            {"originalName": "invoice.pdf", "pageCount": 2},
            {"originalName": "terms.pdf", "pageCount": 3}
        ]
    }
"""

from pydantic import BaseModel, Field


class AttachmentInfo(BaseModel):
    """One attachment's slot in a composite.

    Attributes:
        original_name: Filename the attachment had in the message
        page_count: Number of pages the attachment occupies (>= 1)
    """

    original_name: str = Field(alias="originalName", min_length=1)
    page_count: int = Field(alias="pageCount", ge=1)

    model_config = {"populate_by_name": True, "frozen": True}


class Manifest(BaseModel):
    """Page layout of a composite.

    Attributes:
        email_page_count: Pages occupied by the email body at the start
        attachment_info: Attachments in composite order; empty selects auto-detection
    """

    email_page_count: int = Field(alias="emailPageCount", ge=0)
    attachment_info: list[AttachmentInfo] = Field(default=[], alias="attachmentInfo")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def total_pages(self) -> int:
        return self.email_page_count + sum(a.page_count for a in self.attachment_info)

    @property
    def is_auto_detect(self) -> bool:
        return not self.attachment_info

    def to_transport(self) -> dict:
        """Return the camelCase mapping accepted by the manifest validator."""
        return self.model_dump(by_alias=True)
