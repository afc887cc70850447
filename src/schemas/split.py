"""Split planning and result schemas."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from schemas.manifest import Manifest

UnitKind = Literal["email", "attachment"]


class PageRange(BaseModel):
    """A contiguous, half-open interval of 0-based page indices.

    Attributes:
        start: First page index (inclusive)
        end: Last page index (exclusive)
    """

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_order(self) -> "PageRange":
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must not precede start ({self.start})")
        return self

    @property
    def page_count(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"


class PlannedRange(BaseModel):
    """A page range assigned to one logical unit of a composite."""

    kind: UnitKind
    original_name: str | None = None
    page_range: PageRange

    model_config = {"frozen": True}


class SplitOutput(BaseModel):
    """One document written by the disassembler.

    Attributes:
        kind: "email" or "attachment"
        original_name: Attachment name from the manifest (None for the email)
        filename: Name of the written file
        output_path: Path of the written file
        page_range: Composite pages the output was cut from
    """

    kind: UnitKind
    original_name: str | None = None
    filename: str
    output_path: str
    page_range: PageRange

    model_config = {"frozen": True}

    @property
    def page_count(self) -> int:
        return self.page_range.page_count


class SplitResult(BaseModel):
    """Outcome of splitting a composite.

    Attributes:
        source_path: Path of the composite that was split
        output_dir: Directory the outputs were written to
        outputs: Written documents in composite order
        manifest: Manifest the split was planned from
        auto_detected: True when the attachment layout was inferred
    """

    source_path: str
    output_dir: str
    outputs: list[SplitOutput] = []
    manifest: Manifest
    auto_detected: bool = False

    model_config = {"frozen": True}

    @property
    def total_files(self) -> int:
        return len(self.outputs)


class SplitAnalysis(BaseModel):
    """Suggested split for a composite when no manifest is at hand."""

    filename: str
    total_pages: int
    estimated_email_pages: int
    estimated_attachment_pages: int
    suggested_split: list[PlannedRange] = []

    model_config = {"frozen": True}
