"""Schema definitions for mail-compositor."""

from .attachment import AttachmentDescriptor, DetectedAttachment
from .context import RequestContext
from .manifest import AttachmentInfo, Manifest
from .merge import ComposeResult, SkippedSource
from .split import PageRange, PlannedRange, SplitAnalysis, SplitOutput, SplitResult

__all__ = [
    "AttachmentDescriptor",
    "AttachmentInfo",
    "ComposeResult",
    "DetectedAttachment",
    "Manifest",
    "PageRange",
    "PlannedRange",
    "RequestContext",
    "SkippedSource",
    "SplitAnalysis",
    "SplitOutput",
    "SplitResult",
]
