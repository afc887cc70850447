"""Output file naming.

Composites carry a marker substring (``_merged`` by default) that callers use
to discover them. Split outputs derive their names from the composite name
and the manifest; uniqueness is not enforced, so a repeated attachment name
overwrites the earlier output.
"""

import re
from datetime import datetime, timezone
from pathlib import PurePath

from mail_compositor.config import CompositorConfig

UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*]')
WHITESPACE = re.compile(r"\s+")
MAX_SUBJECT_LENGTH = 50


def safe_file_name(subject: str, message_id: str, now: datetime | None = None) -> str:
    """Build a filesystem-safe PDF name for a message.

    Args:
        subject: Message subject
        message_id: Provider message id (first 8 characters are kept)
        now: Timestamp to embed (default: current UTC time)

    Returns:
        ``{subject}_{YYYY-MM-DDTHH-MM-SS}_{id8}.pdf``
    """
    now = now or datetime.now(timezone.utc)
    safe_subject = WHITESPACE.sub("_", UNSAFE_CHARS.sub("_", subject or ""))
    safe_subject = safe_subject[:MAX_SUBJECT_LENGTH]
    timestamp = now.strftime("%Y-%m-%dT%H-%M-%S")
    return f"{safe_subject}_{timestamp}_{message_id[:8]}.pdf"


def merged_file_name(filename: str, config: CompositorConfig | None = None) -> str:
    """Insert the composite marker before the extension (once)."""
    config = config or CompositorConfig()
    if config.merged_marker in filename:
        return filename
    path = PurePath(filename)
    return f"{path.stem}{config.merged_marker}{path.suffix or '.pdf'}"


def is_composite_name(filename: str, config: CompositorConfig | None = None) -> bool:
    config = config or CompositorConfig()
    return filename.lower().endswith(".pdf") and config.merged_marker in filename


def email_output_name(composite_name: str, config: CompositorConfig | None = None) -> str:
    """Name of the email part split out of a composite.

    The merge marker is replaced with the email marker; when the composite
    has no marker, the email marker is appended to the stem.
    """
    config = config or CompositorConfig()
    if config.merged_marker in composite_name:
        return composite_name.replace(config.merged_marker, config.email_marker, 1)
    path = PurePath(composite_name)
    return f"{path.stem}{config.email_marker}{path.suffix or '.pdf'}"


def attachment_output_name(original_name: str, config: CompositorConfig | None = None) -> str:
    config = config or CompositorConfig()
    return f"{config.attachment_prefix}{original_name}"
