"""Attachment detection in provider message payloads.

Message payloads are MIME trees: each part may carry a ``filename``, a
``mimeType``, a ``body`` with ``size`` and ``attachmentId``, and nested
``parts``. Every part with a filename is an attachment.
"""

import logging
from collections.abc import Iterable, Mapping
from pathlib import PurePath

from schemas.attachment import DetectedAttachment

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"

MIME_TYPES = {
    ".pdf": PDF_MIME_TYPE,
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".xls": "application/vnd.ms-excel",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".txt": "text/plain",
    ".zip": "application/zip",
}


def is_pdf_file(filename: str, mime_type: str | None = None) -> bool:
    return PurePath(filename).suffix.lower() == ".pdf" or mime_type == PDF_MIME_TYPE


def guess_mime_type(filename: str) -> str:
    return MIME_TYPES.get(PurePath(filename).suffix.lower(), "application/octet-stream")


def detect_attachments(payload: Mapping) -> list[DetectedAttachment]:
    """Find attachment parts in a message payload.

    The tree is walked depth-first with an explicit stack, visiting parts in
    document order (a part before its children, siblings left to right).

    Args:
        payload: Root part of the message

    Returns:
        Attachments in document order
    """
    attachments: list[DetectedAttachment] = []
    stack: list[Mapping] = [payload]

    while stack:
        part = stack.pop()
        filename = part.get("filename")
        if filename:
            body = part.get("body") or {}
            mime_type = part.get("mimeType")
            attachments.append(
                DetectedAttachment(
                    filename=filename,
                    mime_type=mime_type,
                    size=body.get("size") or 0,
                    attachment_id=body.get("attachmentId"),
                    is_pdf=is_pdf_file(filename, mime_type),
                )
            )

        children = part.get("parts") or []
        stack.extend(reversed(children))

    logger.debug(f"Detected {len(attachments)} attachments")
    return attachments


def has_pdf_attachment(attachments: Iterable[DetectedAttachment]) -> bool:
    return any(attachment.is_pdf for attachment in attachments)


def pdf_attachments(attachments: Iterable[DetectedAttachment]) -> list[DetectedAttachment]:
    """Attachments eligible for merging, in their original order."""
    return [attachment for attachment in attachments if attachment.is_pdf]
