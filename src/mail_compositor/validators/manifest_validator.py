"""Manifest and filename validation.

Manifests arrive from callers in their transport shape (camelCase keys,
loosely typed values). Validation runs before any file is touched; a failure
raises ValidationError and nothing is written.

Rules, applied in order:
1. ``emailPageCount`` must be an integer >= 0 (absent means the default).
2. ``attachmentInfo[i].pageCount`` must be an integer >= 1; absent or invalid
   values are coerced to 1 instead of rejected.
3. ``originalName`` must be a non-empty string without path traversal or
   reserved characters (``< > : " | ? *``); bad names are rejected, not renamed.
4. An empty ``attachmentInfo`` list is valid and selects auto-detection.
"""

import logging
import re
from collections.abc import Mapping

import pydantic

from mail_compositor.config import CompositorConfig
from mail_compositor.exceptions import ValidationError
from schemas.manifest import AttachmentInfo, Manifest

logger = logging.getLogger(__name__)

RESERVED_CHARS = re.compile(r'[<>:"|?*]')
PATH_SEPARATORS = re.compile(r"[/\\]")
INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


def coerce_int(value) -> int | None:
    """Interpret a transport value as an integer.

    Accepts ints, integral floats, and decimal strings. Returns None for
    anything else, including booleans.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and INTEGER_PATTERN.match(value.strip()):
        return int(value.strip())
    return None


def name_errors(name) -> list[str]:
    """List the reasons a name is unusable as an output filename."""
    if not isinstance(name, str) or not name.strip():
        return ["must be a non-empty string"]

    errors = []
    if PATH_SEPARATORS.search(name) or name.strip() in {".", ".."}:
        errors.append("must not contain path separators or be a relative path")
    if RESERVED_CHARS.search(name):
        errors.append('must not contain any of < > : " | ? *')
    if any(ord(ch) < 32 for ch in name):
        errors.append("must not contain control characters")
    return errors


def validate_filename(filename) -> str:
    """Validate the filename of a composite PDF.

    Args:
        filename: Name of the composite file (no directory part)

    Returns:
        The filename, unchanged

    Raises:
        ValidationError: If the name is empty, not a PDF, or unsafe
    """
    errors = name_errors(filename)
    if not errors and not filename.lower().endswith(".pdf"):
        errors.append("must end with .pdf")
    if errors:
        raise ValidationError(
            f"Invalid filename {filename!r}: {'; '.join(errors)}", errors=errors
        )
    return filename


class ManifestValidator:
    """Normalize caller-supplied manifests into Manifest models.

    Attributes:
        config: Engine configuration (default email page count, placeholder name)
    """

    def __init__(self, config: CompositorConfig | None = None):
        self.config = config or CompositorConfig()

    def validate(self, raw) -> Manifest:
        """Validate a manifest in transport shape.

        Args:
            raw: Mapping with ``emailPageCount`` and ``attachmentInfo``, or a
                 Manifest (names re-checked, then returned as-is), or None
                 (auto-detect with defaults)

        Returns:
            A validated Manifest

        Raises:
            ValidationError: If any rejecting rule fails
        """
        if isinstance(raw, Manifest):
            return self._check_model(raw)
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            raise ValidationError(
                f"Manifest must be a mapping, got {type(raw).__name__}",
                errors=["manifest must be a mapping"],
            )

        errors: list[str] = []
        email_page_count = self._email_page_count(raw, errors)
        attachment_info = self._attachment_info(raw, errors)

        if errors:
            raise ValidationError(
                f"Invalid manifest: {'; '.join(errors)}", errors=errors
            )

        try:
            manifest = Manifest(
                email_page_count=email_page_count, attachment_info=attachment_info
            )
        except pydantic.ValidationError as e:
            raise ValidationError(
                f"Invalid manifest: {e}", errors=e.errors()
            ) from e

        logger.debug(
            f"Validated manifest: {manifest.email_page_count} email pages, "
            f"{len(manifest.attachment_info)} attachments"
        )
        return manifest

    def _check_model(self, manifest: Manifest) -> Manifest:
        """Apply the name rules to an already-built Manifest."""
        errors = [
            f"attachmentInfo[{index}].originalName {problem}"
            for index, attachment in enumerate(manifest.attachment_info)
            for problem in name_errors(attachment.original_name)
        ]
        if errors:
            raise ValidationError(
                f"Invalid manifest: {'; '.join(errors)}", errors=errors
            )
        return manifest

    def _email_page_count(self, raw: Mapping, errors: list[str]) -> int:
        value = _first_present(raw, "emailPageCount", "email_page_count")
        if value is None:
            return self.config.default_email_page_count

        count = coerce_int(value)
        if count is None:
            errors.append(f"emailPageCount must be an integer, got {value!r}")
            return 0
        if count < 0:
            errors.append(f"emailPageCount must not be negative, got {count}")
            return 0
        return count

    def _attachment_info(self, raw: Mapping, errors: list[str]) -> list[AttachmentInfo]:
        entries = _first_present(raw, "attachmentInfo", "attachment_info")
        if entries is None:
            return []
        if isinstance(entries, (str, bytes)) or not isinstance(entries, (list, tuple)):
            errors.append("attachmentInfo must be a list")
            return []

        attachment_info = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                errors.append(f"attachmentInfo[{index}] must be a mapping")
                continue

            name = _first_present(entry, "originalName", "original_name")
            if name is None:
                name = self.config.placeholder_name
            problems = name_errors(name)
            if problems:
                errors.extend(
                    f"attachmentInfo[{index}].originalName {problem}"
                    for problem in problems
                )
                continue

            raw_count = _first_present(entry, "pageCount", "page_count")
            page_count = coerce_int(raw_count)
            if page_count is None or page_count < 1:
                logger.debug(
                    f"Coercing pageCount {raw_count!r} of {name} to 1"
                )
                page_count = 1

            attachment_info.append(
                AttachmentInfo(original_name=name, page_count=page_count)
            )
        return attachment_info


def validate_manifest(raw, config: CompositorConfig | None = None) -> Manifest:
    """Validate a transport-shaped manifest with a default validator."""
    return ManifestValidator(config).validate(raw)


def _first_present(mapping: Mapping, *keys: str):
    for key in keys:
        if mapping.get(key) is not None:
            return mapping[key]
    return None
