"""Configuration for the composition engine."""

from datetime import datetime, timezone
from typing import Callable

DEFAULT_MERGED_MARKER = "_merged"
DEFAULT_EMAIL_MARKER = "_email_only"
DEFAULT_ATTACHMENT_PREFIX = "demerged_"
DEFAULT_PLACEHOLDER_NAME = "attachment.pdf"
DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CompositorConfig:
    """Engine settings built from a plain dict.

    Config keys:
        merged_marker: Filename marker carried by composites (default: "_merged")
        email_marker: Marker replacing merged_marker in the email output (default: "_email_only")
        attachment_prefix: Prefix for split attachment outputs (default: "demerged_")
        placeholder_name: Name used for auto-detected attachments (default: "attachment.pdf")
        default_email_page_count: Email pages assumed when a manifest omits them (default: 1)
        footer_font_size: Footer font size in points (default: 8)
        footer_margin: Distance of the footer baseline from the page bottom in points (default: 18)
        timestamp_format: strftime format for the footer timestamp
        max_workers: Threads used to read attachment bytes (default: 4)
        cleanup_sources: Delete transient attachment sources after a merge (default: True)
        clock: Callable returning the current time (default: UTC now)
    """

    def __init__(self, config: dict | None = None):
        self._config = dict(config or {})

        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.default_email_page_count < 0:
            raise ValueError(
                f"default_email_page_count must be >= 0, got {self.default_email_page_count}"
            )
        if self.footer_font_size <= 0:
            raise ValueError(f"footer_font_size must be > 0, got {self.footer_font_size}")

    @property
    def merged_marker(self) -> str:
        return str(self._config.get("merged_marker", DEFAULT_MERGED_MARKER))

    @property
    def email_marker(self) -> str:
        return str(self._config.get("email_marker", DEFAULT_EMAIL_MARKER))

    @property
    def attachment_prefix(self) -> str:
        return str(self._config.get("attachment_prefix", DEFAULT_ATTACHMENT_PREFIX))

    @property
    def placeholder_name(self) -> str:
        return str(self._config.get("placeholder_name", DEFAULT_PLACEHOLDER_NAME))

    @property
    def default_email_page_count(self) -> int:
        return int(self._config.get("default_email_page_count", 1))

    @property
    def footer_font_size(self) -> float:
        return float(self._config.get("footer_font_size", 8))

    @property
    def footer_margin(self) -> float:
        return float(self._config.get("footer_margin", 18))

    @property
    def timestamp_format(self) -> str:
        return str(self._config.get("timestamp_format", DEFAULT_TIMESTAMP_FORMAT))

    @property
    def max_workers(self) -> int:
        return int(self._config.get("max_workers", 4))

    @property
    def cleanup_sources(self) -> bool:
        return bool(self._config.get("cleanup_sources", True))

    @property
    def clock(self) -> Callable[[], datetime]:
        return self._config.get("clock", utc_now)
