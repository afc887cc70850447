"""Request context domain object."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass(frozen=True)
class RequestContext:
    """Caller context passed explicitly to every orchestrator call.

    Attributes:
        request_id: Identifier used to correlate log lines
        session_id: Caller session, if any
        requested_at: When the request was made
    """

    request_id: str = field(default_factory=lambda: uuid4().hex)
    session_id: str | None = None
    requested_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
