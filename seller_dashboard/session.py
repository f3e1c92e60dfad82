"""Explicit caller context passed into dashboard operations."""

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class SessionContext:
    """Who is asking, and what time it is for them.

    ``now`` pins the clock so results are reproducible; when omitted the
    current UTC time is used.
    """

    user_id: str
    is_admin: bool = False
    now: datetime | None = None

    def current_time(self) -> datetime:
        return self.now or datetime.now(timezone.utc)
