"""Domain entity representing a server-side login session."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class UserSession:
    """A login session referenced by the signed session cookie."""

    id: str
    user_id: int
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


__all__ = ["UserSession"]
