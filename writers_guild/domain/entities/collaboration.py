"""Domain entities for post collaboration and moderation reports."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

INVITE_PENDING = "pending"
INVITE_ACCEPTED = "accepted"
INVITE_DECLINED = "declined"


@dataclass
class CollaborationInvite:
    """An invitation from a post author to co-write the post."""

    id: int | None
    post_id: int
    inviter_id: int
    invitee_id: int
    status: str = INVITE_PENDING
    created_at: datetime | None = None
    responded_at: datetime | None = None

    @property
    def is_pending(self) -> bool:
        return self.status == INVITE_PENDING


@dataclass
class Report:
    """A moderation report filed against a post."""

    id: int | None
    post_id: int
    reporter_id: int
    reason: str
    details: str | None = None
    created_at: datetime | None = None


__all__ = [
    "CollaborationInvite",
    "INVITE_ACCEPTED",
    "INVITE_DECLINED",
    "INVITE_PENDING",
    "Report",
]
