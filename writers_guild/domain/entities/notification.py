"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .post import UserSummary

NOTIFICATION_LIKE = "like"
NOTIFICATION_COMMENT = "comment"
NOTIFICATION_FOLLOW = "follow"
NOTIFICATION_REPOST = "repost"
NOTIFICATION_MENTION = "mention"
NOTIFICATION_COLLABORATION_INVITE = "collaboration_invite"
NOTIFICATION_COLLABORATION_ACCEPTED = "collaboration_accepted"
NOTIFICATION_COLLABORATION_DECLINED = "collaboration_declined"
NOTIFICATION_REPORT = "report"


@dataclass
class Notification:
    """An event directed at exactly one recipient user."""

    id: int | None
    user_id: int
    type: str
    actor_id: int | None = None
    post_id: int | None = None
    is_read: bool = False
    data: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    actor: UserSummary | None = None


__all__ = [
    "NOTIFICATION_COLLABORATION_ACCEPTED",
    "NOTIFICATION_COLLABORATION_DECLINED",
    "NOTIFICATION_COLLABORATION_INVITE",
    "NOTIFICATION_COMMENT",
    "NOTIFICATION_FOLLOW",
    "NOTIFICATION_LIKE",
    "NOTIFICATION_MENTION",
    "NOTIFICATION_REPORT",
    "NOTIFICATION_REPOST",
    "Notification",
]
