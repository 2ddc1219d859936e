"""Domain entity representing a comment on a post."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .post import UserSummary

MAX_COMMENT_DEPTH = 5


@dataclass
class Comment:
    """A comment or nested reply attached to a post."""

    id: int | None
    user_id: int
    post_id: int
    content: str
    parent_id: int | None = None
    level: int = 0
    likes_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    author: UserSummary | None = None
    is_liked: bool = False


__all__ = ["Comment", "MAX_COMMENT_DEPTH"]
