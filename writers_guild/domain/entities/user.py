"""Domain entity representing a user."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class User:
    """Core attributes describing a writer account."""

    id: int | None
    username: str
    email: str
    password: str
    display_name: str
    bio: str | None = None
    location: str | None = None
    website: str | None = None
    profile_image_url: str | None = None
    cover_image_url: str | None = None
    genres: list[str] = field(default_factory=list)
    is_verified: bool = False
    is_admin: bool = False
    is_super_admin: bool = False
    is_active: bool = True
    posts_count: int = 0
    comments_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_admin_rights(self) -> bool:
        """Return ``True`` for administrators and super administrators."""

        return self.is_admin or self.is_super_admin


@dataclass
class UserStats:
    """Aggregated counters displayed on a profile."""

    user_id: int
    posts_count: int
    comments_count: int
    followers_count: int
    following_count: int
    likes_received: int


__all__ = ["User", "UserStats"]
