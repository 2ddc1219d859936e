"""Domain entities for posts and their engagement records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

POST_TYPES = ("text", "poetry", "story", "challenge")


@dataclass
class Post:
    """A piece of writing published by an author."""

    id: int | None
    author_id: int
    content: str
    title: str | None = None
    post_type: str = "text"
    genre: str | None = None
    formatted_content: dict[str, Any] | None = None
    is_private: bool = False
    likes_count: int = 0
    comments_count: int = 0
    reposts_count: int = 0
    views_count: int = 0
    collaborator_ids: list[int] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_editable_by(self, user_id: int) -> bool:
        return user_id == self.author_id or user_id in self.collaborator_ids


@dataclass
class PostView:
    """A post together with its author and the viewer's engagement flags."""

    post: Post
    author: "UserSummary | None"
    is_liked: bool = False
    is_bookmarked: bool = False
    is_reposted: bool = False


@dataclass
class UserSummary:
    """Public subset of a user embedded in other payloads."""

    id: int
    username: str
    display_name: str
    profile_image_url: str | None = None
    is_verified: bool = False


@dataclass
class Like:
    id: int | None
    user_id: int
    post_id: int
    created_at: datetime | None = None


@dataclass
class Repost:
    id: int | None
    user_id: int
    post_id: int
    comment: str | None = None
    created_at: datetime | None = None


@dataclass
class Bookmark:
    id: int | None
    user_id: int
    post_id: int
    created_at: datetime | None = None


@dataclass
class Follow:
    id: int | None
    follower_id: int
    following_id: int
    created_at: datetime | None = None


__all__ = [
    "Bookmark",
    "Follow",
    "Like",
    "POST_TYPES",
    "Post",
    "PostView",
    "Repost",
    "UserSummary",
]
