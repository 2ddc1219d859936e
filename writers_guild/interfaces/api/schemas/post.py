"""Post, comment and engagement schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .user import UserSummaryRead


class PostCreate(BaseModel):
    content: str = Field(..., min_length=1)
    title: str | None = Field(default=None, max_length=200)
    post_type: str = Field(default="text", max_length=20)
    genre: str | None = Field(default=None, max_length=50)
    formatted_content: dict[str, Any] | None = None
    is_private: bool = False


class PostUpdate(BaseModel):
    content: str | None = Field(default=None, min_length=1)
    title: str | None = Field(default=None, max_length=200)
    post_type: str | None = Field(default=None, max_length=20)
    genre: str | None = Field(default=None, max_length=50)
    formatted_content: dict[str, Any] | None = None
    is_private: bool | None = None

    model_config = ConfigDict(extra="forbid")


class PostRead(BaseModel):
    """A post as seen by the requesting user."""

    id: int
    author_id: int
    title: str | None
    content: str
    formatted_content: dict[str, Any] | None
    post_type: str
    genre: str | None
    is_private: bool
    likes_count: int
    comments_count: int
    reposts_count: int
    views_count: int
    collaborator_ids: list[int]
    created_at: datetime | None
    updated_at: datetime | None
    author: UserSummaryRead | None = None
    is_liked: bool = False
    is_bookmarked: bool = False
    is_reposted: bool = False


class LikeStatusRead(BaseModel):
    post_id: int
    is_liked: bool
    likes_count: int


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=5000)
    parent_id: int | None = None


class ReplyCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=5000)


class CommentRead(BaseModel):
    id: int
    user_id: int
    post_id: int
    parent_id: int | None
    content: str
    level: int
    likes_count: int
    created_at: datetime | None
    author: UserSummaryRead | None = None
    is_liked: bool = False

    model_config = ConfigDict(from_attributes=True)


class CommentLikeRead(BaseModel):
    comment_id: int
    is_liked: bool
    likes_count: int


class RepostCreate(BaseModel):
    comment: str | None = Field(default=None, max_length=1000)


class RepostRead(BaseModel):
    id: int
    user_id: int
    post_id: int
    comment: str | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class FollowRead(BaseModel):
    follower_id: int
    following_id: int
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class FollowStatusRead(BaseModel):
    user_id: int
    is_following: bool


class BookmarkRead(BaseModel):
    id: int
    user_id: int
    post_id: int
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ClearedRead(BaseModel):
    removed: int


__all__ = [
    "BookmarkRead",
    "ClearedRead",
    "CommentCreate",
    "CommentLikeRead",
    "CommentRead",
    "FollowRead",
    "FollowStatusRead",
    "LikeStatusRead",
    "PostCreate",
    "PostRead",
    "PostUpdate",
    "ReplyCreate",
    "RepostCreate",
    "RepostRead",
]
