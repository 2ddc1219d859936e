"""Use cases for reading and editing writer profiles."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from sqlalchemy.orm import Session

from writers_guild.domain.entities import User, UserStats
from writers_guild.domain.errors import NotFoundError
from writers_guild.infrastructure.repositories import UserRepository
from writers_guild.utils import utcnow

_EDITABLE_FIELDS = (
    "display_name",
    "bio",
    "location",
    "website",
    "profile_image_url",
    "cover_image_url",
    "genres",
)


def get_user(session: Session, user_id: int) -> User:
    user = UserRepository(session).get(user_id)
    if user is None or not user.is_active:
        raise NotFoundError("User not found")
    return user


def get_user_by_username(session: Session, username: str) -> User:
    user = UserRepository(session).get_by_username(username)
    if user is None or not user.is_active:
        raise NotFoundError("User not found")
    return user


def update_profile(session: Session, *, user: User, changes: dict[str, Any]) -> User:
    """Apply the editable profile ``changes`` to ``user``.

    Keys outside the editable set are ignored; ``display_name`` cannot be
    cleared.
    """

    for field_name in _EDITABLE_FIELDS:
        if field_name not in changes:
            continue
        value = changes[field_name]
        if field_name == "display_name":
            value = (value or "").strip() or user.display_name
        elif field_name == "genres":
            value = [genre.strip() for genre in value or [] if genre and genre.strip()]
        setattr(user, field_name, value)
    return UserRepository(session).update(user)


def get_user_stats(session: Session, user_id: int) -> UserStats:
    stats = UserRepository(session).get_stats(user_id)
    if stats is None:
        raise NotFoundError("User not found")
    return stats


def list_followers(session: Session, user_id: int) -> list[User]:
    get_user(session, user_id)
    return UserRepository(session).list_followers(user_id)


def list_following(session: Session, user_id: int) -> list[User]:
    get_user(session, user_id)
    return UserRepository(session).list_following(user_id)


def list_suggested_users(session: Session, *, user_id: int, limit: int = 5) -> list[User]:
    return UserRepository(session).list_suggested(user_id, limit=limit)


def list_trending_users(session: Session, *, days: int = 7, limit: int = 10) -> list[User]:
    since = utcnow() - timedelta(days=days)
    return UserRepository(session).list_trending(since=since, limit=limit)


__all__ = [
    "get_user",
    "get_user_by_username",
    "get_user_stats",
    "list_followers",
    "list_following",
    "list_suggested_users",
    "list_trending_users",
    "update_profile",
]
