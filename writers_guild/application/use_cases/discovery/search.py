"""Search and trending listings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from sqlalchemy.orm import Session

from writers_guild.domain.entities import PostView, User
from writers_guild.infrastructure.repositories import PostRepository, UserRepository
from writers_guild.utils import utcnow


@dataclass
class SearchResults:
    users: list[User]
    posts: list[PostView]


@dataclass
class TrendingTopic:
    genre: str
    posts_count: int


def search_users(session: Session, *, query: str, limit: int = 10) -> list[User]:
    query = query.strip()
    if not query:
        return []
    return UserRepository(session).search(query, limit=limit)


def search_posts(
    session: Session, *, query: str, viewer_id: int | None = None, limit: int = 20
) -> list[PostView]:
    query = query.strip()
    if not query:
        return []
    return PostRepository(session).search(query, limit=limit, viewer_id=viewer_id)


def search_all(session: Session, *, query: str, viewer_id: int | None = None) -> SearchResults:
    return SearchResults(
        users=search_users(session, query=query),
        posts=search_posts(session, query=query, viewer_id=viewer_id),
    )


def list_trending_posts(
    session: Session, *, viewer_id: int | None = None, days: int = 7, limit: int = 20
) -> list[PostView]:
    since = utcnow() - timedelta(days=days)
    return PostRepository(session).list_trending(since=since, limit=limit, viewer_id=viewer_id)


def list_trending_topics(session: Session, *, days: int = 7, limit: int = 10) -> list[TrendingTopic]:
    """Rank genres by how many public posts used them recently."""

    since = utcnow() - timedelta(days=days)
    rows = PostRepository(session).count_by_genre(since=since, limit=limit + 1)
    return [TrendingTopic(genre=genre, posts_count=count) for genre, count in rows if genre][:limit]


__all__ = [
    "SearchResults",
    "TrendingTopic",
    "list_trending_posts",
    "list_trending_topics",
    "search_all",
    "search_posts",
    "search_users",
]
