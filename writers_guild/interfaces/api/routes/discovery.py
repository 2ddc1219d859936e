"""Search and trending endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.discovery import (
    list_trending_posts,
    list_trending_topics,
    search_all,
    search_posts,
    search_users,
)
from writers_guild.domain.entities import User
from writers_guild.infrastructure.database import get_db
from writers_guild.interfaces.api.dependencies import get_optional_user
from writers_guild.interfaces.api.routes_helpers import post_to_read
from writers_guild.interfaces.api.schemas import (
    PostRead,
    SearchResultsRead,
    TrendingTopicRead,
    UserRead,
)

router = APIRouter(prefix="/api", tags=["discovery"])


def _viewer_id(viewer: User | None) -> int | None:
    return viewer.id if viewer else None


@router.get("/search/users", response_model=list[UserRead])
def find_users(q: str = Query("", max_length=100), db: Session = Depends(get_db)):
    return [UserRead.model_validate(user) for user in search_users(db, query=q)]


@router.get("/search/posts", response_model=list[PostRead])
def find_posts(
    q: str = Query("", max_length=100),
    db: Session = Depends(get_db),
    viewer: User | None = Depends(get_optional_user),
):
    return [post_to_read(view) for view in search_posts(db, query=q, viewer_id=_viewer_id(viewer))]


@router.get("/search", response_model=SearchResultsRead)
def find_all(
    q: str = Query("", max_length=100),
    db: Session = Depends(get_db),
    viewer: User | None = Depends(get_optional_user),
):
    results = search_all(db, query=q, viewer_id=_viewer_id(viewer))
    return SearchResultsRead(
        users=[UserRead.model_validate(user) for user in results.users],
        posts=[post_to_read(view) for view in results.posts],
    )


@router.get("/trending/posts", response_model=list[PostRead])
def trending_posts(
    days: int = Query(7, ge=1, le=90),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    viewer: User | None = Depends(get_optional_user),
):
    views = list_trending_posts(db, viewer_id=_viewer_id(viewer), days=days, limit=limit)
    return [post_to_read(view) for view in views]


@router.get("/explore/trending-topics", response_model=list[TrendingTopicRead])
def trending_topics(
    days: int = Query(7, ge=1, le=90),
    limit: int = Query(10, ge=1, le=50),
    db: Session = Depends(get_db),
):
    return [TrendingTopicRead.model_validate(topic) for topic in list_trending_topics(db, days=days, limit=limit)]
