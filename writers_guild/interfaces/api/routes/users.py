"""Routes for writer profiles and social graph listings."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.posts import list_user_posts
from writers_guild.application.use_cases.users import (
    get_user,
    get_user_by_username,
    get_user_stats,
    list_followers,
    list_following,
    list_suggested_users,
    list_trending_users,
    update_profile,
)
from writers_guild.domain.entities import User
from writers_guild.domain.errors import WritersGuildError
from writers_guild.infrastructure.database import get_db
from writers_guild.interfaces.api.dependencies import get_current_user, get_optional_user
from writers_guild.interfaces.api.routes_helpers import http_error, post_to_read
from writers_guild.interfaces.api.schemas import (
    CurrentUserRead,
    PostRead,
    ProfileUpdate,
    UserRead,
    UserStatsRead,
)

router = APIRouter(prefix="/api", tags=["users"])


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.patch("/users/profile", response_model=CurrentUserRead)
def edit_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update the profile of the authenticated user."""

    user = update_profile(db, user=current_user, changes=payload.model_dump(exclude_unset=True))
    return CurrentUserRead.model_validate(user)


@router.get("/suggested/users", response_model=list[UserRead])
def suggested_users(
    limit: int = Query(5, ge=1, le=50),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Writers the current user does not follow yet, most followed first."""

    return [_to_read_model(user) for user in list_suggested_users(db, user_id=current_user.id, limit=limit)]


@router.get("/users/trending/list", response_model=list[UserRead])
def trending_users(
    days: int = Query(7, ge=1, le=90),
    limit: int = Query(10, ge=1, le=50),
    db: Session = Depends(get_db),
):
    return [_to_read_model(user) for user in list_trending_users(db, days=days, limit=limit)]


@router.get("/users/{username}", response_model=UserRead)
def read_user(username: str, db: Session = Depends(get_db)):
    try:
        user = get_user_by_username(db, username)
    except WritersGuildError as exc:
        raise http_error(exc) from exc
    return _to_read_model(user)


@router.get("/users/{user_id}/stats", response_model=UserStatsRead)
def read_user_stats(user_id: int, db: Session = Depends(get_db)):
    try:
        stats = get_user_stats(db, user_id)
    except WritersGuildError as exc:
        raise http_error(exc) from exc
    return UserStatsRead.model_validate(stats)


@router.get("/users/{user_id}/followers", response_model=list[UserRead])
def read_followers(user_id: int, db: Session = Depends(get_db)):
    try:
        users = list_followers(db, user_id)
    except WritersGuildError as exc:
        raise http_error(exc) from exc
    return [_to_read_model(user) for user in users]


@router.get("/users/{user_id}/following", response_model=list[UserRead])
def read_following(user_id: int, db: Session = Depends(get_db)):
    try:
        users = list_following(db, user_id)
    except WritersGuildError as exc:
        raise http_error(exc) from exc
    return [_to_read_model(user) for user in users]


@router.get("/users/{user_id}/posts", response_model=list[PostRead])
def read_user_posts(
    user_id: int,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
    viewer: User | None = Depends(get_optional_user),
):
    """Posts written by ``user_id``; private ones only for their author."""

    try:
        get_user(db, user_id)
    except WritersGuildError as exc:
        raise http_error(exc) from exc
    views = list_user_posts(
        db,
        author_id=user_id,
        viewer_id=viewer.id if viewer else None,
        limit=limit,
        offset=offset,
    )
    return [post_to_read(view) for view in views]
