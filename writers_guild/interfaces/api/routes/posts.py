"""Routes for publishing and managing posts."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.posts import (
    create_post,
    delete_post,
    get_post,
    list_posts,
    update_post,
)
from writers_guild.domain.entities import User
from writers_guild.domain.errors import WritersGuildError
from writers_guild.infrastructure.database import get_db
from writers_guild.infrastructure.realtime import EventPublisher
from writers_guild.interfaces.api.dependencies import get_current_user, get_optional_user
from writers_guild.interfaces.api.routes_helpers import http_error, post_to_read
from writers_guild.interfaces.api.schemas import PostCreate, PostRead, PostUpdate


def build_router(publisher: EventPublisher) -> APIRouter:
    """Return the posts router bound to ``publisher`` for mention notifications."""

    router = APIRouter(prefix="/api/posts", tags=["posts"])

    @router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
    def publish_post(
        payload: PostCreate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            view = create_post(db, publisher, author=current_user, **payload.model_dump())
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return post_to_read(view)

    @router.get("", response_model=list[PostRead])
    def read_posts(
        limit: int = Query(20, ge=1, le=100),
        offset: int = Query(0, ge=0),
        db: Session = Depends(get_db),
        viewer: User | None = Depends(get_optional_user),
    ):
        """Public feed, newest first, with the viewer's engagement flags."""

        views = list_posts(db, viewer_id=viewer.id if viewer else None, limit=limit, offset=offset)
        return [post_to_read(view) for view in views]

    @router.get("/{post_id}", response_model=PostRead)
    def read_post(
        post_id: int,
        db: Session = Depends(get_db),
        viewer: User | None = Depends(get_optional_user),
    ):
        try:
            view = get_post(db, post_id, viewer_id=viewer.id if viewer else None)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return post_to_read(view)

    @router.patch("/{post_id}", response_model=PostRead)
    def edit_post(
        post_id: int,
        payload: PostUpdate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            view = update_post(
                db,
                post_id=post_id,
                editor=current_user,
                changes=payload.model_dump(exclude_unset=True),
            )
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return post_to_read(view)

    @router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
    def remove_post(
        post_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            delete_post(db, post_id=post_id, acting_user=current_user)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


__all__ = ["build_router"]
