"""Routes for likes, comments, follows, reposts and bookmarks."""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.engagement import (
    add_comment,
    bookmark_post,
    clear_bookmarks,
    follow_user,
    is_following,
    like_post,
    list_bookmarks,
    list_comments,
    list_replies,
    remove_bookmark,
    reply_to_comment,
    repost_post,
    toggle_comment_like,
    unfollow_user,
    unlike_post,
    unrepost_post,
)
from writers_guild.domain.entities import User
from writers_guild.domain.errors import WritersGuildError
from writers_guild.infrastructure.database import get_db
from writers_guild.infrastructure.realtime import EventPublisher
from writers_guild.interfaces.api.dependencies import get_current_user, get_optional_user
from writers_guild.interfaces.api.routes_helpers import http_error, post_to_read
from writers_guild.interfaces.api.schemas import (
    BookmarkRead,
    ClearedRead,
    CommentCreate,
    CommentLikeRead,
    CommentRead,
    FollowRead,
    FollowStatusRead,
    LikeStatusRead,
    PostRead,
    ReplyCreate,
    RepostCreate,
    RepostRead,
)

logger = logging.getLogger(__name__)


def build_router(publisher: EventPublisher) -> APIRouter:
    """Return the engagement router; actions that notify go through ``publisher``."""

    router = APIRouter(prefix="/api", tags=["engagement"])

    @router.post("/posts/{post_id}/like", response_model=LikeStatusRead)
    def like(
        post_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            post = like_post(db, publisher, user=current_user, post_id=post_id)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return LikeStatusRead(post_id=post.id, is_liked=True, likes_count=post.likes_count)

    @router.delete("/posts/{post_id}/like", response_model=LikeStatusRead)
    def unlike(
        post_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            post = unlike_post(db, user=current_user, post_id=post_id)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return LikeStatusRead(post_id=post.id, is_liked=False, likes_count=post.likes_count)

    @router.get("/posts/{post_id}/comments", response_model=list[CommentRead])
    def read_comments(
        post_id: int,
        db: Session = Depends(get_db),
        viewer: User | None = Depends(get_optional_user),
    ):
        try:
            comments = list_comments(db, post_id=post_id, viewer_id=viewer.id if viewer else None)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return [CommentRead.model_validate(comment) for comment in comments]

    @router.post(
        "/posts/{post_id}/comments",
        response_model=CommentRead,
        status_code=status.HTTP_201_CREATED,
    )
    def comment(
        post_id: int,
        payload: CommentCreate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            created = add_comment(
                db,
                publisher,
                user=current_user,
                post_id=post_id,
                content=payload.content,
                parent_id=payload.parent_id,
            )
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return CommentRead.model_validate(created)

    @router.get("/comments/{comment_id}/replies", response_model=list[CommentRead])
    def read_replies(
        comment_id: int,
        db: Session = Depends(get_db),
        viewer: User | None = Depends(get_optional_user),
    ):
        try:
            replies = list_replies(db, comment_id=comment_id, viewer_id=viewer.id if viewer else None)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return [CommentRead.model_validate(reply) for reply in replies]

    @router.post(
        "/comments/{comment_id}/replies",
        response_model=CommentRead,
        status_code=status.HTTP_201_CREATED,
    )
    def reply(
        comment_id: int,
        payload: ReplyCreate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            created = reply_to_comment(
                db,
                publisher,
                user=current_user,
                comment_id=comment_id,
                content=payload.content,
            )
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return CommentRead.model_validate(created)

    @router.post("/comments/{comment_id}/like", response_model=CommentLikeRead)
    def like_comment(
        comment_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        """Toggle the current user's like on a comment."""

        try:
            liked, likes_count = toggle_comment_like(db, user=current_user, comment_id=comment_id)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return CommentLikeRead(comment_id=comment_id, is_liked=liked, likes_count=likes_count)

    @router.post(
        "/users/{user_id}/follow",
        response_model=FollowRead,
        status_code=status.HTTP_201_CREATED,
    )
    def follow(
        user_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            created = follow_user(db, publisher, follower=current_user, user_id=user_id)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return FollowRead.model_validate(created)

    @router.delete("/users/{user_id}/follow", status_code=status.HTTP_204_NO_CONTENT)
    def unfollow(
        user_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            unfollow_user(db, follower=current_user, user_id=user_id)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get("/users/{user_id}/follow-status", response_model=FollowStatusRead)
    def follow_status(
        user_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        following = is_following(db, follower_id=current_user.id, user_id=user_id)
        return FollowStatusRead(user_id=user_id, is_following=following)

    @router.post(
        "/posts/{post_id}/repost",
        response_model=RepostRead,
        status_code=status.HTTP_201_CREATED,
    )
    def repost(
        post_id: int,
        payload: RepostCreate | None = None,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            created = repost_post(
                db,
                publisher,
                user=current_user,
                post_id=post_id,
                comment=payload.comment if payload else None,
            )
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return RepostRead.model_validate(created)

    @router.delete("/posts/{post_id}/repost", status_code=status.HTTP_204_NO_CONTENT)
    def unrepost(
        post_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            unrepost_post(db, user=current_user, post_id=post_id)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.post(
        "/posts/{post_id}/bookmark",
        response_model=BookmarkRead,
        status_code=status.HTTP_201_CREATED,
    )
    def bookmark(
        post_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            created = bookmark_post(db, user=current_user, post_id=post_id)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return BookmarkRead.model_validate(created)

    @router.delete("/posts/{post_id}/bookmark", status_code=status.HTTP_204_NO_CONTENT)
    def unbookmark(
        post_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            remove_bookmark(db, user=current_user, post_id=post_id)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get("/bookmarks", response_model=list[PostRead])
    def read_bookmarks(
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        return [post_to_read(view) for view in list_bookmarks(db, user=current_user)]

    @router.delete("/bookmarks", response_model=ClearedRead)
    def clear_all_bookmarks(
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        removed = clear_bookmarks(db, user=current_user)
        logger.debug("Cleared %s bookmarks for user %s", removed, current_user.id)
        return ClearedRead(removed=removed)

    return router


__all__ = ["build_router"]
