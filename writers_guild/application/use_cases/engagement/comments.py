"""Use cases for comments, nested replies and comment likes."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.notifications import NotificationSink, notify
from writers_guild.application.use_cases.posts import get_visible_post
from writers_guild.application.use_cases.users import check_auto_verification
from writers_guild.domain.entities import MAX_COMMENT_DEPTH, NOTIFICATION_COMMENT, Comment, User
from writers_guild.domain.errors import NotFoundError, ValidationFailedError
from writers_guild.infrastructure.repositories import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from writers_guild.utils import excerpt, utcnow


def add_comment(
    session: Session,
    publisher: NotificationSink,
    *,
    user: User,
    post_id: int,
    content: str,
    parent_id: int | None = None,
) -> Comment:
    """Comment on a post, or reply to one of its comments.

    Replies nest one level below their parent, up to ``MAX_COMMENT_DEPTH``;
    deeper replies stay at the last level. The post author is notified of
    top level comments and the parent author of replies.
    """

    if not content or not content.strip():
        raise ValidationFailedError("Comment content must not be empty")

    post = get_visible_post(session, post_id, viewer_id=user.id)
    comments = CommentRepository(session)

    level = 0
    recipient_id = post.author_id
    if parent_id is not None:
        parent = comments.get(parent_id)
        if parent is None or parent.post_id != post_id:
            raise NotFoundError("Parent comment not found")
        level = min(parent.level + 1, MAX_COMMENT_DEPTH)
        recipient_id = parent.user_id

    try:
        comment = comments.create(
            Comment(
                id=None,
                user_id=user.id,
                post_id=post_id,
                content=content.strip(),
                parent_id=parent_id,
                level=level,
                created_at=utcnow(),
            )
        )
        PostRepository(session).adjust_counter(post_id, "comments_count", 1)
        UserRepository(session).increment_counter(user.id, "comments_count")
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise
    check_auto_verification(session, user.id)

    notify(
        session,
        publisher,
        recipient_id=recipient_id,
        actor_id=user.id,
        kind=NOTIFICATION_COMMENT,
        post_id=post_id,
        data={
            "comment_id": comment.id,
            "parent_id": parent_id,
            "post_title": post.title,
            "excerpt": excerpt(comment.content),
        },
    )
    return comment


def reply_to_comment(
    session: Session,
    publisher: NotificationSink,
    *,
    user: User,
    comment_id: int,
    content: str,
) -> Comment:
    parent = CommentRepository(session).get(comment_id)
    if parent is None:
        raise NotFoundError("Comment not found")
    return add_comment(
        session,
        publisher,
        user=user,
        post_id=parent.post_id,
        content=content,
        parent_id=comment_id,
    )


def list_comments(session: Session, *, post_id: int, viewer_id: int | None = None) -> list[Comment]:
    get_visible_post(session, post_id, viewer_id=viewer_id)
    return CommentRepository(session).list_for_post(post_id, viewer_id=viewer_id)


def list_replies(session: Session, *, comment_id: int, viewer_id: int | None = None) -> list[Comment]:
    repository = CommentRepository(session)
    parent = repository.get(comment_id)
    if parent is None:
        raise NotFoundError("Comment not found")
    get_visible_post(session, parent.post_id, viewer_id=viewer_id)
    return repository.list_replies(comment_id, viewer_id=viewer_id)


def toggle_comment_like(session: Session, *, user: User, comment_id: int) -> tuple[bool, int]:
    """Like the comment, or remove the like if present.

    Returns the new liked state and the resulting like count.
    """

    repository = CommentRepository(session)
    comment = repository.get(comment_id)
    if comment is None:
        raise NotFoundError("Comment not found")
    get_visible_post(session, comment.post_id, viewer_id=user.id)

    try:
        if repository.has_liked(user.id, comment_id):
            repository.unlike(user.id, comment_id)
            liked = False
        else:
            repository.like(user.id, comment_id)
            liked = True
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise
    return liked, repository.get(comment_id).likes_count


__all__ = ["add_comment", "list_comments", "list_replies", "reply_to_comment", "toggle_comment_like"]
