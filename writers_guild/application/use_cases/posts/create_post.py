"""Use case for publishing posts."""

from __future__ import annotations

from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.notifications import NotificationSink, notify_many
from writers_guild.application.use_cases.users import check_auto_verification
from writers_guild.domain.entities import NOTIFICATION_MENTION, POST_TYPES, Post, PostView, User
from writers_guild.domain.errors import ValidationFailedError
from writers_guild.infrastructure.repositories import PostRepository, UserRepository
from writers_guild.utils import excerpt, extract_mentions, utcnow


def validate_post_fields(*, content: str, post_type: str) -> None:
    if not content or not content.strip():
        raise ValidationFailedError("Post content must not be empty")
    if post_type not in POST_TYPES:
        raise ValidationFailedError(f"Unsupported post type: {post_type}")


def create_post(
    session: Session,
    publisher: NotificationSink,
    *,
    author: User,
    content: str,
    title: str | None = None,
    post_type: str = "text",
    genre: str | None = None,
    formatted_content: dict[str, Any] | None = None,
    is_private: bool = False,
) -> PostView:
    """Publish a post and notify every writer mentioned with ``@username``."""

    validate_post_fields(content=content, post_type=post_type)
    posts = PostRepository(session)
    users = UserRepository(session)

    try:
        post = posts.create(
            Post(
                id=None,
                author_id=author.id,
                title=title,
                content=content,
                formatted_content=formatted_content,
                post_type=post_type,
                genre=genre,
                is_private=is_private,
                created_at=utcnow(),
            )
        )
        users.increment_counter(author.id, "posts_count")
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise
    check_auto_verification(session, author.id)

    mentioned = [user.id for user in users.list_by_usernames(extract_mentions(content))]
    notify_many(
        session,
        publisher,
        recipient_ids=mentioned,
        actor_id=author.id,
        kind=NOTIFICATION_MENTION,
        post_id=post.id,
        data={"post_title": post.title, "excerpt": excerpt(post.content)},
    )

    return posts.get_view(post.id, viewer_id=author.id)


__all__ = ["create_post", "validate_post_fields"]
