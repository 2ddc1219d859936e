"""Use cases for liking and unliking posts."""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.notifications import NotificationSink, notify
from writers_guild.application.use_cases.posts import get_visible_post
from writers_guild.domain.entities import NOTIFICATION_LIKE, Post, User
from writers_guild.domain.errors import DuplicateActionError, NotFoundError
from writers_guild.infrastructure.repositories import LikeRepository, PostRepository
from writers_guild.utils import excerpt


def like_post(session: Session, publisher: NotificationSink, *, user: User, post_id: int) -> Post:
    """Like ``post_id`` once and tell its author about it.

    The like row and ``likes_count`` are committed together.
    """

    post = get_visible_post(session, post_id, viewer_id=user.id)
    likes = LikeRepository(session)
    posts = PostRepository(session)

    if likes.exists(user.id, post_id):
        raise DuplicateActionError("Post already liked")
    try:
        likes.create(user.id, post_id)
        posts.adjust_counter(post_id, "likes_count", 1)
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise DuplicateActionError("Post already liked") from exc
    except SQLAlchemyError:
        session.rollback()
        raise

    notify(
        session,
        publisher,
        recipient_id=post.author_id,
        actor_id=user.id,
        kind=NOTIFICATION_LIKE,
        post_id=post_id,
        data={"post_title": post.title, "excerpt": excerpt(post.content)},
    )
    return posts.get(post_id)


def unlike_post(session: Session, *, user: User, post_id: int) -> Post:
    posts = PostRepository(session)
    if posts.get(post_id) is None:
        raise NotFoundError("Post not found")
    try:
        if not LikeRepository(session).delete(user.id, post_id):
            raise NotFoundError("Post is not liked")
        posts.adjust_counter(post_id, "likes_count", -1)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise
    return posts.get(post_id)


__all__ = ["like_post", "unlike_post"]
