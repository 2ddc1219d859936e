"""Use cases for reposting posts."""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.notifications import NotificationSink, notify
from writers_guild.application.use_cases.posts import get_visible_post
from writers_guild.domain.entities import NOTIFICATION_REPOST, Repost, User
from writers_guild.domain.errors import DuplicateActionError, NotFoundError
from writers_guild.infrastructure.repositories import PostRepository, RepostRepository
from writers_guild.utils import excerpt


def repost_post(
    session: Session,
    publisher: NotificationSink,
    *,
    user: User,
    post_id: int,
    comment: str | None = None,
) -> Repost:
    """Repost ``post_id``, optionally quoting it with ``comment``."""

    post = get_visible_post(session, post_id, viewer_id=user.id)
    reposts = RepostRepository(session)
    if reposts.exists(user.id, post_id):
        raise DuplicateActionError("Post already reposted")
    try:
        repost = reposts.create(user.id, post_id, (comment or "").strip() or None)
        PostRepository(session).adjust_counter(post_id, "reposts_count", 1)
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise DuplicateActionError("Post already reposted") from exc
    except SQLAlchemyError:
        session.rollback()
        raise

    notify(
        session,
        publisher,
        recipient_id=post.author_id,
        actor_id=user.id,
        kind=NOTIFICATION_REPOST,
        post_id=post_id,
        data={"post_title": post.title, "excerpt": excerpt(post.content), "comment": repost.comment},
    )
    return repost


def unrepost_post(session: Session, *, user: User, post_id: int) -> None:
    try:
        if not RepostRepository(session).delete(user.id, post_id):
            raise NotFoundError("Post is not reposted")
        PostRepository(session).adjust_counter(post_id, "reposts_count", -1)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise


__all__ = ["repost_post", "unrepost_post"]
