"""Use cases for following writers."""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.notifications import NotificationSink, notify
from writers_guild.domain.entities import NOTIFICATION_FOLLOW, Follow, User
from writers_guild.domain.errors import DuplicateActionError, NotFoundError, SelfActionError
from writers_guild.infrastructure.repositories import FollowRepository, UserRepository


def follow_user(session: Session, publisher: NotificationSink, *, follower: User, user_id: int) -> Follow:
    if follower.id == user_id:
        raise SelfActionError("Cannot follow yourself")
    target = UserRepository(session).get(user_id)
    if target is None or not target.is_active:
        raise NotFoundError("User not found")

    follows = FollowRepository(session)
    if follows.exists(follower.id, user_id):
        raise DuplicateActionError("Already following user")
    try:
        follow = follows.create(follower.id, user_id)
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise DuplicateActionError("Already following user") from exc
    except SQLAlchemyError:
        session.rollback()
        raise

    notify(
        session,
        publisher,
        recipient_id=user_id,
        actor_id=follower.id,
        kind=NOTIFICATION_FOLLOW,
        data={"username": follower.username},
    )
    return follow


def unfollow_user(session: Session, *, follower: User, user_id: int) -> None:
    if not FollowRepository(session).delete(follower.id, user_id):
        raise NotFoundError("Not following user")
    session.commit()


def is_following(session: Session, *, follower_id: int, user_id: int) -> bool:
    return FollowRepository(session).exists(follower_id, user_id)


__all__ = ["follow_user", "is_following", "unfollow_user"]
