"""Read-side use cases for a user's notifications."""

from collections.abc import Iterable

from sqlalchemy.orm import Session

from writers_guild.domain.entities import Notification
from writers_guild.domain.errors import NotFoundError, PermissionDeniedError
from writers_guild.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session,
    *,
    user_id: int,
    limit: int = 50,
    offset: int = 0,
    unread_only: bool = False,
) -> list[Notification]:
    return NotificationRepository(session).list_for_user(
        user_id, limit=limit, offset=offset, unread_only=unread_only
    )


def count_unread_notifications(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).count_unread(user_id)


def mark_notification_read(session: Session, *, user_id: int, notification_id: int) -> Notification:
    """Mark one notification as read; only its recipient may do so."""

    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    if notification.user_id != user_id:
        raise PermissionDeniedError("Not allowed to modify this notification")
    repository.mark_as_read(user_id, [notification_id])
    notification.is_read = True
    return notification


def mark_notifications_read(session: Session, *, user_id: int, notification_ids: Iterable[int]) -> int:
    return NotificationRepository(session).mark_as_read(user_id, notification_ids)


def mark_all_notifications_read(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).mark_all_as_read(user_id)


__all__ = [
    "count_unread_notifications",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "mark_notifications_read",
]
