"""Persist a notification and push it to the recipient's open channels."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from sqlalchemy.orm import Session

from writers_guild.domain.entities import Notification
from writers_guild.infrastructure.repositories import NotificationRepository
from writers_guild.utils import utcnow

logger = logging.getLogger(__name__)


class NotificationSink(Protocol):
    def publish_notification(self, notification: Notification) -> None: ...


def notify(
    session: Session,
    publisher: NotificationSink,
    *,
    recipient_id: int | None,
    actor_id: int | None,
    kind: str,
    post_id: int | None = None,
    data: dict[str, Any] | None = None,
) -> Notification | None:
    """Record a ``kind`` notification for ``recipient_id`` and deliver it.

    Runs after the triggering mutation has been committed. Nothing is sent
    when the actor is the recipient. Failures are logged and swallowed so the
    caller's mutation stands; a row that was stored but could not be pushed
    is still returned and will be picked up by the notification list.
    """

    if recipient_id is None or recipient_id == actor_id:
        return None

    notification = Notification(
        id=None,
        user_id=recipient_id,
        type=kind,
        actor_id=actor_id,
        post_id=post_id,
        data=dict(data or {}),
        created_at=utcnow(),
    )
    try:
        saved = NotificationRepository(session).create(notification)
    except Exception:
        session.rollback()
        logger.exception("Could not store %s notification for user %s", kind, recipient_id)
        return None

    try:
        publisher.publish_notification(saved)
    except Exception:
        logger.exception("Could not push %s notification %s to user %s", kind, saved.id, recipient_id)
    return saved


def notify_many(
    session: Session,
    publisher: NotificationSink,
    *,
    recipient_ids: list[int],
    actor_id: int | None,
    kind: str,
    post_id: int | None = None,
    data: dict[str, Any] | None = None,
) -> list[Notification]:
    sent: list[Notification] = []
    for recipient_id in dict.fromkeys(recipient_ids):
        saved = notify(
            session,
            publisher,
            recipient_id=recipient_id,
            actor_id=actor_id,
            kind=kind,
            post_id=post_id,
            data=data,
        )
        if saved is not None:
            sent.append(saved)
    return sent


__all__ = ["NotificationSink", "notify", "notify_many"]
