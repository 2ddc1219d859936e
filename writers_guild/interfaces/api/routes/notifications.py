"""Endpoints for reading and acknowledging notifications."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.notifications import (
    count_unread_notifications,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from writers_guild.domain.entities import User
from writers_guild.domain.errors import WritersGuildError
from writers_guild.infrastructure.database import get_db
from writers_guild.interfaces.api.dependencies import get_current_user
from writers_guild.interfaces.api.routes_helpers import http_error
from writers_guild.interfaces.api.schemas import (
    MarkedReadResponse,
    NotificationRead,
    UnreadCountRead,
)

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationRead])
def read_notifications(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    unread_only: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Return the most recent notifications for the authenticated user.

    This is how clients recover events pushed while they had no open
    channel.
    """

    notifications = list_notifications(
        db, user_id=current_user.id, limit=limit, offset=offset, unread_only=unread_only
    )
    return [NotificationRead.model_validate(notification) for notification in notifications]


@router.get("/unread-count", response_model=UnreadCountRead)
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return UnreadCountRead(count=count_unread_notifications(db, user_id=current_user.id))


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def read_one(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        notification = mark_notification_read(
            db, user_id=current_user.id, notification_id=notification_id
        )
    except WritersGuildError as exc:
        raise http_error(exc) from exc
    return NotificationRead.model_validate(notification)


@router.put("/read-all", response_model=MarkedReadResponse)
def read_all(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return MarkedReadResponse(updated=mark_all_notifications_read(db, user_id=current_user.id))
