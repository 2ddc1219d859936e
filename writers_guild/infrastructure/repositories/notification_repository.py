"""Persistence helpers for notifications."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import func
from sqlalchemy.orm import Session

from writers_guild.domain.entities import Notification
from writers_guild.infrastructure.models import NotificationModel
from writers_guild.utils import utcnow

from .user_repository import UserRepository


class NotificationRepository:
    """Provide persistence operations for notifications."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            user_id=notification.user_id,
            type=notification.type,
            actor_id=notification.actor_id,
            post_id=notification.post_id,
            is_read=notification.is_read,
            data=dict(notification.data or {}),
            created_at=notification.created_at or utcnow(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list_for_user(
        self,
        user_id: int,
        *,
        limit: int = 50,
        offset: int = 0,
        unread_only: bool = False,
    ) -> list[Notification]:
        query = self.session.query(NotificationModel).filter(NotificationModel.user_id == user_id)
        if unread_only:
            query = query.filter(NotificationModel.is_read.is_(False))
        query = (
            query.order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def count_unread(self, user_id: int) -> int:
        total = (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read.is_(False))
            .scalar()
        )
        return int(total or 0)

    def mark_as_read(self, user_id: int, notification_ids: Iterable[int]) -> int:
        """Mark the given notifications read, ignoring ids owned by other users."""

        ids = [int(notification_id) for notification_id in notification_ids]
        if not ids:
            return 0
        updated = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.id.in_(ids))
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    def mark_all_as_read(self, user_id: int) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read.is_(False))
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            actor_id=model.actor_id,
            post_id=model.post_id,
            is_read=bool(model.is_read),
            data=dict(model.data or {}),
            created_at=model.created_at,
            actor=UserRepository.to_summary(model.actor),
        )


__all__ = ["NotificationRepository"]
