"""Server-side store for login sessions."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from writers_guild.domain.entities import UserSession
from writers_guild.infrastructure.models import SessionModel


class SessionRepository:
    """Create, look up and revoke :class:`UserSession` rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, user_session: UserSession) -> UserSession:
        model = SessionModel(
            id=user_session.id,
            user_id=user_session.user_id,
            created_at=user_session.created_at,
            expires_at=user_session.expires_at,
        )
        self.session.add(model)
        self.session.commit()
        return self._to_entity(model)

    def get(self, session_id: str) -> UserSession | None:
        model = self.session.get(SessionModel, session_id)
        return self._to_entity(model) if model else None

    def delete(self, session_id: str) -> None:
        self.session.query(SessionModel).filter(SessionModel.id == session_id).delete(
            synchronize_session=False
        )
        self.session.commit()

    def delete_for_user(self, user_id: int) -> None:
        self.session.query(SessionModel).filter(SessionModel.user_id == user_id).delete(
            synchronize_session=False
        )
        self.session.commit()

    def prune_expired(self, now: datetime) -> int:
        deleted = (
            self.session.query(SessionModel)
            .filter(SessionModel.expires_at <= now)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted

    @staticmethod
    def _to_entity(model: SessionModel) -> UserSession:
        return UserSession(
            id=model.id,
            user_id=model.user_id,
            created_at=model.created_at,
            expires_at=model.expires_at,
        )


__all__ = ["SessionRepository"]
