"""Persistence helpers for collaboration invites."""

from __future__ import annotations

from sqlalchemy.orm import Session

from writers_guild.domain.entities import INVITE_PENDING, CollaborationInvite
from writers_guild.infrastructure.models import CollaborationInviteModel
from writers_guild.utils import utcnow


class CollaborationInviteRepository:
    """Store and transition :class:`CollaborationInvite` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, invite_id: int) -> CollaborationInvite | None:
        model = self.session.get(CollaborationInviteModel, invite_id)
        return self._to_entity(model) if model else None

    def get_pending(self, post_id: int, invitee_id: int) -> CollaborationInvite | None:
        model = (
            self.session.query(CollaborationInviteModel)
            .filter_by(post_id=post_id, invitee_id=invitee_id, status=INVITE_PENDING)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, invite: CollaborationInvite) -> CollaborationInvite:
        model = CollaborationInviteModel(
            post_id=invite.post_id,
            inviter_id=invite.inviter_id,
            invitee_id=invite.invitee_id,
            status=invite.status,
            created_at=invite.created_at or utcnow(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def set_status(self, invite_id: int, status: str) -> CollaborationInvite:
        model = self.session.get(CollaborationInviteModel, invite_id)
        if model is None:
            msg = f"Invite with id {invite_id} not found"
            raise ValueError(msg)
        model.status = status
        model.responded_at = utcnow()
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_pending_for_user(self, invitee_id: int) -> list[CollaborationInvite]:
        query = (
            self.session.query(CollaborationInviteModel)
            .filter_by(invitee_id=invitee_id, status=INVITE_PENDING)
            .order_by(CollaborationInviteModel.created_at.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: CollaborationInviteModel) -> CollaborationInvite:
        return CollaborationInvite(
            id=model.id,
            post_id=model.post_id,
            inviter_id=model.inviter_id,
            invitee_id=model.invitee_id,
            status=model.status,
            created_at=model.created_at,
            responded_at=model.responded_at,
        )


__all__ = ["CollaborationInviteRepository"]
