"""Routes for inviting co-writers and answering invitations."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.collaborations import (
    accept_invite,
    decline_invite,
    invite_collaborator,
    list_pending_invites,
)
from writers_guild.domain.entities import User
from writers_guild.domain.errors import WritersGuildError
from writers_guild.infrastructure.database import get_db
from writers_guild.infrastructure.realtime import EventPublisher
from writers_guild.interfaces.api.dependencies import get_current_user
from writers_guild.interfaces.api.routes_helpers import http_error
from writers_guild.interfaces.api.schemas import CollaborationInviteRead, CollaboratorInvite


def build_router(publisher: EventPublisher) -> APIRouter:
    router = APIRouter(prefix="/api", tags=["collaborations"])

    @router.post(
        "/posts/{post_id}/collaborators",
        response_model=CollaborationInviteRead,
        status_code=status.HTTP_201_CREATED,
    )
    def invite(
        post_id: int,
        payload: CollaboratorInvite,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        """Invite a writer to co-author one of the current user's posts."""

        try:
            created = invite_collaborator(
                db, publisher, inviter=current_user, post_id=post_id, invitee_id=payload.user_id
            )
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return CollaborationInviteRead.model_validate(created)

    @router.get("/collaborations/invites", response_model=list[CollaborationInviteRead])
    def pending_invites(
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        return [
            CollaborationInviteRead.model_validate(invite)
            for invite in list_pending_invites(db, user=current_user)
        ]

    @router.post("/collaborations/{invite_id}/accept", response_model=CollaborationInviteRead)
    def accept(
        invite_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            updated = accept_invite(db, publisher, user=current_user, invite_id=invite_id)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return CollaborationInviteRead.model_validate(updated)

    @router.post("/collaborations/{invite_id}/decline", response_model=CollaborationInviteRead)
    def decline(
        invite_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        try:
            updated = decline_invite(db, publisher, user=current_user, invite_id=invite_id)
        except WritersGuildError as exc:
            raise http_error(exc) from exc
        return CollaborationInviteRead.model_validate(updated)

    return router


__all__ = ["build_router"]
