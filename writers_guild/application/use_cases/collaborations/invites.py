"""Use cases for inviting co-writers and answering invitations."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.notifications import NotificationSink, notify
from writers_guild.domain.entities import (
    INVITE_ACCEPTED,
    INVITE_DECLINED,
    NOTIFICATION_COLLABORATION_ACCEPTED,
    NOTIFICATION_COLLABORATION_DECLINED,
    NOTIFICATION_COLLABORATION_INVITE,
    CollaborationInvite,
    User,
)
from writers_guild.domain.errors import (
    DuplicateActionError,
    NotFoundError,
    PermissionDeniedError,
    SelfActionError,
    ValidationFailedError,
)
from writers_guild.infrastructure.repositories import (
    CollaborationInviteRepository,
    PostRepository,
    UserRepository,
)
from writers_guild.utils import utcnow


def invite_collaborator(
    session: Session,
    publisher: NotificationSink,
    *,
    inviter: User,
    post_id: int,
    invitee_id: int,
) -> CollaborationInvite:
    """Invite ``invitee_id`` to co-write a post owned by ``inviter``."""

    post = PostRepository(session).get(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    if post.author_id != inviter.id:
        raise PermissionDeniedError("Only the author can invite collaborators")
    if invitee_id == inviter.id:
        raise SelfActionError("Cannot invite yourself")
    invitee = UserRepository(session).get(invitee_id)
    if invitee is None or not invitee.is_active:
        raise NotFoundError("User not found")
    if invitee_id in post.collaborator_ids:
        raise DuplicateActionError("User is already a collaborator")

    invites = CollaborationInviteRepository(session)
    if invites.get_pending(post_id, invitee_id) is not None:
        raise DuplicateActionError("Invitation already pending")

    invite = invites.create(
        CollaborationInvite(
            id=None,
            post_id=post_id,
            inviter_id=inviter.id,
            invitee_id=invitee_id,
            created_at=utcnow(),
        )
    )
    notify(
        session,
        publisher,
        recipient_id=invitee_id,
        actor_id=inviter.id,
        kind=NOTIFICATION_COLLABORATION_INVITE,
        post_id=post_id,
        data={"invite_id": invite.id, "post_title": post.title},
    )
    return invite


def list_pending_invites(session: Session, *, user: User) -> list[CollaborationInvite]:
    return CollaborationInviteRepository(session).list_pending_for_user(user.id)


def accept_invite(
    session: Session, publisher: NotificationSink, *, user: User, invite_id: int
) -> CollaborationInvite:
    invite = _pending_invite_for(session, user=user, invite_id=invite_id)
    try:
        updated = CollaborationInviteRepository(session).set_status(invite.id, INVITE_ACCEPTED)
        PostRepository(session).add_collaborator(invite.post_id, user.id)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise
    _notify_inviter(session, publisher, invite=updated, kind=NOTIFICATION_COLLABORATION_ACCEPTED)
    return updated


def decline_invite(
    session: Session, publisher: NotificationSink, *, user: User, invite_id: int
) -> CollaborationInvite:
    invite = _pending_invite_for(session, user=user, invite_id=invite_id)
    updated = CollaborationInviteRepository(session).set_status(invite.id, INVITE_DECLINED)
    session.commit()
    _notify_inviter(session, publisher, invite=updated, kind=NOTIFICATION_COLLABORATION_DECLINED)
    return updated


def _pending_invite_for(session: Session, *, user: User, invite_id: int) -> CollaborationInvite:
    invite = CollaborationInviteRepository(session).get(invite_id)
    if invite is None:
        raise NotFoundError("Invitation not found")
    if invite.invitee_id != user.id:
        raise PermissionDeniedError("Only the invited user can answer this invitation")
    if not invite.is_pending:
        raise ValidationFailedError("Invitation was already answered")
    return invite


def _notify_inviter(
    session: Session, publisher: NotificationSink, *, invite: CollaborationInvite, kind: str
) -> None:
    post = PostRepository(session).get(invite.post_id)
    notify(
        session,
        publisher,
        recipient_id=invite.inviter_id,
        actor_id=invite.invitee_id,
        kind=kind,
        post_id=invite.post_id,
        data={"invite_id": invite.id, "post_title": post.title if post else None},
    )


__all__ = ["accept_invite", "decline_invite", "invite_collaborator", "list_pending_invites"]
