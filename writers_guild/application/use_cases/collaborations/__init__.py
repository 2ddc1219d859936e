"""Use cases for post collaboration."""

from .invites import accept_invite, decline_invite, invite_collaborator, list_pending_invites

__all__ = ["accept_invite", "decline_invite", "invite_collaborator", "list_pending_invites"]
