"""Collaboration invite and report schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CollaboratorInvite(BaseModel):
    user_id: int = Field(..., ge=1)


class CollaborationInviteRead(BaseModel):
    id: int
    post_id: int
    inviter_id: int
    invitee_id: int
    status: str
    created_at: datetime | None
    responded_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ReportCreate(BaseModel):
    reason: str = Field(..., min_length=1, max_length=50)
    details: str | None = Field(default=None, max_length=2000)


class ReportRead(BaseModel):
    id: int
    post_id: int
    reporter_id: int
    reason: str
    details: str | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["CollaborationInviteRead", "CollaboratorInvite", "ReportCreate", "ReportRead"]
