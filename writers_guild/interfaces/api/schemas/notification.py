"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .user import UserSummaryRead


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int
    type: str
    actor_id: int | None = None
    post_id: int | None = None
    is_read: bool
    data: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None
    actor: UserSummaryRead | None = None

    model_config = ConfigDict(from_attributes=True)


class UnreadCountRead(BaseModel):
    count: int


class MarkedReadResponse(BaseModel):
    updated: int


__all__ = ["MarkedReadResponse", "NotificationRead", "UnreadCountRead"]
