"""Conversation and message schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .user import UserSummaryRead


class ConversationCreate(BaseModel):
    participant_id: int = Field(..., ge=1)


class ConversationRead(BaseModel):
    id: int
    participant_one_id: int
    participant_two_id: int
    last_message_id: int | None
    last_message_at: datetime | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class MessageCreate(BaseModel):
    content: str = Field(..., max_length=10000)
    message_type: str = Field(default="text", max_length=20)
    attachment_urls: list[str] = Field(default_factory=list)


class MessageRead(BaseModel):
    id: int
    conversation_id: int
    sender_id: int
    content: str
    message_type: str
    attachment_urls: list[str]
    is_read: bool
    read_at: datetime | None
    created_at: datetime | None
    sender: UserSummaryRead | None = None

    model_config = ConfigDict(from_attributes=True)


class ConversationOverviewRead(BaseModel):
    conversation: ConversationRead
    other_participant: UserSummaryRead | None
    last_message: MessageRead | None
    unread_count: int

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "ConversationCreate",
    "ConversationOverviewRead",
    "ConversationRead",
    "MessageCreate",
    "MessageRead",
]
