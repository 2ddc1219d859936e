"""Domain entities for direct messaging."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .post import UserSummary


@dataclass
class Conversation:
    """An unordered pair of participants exchanging messages."""

    id: int | None
    participant_one_id: int
    participant_two_id: int
    last_message_id: int | None = None
    last_message_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_participant(self, user_id: int) -> bool:
        return user_id in (self.participant_one_id, self.participant_two_id)

    def other_participant_id(self, user_id: int) -> int:
        if user_id == self.participant_one_id:
            return self.participant_two_id
        return self.participant_one_id


@dataclass
class Message:
    """A message sent inside a conversation."""

    id: int | None
    conversation_id: int
    sender_id: int
    content: str
    message_type: str = "text"
    attachment_urls: list[str] = field(default_factory=list)
    is_read: bool = False
    read_at: datetime | None = None
    created_at: datetime | None = None
    sender: UserSummary | None = None


@dataclass
class ConversationOverview:
    """A conversation as seen by one participant."""

    conversation: Conversation
    other_participant: UserSummary | None
    last_message: Message | None = None
    unread_count: int = 0


__all__ = ["Conversation", "ConversationOverview", "Message"]
