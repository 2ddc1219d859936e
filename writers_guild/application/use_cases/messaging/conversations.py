"""Use cases for two-party conversations and direct messages."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from writers_guild.domain.entities import Conversation, ConversationOverview, Message, User
from writers_guild.domain.errors import (
    NotFoundError,
    PermissionDeniedError,
    SelfActionError,
    ValidationFailedError,
)
from writers_guild.infrastructure.realtime import EventPublisher
from writers_guild.infrastructure.repositories import ConversationRepository, UserRepository
from writers_guild.utils import utcnow

logger = logging.getLogger(__name__)

MESSAGE_TYPES = ("text", "image", "file")


def start_conversation(session: Session, *, user: User, participant_id: int) -> Conversation:
    """Return the conversation between ``user`` and ``participant_id``.

    The pair is unordered, so both participants get the same conversation.
    """

    if participant_id == user.id:
        raise SelfActionError("Cannot start a conversation with yourself")
    participant = UserRepository(session).get(participant_id)
    if participant is None or not participant.is_active:
        raise NotFoundError("User not found")
    return ConversationRepository(session).get_or_create(user.id, participant_id)


def list_conversations(session: Session, *, user: User) -> list[ConversationOverview]:
    return ConversationRepository(session).list_for_user(user.id)


def get_conversation_for(session: Session, *, user: User, conversation_id: int) -> Conversation:
    conversation = ConversationRepository(session).get(conversation_id)
    if conversation is None:
        raise NotFoundError("Conversation not found")
    if not conversation.has_participant(user.id):
        raise PermissionDeniedError("Access denied to this conversation")
    return conversation


def list_messages(
    session: Session,
    *,
    user: User,
    conversation_id: int,
    limit: int = 50,
    offset: int = 0,
) -> list[Message]:
    get_conversation_for(session, user=user, conversation_id=conversation_id)
    return ConversationRepository(session).list_messages(conversation_id, limit=limit, offset=offset)


def send_message(
    session: Session,
    publisher: EventPublisher,
    *,
    sender: User,
    conversation_id: int,
    content: str,
    message_type: str = "text",
    attachment_urls: list[str] | None = None,
) -> Message:
    """Store a message, then push it to every open channel of the recipient.

    The stored message is the durable record; a failed push is logged and
    the recipient finds the message when the conversation is next loaded.
    """

    if not content or not content.strip():
        raise ValidationFailedError("Message content is required")
    if message_type not in MESSAGE_TYPES:
        raise ValidationFailedError(f"Unsupported message type: {message_type}")
    conversation = get_conversation_for(session, user=sender, conversation_id=conversation_id)

    repository = ConversationRepository(session)
    message = repository.add_message(
        Message(
            id=None,
            conversation_id=conversation.id,
            sender_id=sender.id,
            content=content.strip(),
            message_type=message_type,
            attachment_urls=list(attachment_urls or []),
            created_at=utcnow(),
        )
    )
    conversation = repository.get(conversation.id)

    recipient_id = conversation.other_participant_id(sender.id)
    try:
        publisher.publish_message(recipient_id, message, conversation)
    except Exception:
        logger.exception("Could not push message %s to user %s", message.id, recipient_id)
    return message


def mark_conversation_read(session: Session, *, user: User, conversation_id: int) -> int:
    get_conversation_for(session, user=user, conversation_id=conversation_id)
    return ConversationRepository(session).mark_read(conversation_id, user.id)


__all__ = [
    "MESSAGE_TYPES",
    "get_conversation_for",
    "list_conversations",
    "list_messages",
    "mark_conversation_read",
    "send_message",
    "start_conversation",
]
