"""Use cases for direct messaging."""

from .conversations import (
    MESSAGE_TYPES,
    get_conversation_for,
    list_conversations,
    list_messages,
    mark_conversation_read,
    send_message,
    start_conversation,
)

__all__ = [
    "MESSAGE_TYPES",
    "get_conversation_for",
    "list_conversations",
    "list_messages",
    "mark_conversation_read",
    "send_message",
    "start_conversation",
]
