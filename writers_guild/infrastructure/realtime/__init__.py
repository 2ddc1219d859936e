"""Realtime delivery over websocket channels."""

from .broadcaster import EventBroadcaster
from .publisher import (
    EventPublisher,
    serialize_conversation,
    serialize_message,
    serialize_notification,
    serialize_user_summary,
)
from .registry import ConnectionRegistry

__all__ = [
    "ConnectionRegistry",
    "EventBroadcaster",
    "EventPublisher",
    "serialize_conversation",
    "serialize_message",
    "serialize_notification",
    "serialize_user_summary",
]
