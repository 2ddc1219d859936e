"""Synchronous facade that hands domain events to the broadcaster."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any

from anyio import from_thread

from writers_guild.domain.entities import Conversation, Message, Notification, UserSummary

from .broadcaster import EventBroadcaster


class EventPublisher:
    """Serialize notifications and messages and schedule their delivery.

    Use cases run inside the worker threads FastAPI uses for ``def``
    endpoints, where delivery blocks on the event loop through
    :func:`anyio.from_thread.run`. When called from the loop itself the send
    is scheduled as a task instead.
    """

    def __init__(self, broadcaster: EventBroadcaster) -> None:
        self._broadcaster = broadcaster
        self._pending: set[asyncio.Task[Any]] = set()

    @property
    def broadcaster(self) -> EventBroadcaster:
        return self._broadcaster

    def publish(self, user_id: int, payload: dict[str, Any]) -> None:
        """Schedule ``payload`` for every open channel of ``user_id``."""

        self._schedule(self._broadcaster.broadcast, user_id, payload)

    def publish_notification(self, notification: Notification) -> None:
        payload = {"type": "notification", "data": serialize_notification(notification)}
        self.publish(notification.user_id, payload)

    def publish_message(
        self,
        recipient_id: int,
        message: Message,
        conversation: Conversation,
    ) -> None:
        data = serialize_message(message)
        data["conversation"] = serialize_conversation(conversation)
        data["sender_id"] = message.sender_id
        self.publish(recipient_id, {"type": "new_message", "data": data})

    def _schedule(self, func: Callable[..., Awaitable[Any]], *args: Any) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            from_thread.run(func, *args)
        else:
            task = loop.create_task(func(*args))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def serialize_user_summary(summary: UserSummary | None) -> dict[str, Any] | None:
    if summary is None:
        return None
    return {
        "id": summary.id,
        "username": summary.username,
        "display_name": summary.display_name,
        "profile_image_url": summary.profile_image_url,
        "is_verified": summary.is_verified,
    }


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    return {
        "id": notification.id,
        "user_id": notification.user_id,
        "type": notification.type,
        "actor_id": notification.actor_id,
        "post_id": notification.post_id,
        "is_read": notification.is_read,
        "data": dict(notification.data or {}),
        "created_at": _isoformat(notification.created_at),
        "actor": serialize_user_summary(notification.actor),
    }


def serialize_message(message: Message) -> dict[str, Any]:
    return {
        "id": message.id,
        "conversation_id": message.conversation_id,
        "sender_id": message.sender_id,
        "content": message.content,
        "message_type": message.message_type,
        "attachment_urls": list(message.attachment_urls or []),
        "is_read": message.is_read,
        "read_at": _isoformat(message.read_at),
        "created_at": _isoformat(message.created_at),
        "sender": serialize_user_summary(message.sender),
    }


def serialize_conversation(conversation: Conversation) -> dict[str, Any]:
    return {
        "id": conversation.id,
        "participant_one_id": conversation.participant_one_id,
        "participant_two_id": conversation.participant_two_id,
        "last_message_id": conversation.last_message_id,
        "last_message_at": _isoformat(conversation.last_message_at),
    }


__all__ = [
    "EventPublisher",
    "serialize_conversation",
    "serialize_message",
    "serialize_notification",
    "serialize_user_summary",
]
