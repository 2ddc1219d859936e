"""Push JSON payloads to the open channels of a user."""

from __future__ import annotations

import json
import logging
from typing import Any

from starlette.websockets import WebSocketState

from .registry import ConnectionRegistry

logger = logging.getLogger(__name__)


def _is_open(channel: Any) -> bool:
    return (
        getattr(channel, "client_state", None) == WebSocketState.CONNECTED
        and getattr(channel, "application_state", None) == WebSocketState.CONNECTED
    )


class EventBroadcaster:
    """Best-effort delivery of payloads to the channels in a registry.

    Nothing is queued: when a user has no open channel the payload is
    dropped, and clients recover missed events from the notification and
    message endpoints.
    """

    def __init__(self, registry: ConnectionRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ConnectionRegistry:
        return self._registry

    async def broadcast(self, user_id: int, payload: dict[str, Any]) -> int:
        """Send ``payload`` to every open channel of ``user_id``.

        Returns the number of channels the payload was written to.
        """

        channels = self._registry.channels_for(user_id)
        if not channels:
            return 0
        text = json.dumps(payload, default=str)
        delivered = 0
        for channel in channels:
            if await self._send(user_id, channel, text):
                delivered += 1
        return delivered

    async def relay(self, payload: dict[str, Any], *, exclude: Any = None) -> int:
        """Send ``payload`` to every open channel except ``exclude``."""

        targets = [
            (user_id, channel)
            for user_id, channel in self._registry.all_channels()
            if channel is not exclude
        ]
        if not targets:
            return 0
        text = json.dumps(payload, default=str)
        delivered = 0
        for user_id, channel in targets:
            if await self._send(user_id, channel, text):
                delivered += 1
        return delivered

    async def _send(self, user_id: int, channel: Any, text: str) -> bool:
        if not _is_open(channel):
            logger.debug("Skipping closed channel for user %s", user_id)
            self._registry.unregister(user_id, channel)
            return False
        try:
            await channel.send_text(text)
        except Exception:
            logger.debug("Delivery to a channel of user %s failed", user_id, exc_info=True)
            self._registry.unregister(user_id, channel)
            return False
        return True


__all__ = ["EventBroadcaster"]
