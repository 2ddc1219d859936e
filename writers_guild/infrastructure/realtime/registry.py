"""In-memory registry of open websocket channels grouped by user."""

from __future__ import annotations

import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """Track which channels are currently open for each user.

    Route handlers declared with ``def`` run in a worker thread pool, so reads
    may race with registrations made on the event loop. Every access goes
    through a lock and lookups hand out immutable snapshots.
    """

    def __init__(self) -> None:
        self._connections: dict[int, set[Any]] = {}
        self._lock = threading.Lock()

    def register(self, user_id: int, channel: Any) -> None:
        """Add ``channel`` to the set of open channels for ``user_id``."""

        with self._lock:
            self._connections.setdefault(user_id, set()).add(channel)
            count = len(self._connections[user_id])
        logger.debug("Registered channel for user %s (%s open)", user_id, count)

    def unregister(self, user_id: int, channel: Any) -> None:
        """Remove ``channel`` for ``user_id``; unknown channels are ignored."""

        with self._lock:
            channels = self._connections.get(user_id)
            if channels is None:
                return
            channels.discard(channel)
            if not channels:
                del self._connections[user_id]
            remaining = len(channels)
        logger.debug("Unregistered channel for user %s (%s open)", user_id, remaining)

    def channels_for(self, user_id: int) -> frozenset[Any]:
        with self._lock:
            return frozenset(self._connections.get(user_id, ()))

    def all_channels(self) -> list[tuple[int, Any]]:
        with self._lock:
            return [
                (user_id, channel)
                for user_id, channels in self._connections.items()
                for channel in channels
            ]

    def connection_count(self, user_id: int) -> int:
        with self._lock:
            return len(self._connections.get(user_id, ()))

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._connections


__all__ = ["ConnectionRegistry"]
