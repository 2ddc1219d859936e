"""Websocket endpoint delivering notifications, messages and typing events."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.concurrency import run_in_threadpool

from writers_guild.application.use_cases.auth import resolve_session_user
from writers_guild.application.use_cases.notifications import mark_notifications_read
from writers_guild.config import get_settings
from writers_guild.domain.entities import User
from writers_guild.domain.errors import AuthenticationError
from writers_guild.infrastructure.database import SessionLocal
from writers_guild.infrastructure.realtime import EventBroadcaster

logger = logging.getLogger(__name__)

AUTH_FAILED_CLOSE_CODE = 4001

_TYPING_EVENTS = {
    "typing_start": "user_typing",
    "typing_stop": "user_stopped_typing",
}


def _authenticate(token: str | None) -> User | None:
    session = SessionLocal()
    try:
        return resolve_session_user(session, token)
    except AuthenticationError:
        return None
    finally:
        session.close()


def _acknowledge(user_id: int, ids: list[Any]) -> int:
    notification_ids = [value for value in ids if isinstance(value, int) and not isinstance(value, bool)]
    if not notification_ids:
        return 0
    session = SessionLocal()
    try:
        return mark_notifications_read(session, user_id=user_id, notification_ids=notification_ids)
    finally:
        session.close()


def build_router(broadcaster: EventBroadcaster) -> APIRouter:
    """Return the router exposing ``/ws`` on top of ``broadcaster``'s registry."""

    router = APIRouter(tags=["realtime"])
    registry = broadcaster.registry

    @router.websocket("/ws")
    async def realtime_websocket(websocket: WebSocket) -> None:
        """Authenticate from the session cookie, then stream events to the user.

        A handshake without a valid session is accepted and immediately
        closed with code 4001 so browsers can tell it apart from network
        failures; the channel never reaches the registry.
        """

        token = websocket.cookies.get(get_settings().session_cookie_name)
        user = await run_in_threadpool(_authenticate, token)
        await websocket.accept()
        if user is None:
            logger.info("Rejected websocket handshake without a valid session")
            await websocket.close(code=AUTH_FAILED_CLOSE_CODE, reason="Authentication required")
            return

        registry.register(user.id, websocket)
        try:
            await websocket.send_json({"type": "auth_success", "userId": user.id})
            while True:
                raw = await websocket.receive_text()
                try:
                    frame = json.loads(raw)
                except json.JSONDecodeError:
                    logger.debug("Ignoring malformed frame from user %s", user.id)
                    continue
                if not isinstance(frame, dict):
                    logger.debug("Ignoring non-object frame from user %s", user.id)
                    continue

                frame_type = frame.get("type")
                if frame_type == "ping":
                    await websocket.send_json({"type": "pong"})
                elif frame_type in _TYPING_EVENTS:
                    await broadcaster.relay(
                        {
                            "type": _TYPING_EVENTS[frame_type],
                            "userId": user.id,
                            "postId": frame.get("postId"),
                        },
                        exclude=websocket,
                    )
                elif frame_type == "ack":
                    ids = frame.get("ids")
                    if isinstance(ids, list) and ids:
                        await run_in_threadpool(_acknowledge, user.id, ids)
                else:
                    logger.debug("Ignoring frame of type %r from user %s", frame_type, user.id)
        except WebSocketDisconnect:
            pass
        finally:
            registry.unregister(user.id, websocket)

    return router


__all__ = ["AUTH_FAILED_CLOSE_CODE", "build_router"]
