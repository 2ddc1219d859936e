"""Tests for fan-out of payloads to registered channels."""

import asyncio
import json

from starlette.websockets import WebSocketState

from writers_guild.infrastructure.realtime import ConnectionRegistry, EventBroadcaster


class FakeChannel:
    """Stand-in for a websocket recording what it was sent."""

    def __init__(self, *, open_: bool = True, fail: bool = False) -> None:
        state = WebSocketState.CONNECTED if open_ else WebSocketState.DISCONNECTED
        self.client_state = state
        self.application_state = state
        self.fail = fail
        self.sent: list[str] = []

    async def send_text(self, text: str) -> None:
        if self.fail:
            raise RuntimeError("connection reset")
        self.sent.append(text)


def _setup(*channels_by_user):
    registry = ConnectionRegistry()
    for user_id, channel in channels_by_user:
        registry.register(user_id, channel)
    return registry, EventBroadcaster(registry)


def test_broadcast_without_channels_is_a_no_op():
    registry, broadcaster = _setup()

    delivered = asyncio.run(broadcaster.broadcast(42, {"type": "notification"}))

    assert delivered == 0
    assert 42 not in registry


def test_broadcast_sends_one_identical_copy_per_channel():
    tabs = [FakeChannel(), FakeChannel(), FakeChannel()]
    bystander = FakeChannel()
    _, broadcaster = _setup(*((1, tab) for tab in tabs), (2, bystander))
    payload = {"type": "notification", "data": {"id": 10}}

    delivered = asyncio.run(broadcaster.broadcast(1, payload))

    assert delivered == 3
    for tab in tabs:
        assert [json.loads(text) for text in tab.sent] == [payload]
    assert len({tab.sent[0] for tab in tabs}) == 1
    assert bystander.sent == []


def test_closed_channel_is_skipped_and_unregistered():
    live, closed = FakeChannel(), FakeChannel(open_=False)
    registry, broadcaster = _setup((1, live), (1, closed))

    delivered = asyncio.run(broadcaster.broadcast(1, {"type": "pong"}))

    assert delivered == 1
    assert closed.sent == []
    assert registry.channels_for(1) == frozenset({live})


def test_failing_channel_does_not_stop_delivery_to_others():
    broken, healthy = FakeChannel(fail=True), FakeChannel()
    registry, broadcaster = _setup((1, broken), (1, healthy))

    delivered = asyncio.run(broadcaster.broadcast(1, {"type": "notification"}))

    assert delivered == 1
    assert len(healthy.sent) == 1
    assert registry.channels_for(1) == frozenset({healthy})


def test_relay_skips_the_sending_channel():
    sender, other_tab, other_user = FakeChannel(), FakeChannel(), FakeChannel()
    _, broadcaster = _setup((1, sender), (1, other_tab), (2, other_user))
    payload = {"type": "user_typing", "userId": 1, "postId": 5}

    delivered = asyncio.run(broadcaster.relay(payload, exclude=sender))

    assert delivered == 2
    assert sender.sent == []
    assert json.loads(other_tab.sent[0]) == payload
    assert json.loads(other_user.sent[0]) == payload
