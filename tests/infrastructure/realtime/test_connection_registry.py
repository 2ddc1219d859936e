"""Tests for the in-memory websocket connection registry."""

from writers_guild.infrastructure.realtime import ConnectionRegistry


class _Channel:
    pass


def test_register_tracks_every_channel_of_a_user():
    registry = ConnectionRegistry()
    first, second = _Channel(), _Channel()

    registry.register(7, first)
    registry.register(7, second)

    assert registry.channels_for(7) == frozenset({first, second})
    assert registry.connection_count(7) == 2
    assert 7 in registry


def test_register_is_idempotent_for_the_same_channel():
    registry = ConnectionRegistry()
    channel = _Channel()

    registry.register(1, channel)
    registry.register(1, channel)

    assert registry.connection_count(1) == 1


def test_unregister_drops_the_user_with_the_last_channel():
    registry = ConnectionRegistry()
    first, second = _Channel(), _Channel()
    registry.register(3, first)
    registry.register(3, second)

    registry.unregister(3, first)
    assert registry.channels_for(3) == frozenset({second})

    registry.unregister(3, second)
    assert 3 not in registry
    assert registry.channels_for(3) == frozenset()


def test_unregister_unknown_channel_is_a_no_op():
    registry = ConnectionRegistry()
    known = _Channel()
    registry.register(5, known)

    registry.unregister(5, _Channel())
    registry.unregister(99, known)

    assert registry.channels_for(5) == frozenset({known})


def test_channels_for_returns_a_snapshot():
    registry = ConnectionRegistry()
    channel = _Channel()
    registry.register(2, channel)

    snapshot = registry.channels_for(2)
    registry.unregister(2, channel)

    assert snapshot == frozenset({channel})


def test_all_channels_lists_each_user_channel_pair():
    registry = ConnectionRegistry()
    a, b, c = _Channel(), _Channel(), _Channel()
    registry.register(1, a)
    registry.register(1, b)
    registry.register(2, c)

    assert sorted(
        (user_id, id(channel)) for user_id, channel in registry.all_channels()
    ) == sorted([(1, id(a)), (1, id(b)), (2, id(c))])
