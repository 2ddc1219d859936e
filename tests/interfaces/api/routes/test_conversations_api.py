"""Integration tests for direct messages and their realtime delivery."""

from __future__ import annotations

from sqlalchemy import event

from writers_guild.infrastructure.database import SessionLocal
from writers_guild.infrastructure.models import ConversationModel
from writers_guild.infrastructure.repositories import ConversationRepository
from writers_guild.utils import utcnow


def _open_conversation(client, user, other):
    response = client.post(
        "/api/conversations", json={"participant_id": other.id}, headers=user.headers
    )
    assert response.status_code == 200, response.text
    return response.json()


def test_conversation_is_shared_by_the_pair(client, signup):
    alice, bob = signup("alice"), signup("bob")

    from_alice = _open_conversation(client, alice, bob)
    from_bob = _open_conversation(client, bob, alice)
    again = _open_conversation(client, alice, bob)

    assert from_alice["id"] == from_bob["id"] == again["id"]
    assert {from_alice["participant_one_id"], from_alice["participant_two_id"]} == {
        alice.id,
        bob.id,
    }


def test_simultaneous_first_contact_reuses_the_stored_pair(client, signup):
    alice, bob = signup("alice"), signup("bob")
    first, second = sorted((alice.id, bob.id))

    def open_from_another_request(session, flush_context, instances):
        other = SessionLocal()
        try:
            now = utcnow()
            other.add(
                ConversationModel(
                    participant_one_id=first,
                    participant_two_id=second,
                    created_at=now,
                    updated_at=now,
                )
            )
            other.commit()
        finally:
            other.close()

    session = SessionLocal()
    try:
        event.listen(session, "before_flush", open_from_another_request, once=True)
        conversation = ConversationRepository(session).get_or_create(bob.id, alice.id)
        stored = [row.id for row in session.query(ConversationModel).all()]
    finally:
        session.close()

    assert stored == [conversation.id]
    assert (conversation.participant_one_id, conversation.participant_two_id) == (first, second)
    assert _open_conversation(client, alice, bob)["id"] == conversation.id


def test_conversation_with_self_is_rejected(client, signup):
    alice = signup("alice")

    response = client.post(
        "/api/conversations", json={"participant_id": alice.id}, headers=alice.headers
    )

    assert response.status_code == 400


def test_message_reaches_every_tab_of_the_recipient(client, signup):
    alice, bob = signup("alice"), signup("bob")
    conversation = _open_conversation(client, alice, bob)

    with client.websocket_connect("/ws", headers=bob.headers) as phone:
        with client.websocket_connect("/ws", headers=bob.headers) as laptop:
            phone.receive_json()
            laptop.receive_json()

            response = client.post(
                f"/api/conversations/{conversation['id']}/messages",
                json={"content": "  Draft is ready  "},
                headers=alice.headers,
            )
            assert response.status_code == 201
            message = response.json()

            for tab in (phone, laptop):
                event = tab.receive_json()
                assert event["type"] == "new_message"
                assert event["data"]["id"] == message["id"]
                assert event["data"]["content"] == "Draft is ready"
                assert event["data"]["sender_id"] == alice.id
                assert event["data"]["conversation"]["id"] == conversation["id"]


def test_sender_channel_does_not_receive_its_own_message(client, signup):
    alice, bob = signup("alice"), signup("bob")
    conversation = _open_conversation(client, alice, bob)

    with client.websocket_connect("/ws", headers=alice.headers) as websocket:
        websocket.receive_json()
        client.post(
            f"/api/conversations/{conversation['id']}/messages",
            json={"content": "Hello"},
            headers=alice.headers,
        )
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}


def test_outsider_cannot_read_or_write(client, signup):
    alice, bob, mallory = signup("alice"), signup("bob"), signup("mallory")
    conversation = _open_conversation(client, alice, bob)
    url = f"/api/conversations/{conversation['id']}/messages"

    read = client.get(url, headers=mallory.headers)
    write = client.post(url, json={"content": "hi"}, headers=mallory.headers)

    assert read.status_code == 403
    assert write.status_code == 403


def test_empty_message_is_rejected(client, signup):
    alice, bob = signup("alice"), signup("bob")
    conversation = _open_conversation(client, alice, bob)

    response = client.post(
        f"/api/conversations/{conversation['id']}/messages",
        json={"content": "   "},
        headers=alice.headers,
    )

    assert response.status_code == 400


def test_history_unread_counts_and_read_marker(client, signup):
    alice, bob = signup("alice"), signup("bob")
    conversation = _open_conversation(client, alice, bob)
    url = f"/api/conversations/{conversation['id']}/messages"
    for content in ("one", "two", "three"):
        client.post(url, json={"content": content}, headers=alice.headers)

    history = client.get(url, headers=bob.headers).json()
    overview = client.get("/api/conversations", headers=bob.headers).json()

    assert [item["content"] for item in history] == ["one", "two", "three"]
    assert len(overview) == 1
    assert overview[0]["unread_count"] == 3
    assert overview[0]["last_message"]["content"] == "three"
    assert overview[0]["other_participant"]["id"] == alice.id

    marked = client.put(f"/api/conversations/{conversation['id']}/read", headers=bob.headers)
    assert marked.json() == {"updated": 3}
    after = client.get("/api/conversations", headers=bob.headers).json()
    assert after[0]["unread_count"] == 0


def test_typing_events_are_relayed_to_other_channels(client, signup):
    alice, bob = signup("alice"), signup("bob")

    with client.websocket_connect("/ws", headers=alice.headers) as typist:
        with client.websocket_connect("/ws", headers=bob.headers) as watcher:
            typist.receive_json()
            watcher.receive_json()

            typist.send_json({"type": "typing_start", "postId": 12, "userId": 999})
            assert watcher.receive_json() == {"type": "user_typing", "userId": alice.id, "postId": 12}

            typist.send_json({"type": "typing_stop", "postId": 12})
            assert watcher.receive_json() == {
                "type": "user_stopped_typing",
                "userId": alice.id,
                "postId": 12,
            }

            typist.send_json({"type": "ping"})
            assert typist.receive_json() == {"type": "pong"}
