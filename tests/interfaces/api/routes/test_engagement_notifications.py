"""Integration tests for engagement actions and the notifications they emit."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from writers_guild.infrastructure.realtime import (
    ConnectionRegistry,
    EventBroadcaster,
    EventPublisher,
)
from writers_guild.infrastructure.repositories import NotificationRepository, PostRepository


class FailingPublisher(EventPublisher):
    """Publisher whose delivery always blows up."""

    def publish_notification(self, notification):
        raise RuntimeError("broadcast unavailable")


def _notifications(client, writer):
    response = client.get("/api/notifications", headers=writer.headers)
    assert response.status_code == 200
    return response.json()


def test_double_like_is_rejected_and_counted_once(client, signup, make_post):
    author, reader = signup("author"), signup("reader")
    post = make_post(author)

    first = client.post(f"/api/posts/{post['id']}/like", headers=reader.headers)
    second = client.post(f"/api/posts/{post['id']}/like", headers=reader.headers)

    assert first.status_code == 200
    assert first.json() == {"post_id": post["id"], "is_liked": True, "likes_count": 1}
    assert second.status_code == 409
    assert second.json()["detail"] == "Post already liked"
    refreshed = client.get(f"/api/posts/{post['id']}", headers=reader.headers).json()
    assert refreshed["likes_count"] == 1
    assert refreshed["is_liked"] is True
    assert len(_notifications(client, author)) == 1


def test_unlike_restores_count_and_missing_like_is_404(client, signup, make_post):
    author, reader = signup("author"), signup("reader")
    post = make_post(author)
    client.post(f"/api/posts/{post['id']}/like", headers=reader.headers)

    removed = client.delete(f"/api/posts/{post['id']}/like", headers=reader.headers)
    missing = client.delete(f"/api/posts/{post['id']}/like", headers=reader.headers)

    assert removed.status_code == 200
    assert removed.json()["likes_count"] == 0
    assert missing.status_code == 404


def test_liking_own_post_creates_no_notification(client, signup, make_post):
    author = signup("author")
    post = make_post(author)

    response = client.post(f"/api/posts/{post['id']}/like", headers=author.headers)

    assert response.status_code == 200
    assert _notifications(client, author) == []


def test_offline_recipient_finds_notification_later(client, signup, make_post):
    author, reader = signup("author"), signup("reader")
    post = make_post(author, "Chapter one", title="Opening")

    client.post(f"/api/posts/{post['id']}/like", headers=reader.headers)

    notifications = _notifications(client, author)
    assert len(notifications) == 1
    notification = notifications[0]
    assert notification["type"] == "like"
    assert notification["actor_id"] == reader.id
    assert notification["post_id"] == post["id"]
    assert notification["is_read"] is False
    assert notification["actor"]["username"] == "reader"
    assert client.get(
        "/api/notifications/unread-count", headers=author.headers
    ).json() == {"count": 1}


def test_open_channel_receives_exactly_one_push(client, signup, make_post):
    author, reader = signup("author"), signup("reader")
    post = make_post(author)

    with client.websocket_connect("/ws", headers=author.headers) as websocket:
        assert websocket.receive_json()["type"] == "auth_success"

        response = client.post(
            f"/api/posts/{post['id']}/comments",
            json={"content": "Loved the ending"},
            headers=reader.headers,
        )
        assert response.status_code == 201

        event = websocket.receive_json()
        assert event["type"] == "notification"
        assert event["data"]["type"] == "comment"
        assert event["data"]["actor_id"] == reader.id
        assert event["data"]["post_id"] == post["id"]
        assert event["data"]["data"]["comment_id"] == response.json()["id"]

        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

    stored = _notifications(client, author)
    assert [item["id"] for item in stored] == [event["data"]["id"]]


def test_every_open_tab_receives_the_push(client, signup, make_post):
    author, reader = signup("author"), signup("reader")
    post = make_post(author)

    with client.websocket_connect("/ws", headers=author.headers) as first_tab:
        with client.websocket_connect("/ws", headers=author.headers) as second_tab:
            first_tab.receive_json()
            second_tab.receive_json()

            client.post(f"/api/posts/{post['id']}/like", headers=reader.headers)

            assert first_tab.receive_json() == second_tab.receive_json()


def test_ack_frame_marks_notifications_read(client, signup, make_post):
    author, reader = signup("author"), signup("reader")
    post = make_post(author)
    client.post(f"/api/posts/{post['id']}/like", headers=reader.headers)
    notification_id = _notifications(client, author)[0]["id"]

    with client.websocket_connect("/ws", headers=author.headers) as websocket:
        websocket.receive_json()
        websocket.send_json({"type": "ack", "ids": [notification_id]})
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

    assert _notifications(client, author)[0]["is_read"] is True


def test_mark_notifications_read(client, signup, make_post):
    author, reader, other = signup("author"), signup("reader"), signup("other")
    post = make_post(author)
    client.post(f"/api/posts/{post['id']}/like", headers=reader.headers)
    client.post(f"/api/posts/{post['id']}/repost", headers=reader.headers)
    first_id = _notifications(client, author)[-1]["id"]

    foreign = client.patch(f"/api/notifications/{first_id}/read", headers=other.headers)
    single = client.patch(f"/api/notifications/{first_id}/read", headers=author.headers)
    remaining = client.put("/api/notifications/read-all", headers=author.headers)

    assert foreign.status_code in (403, 404)
    assert single.status_code == 200
    assert single.json()["is_read"] is True
    assert remaining.json() == {"updated": 1}
    assert client.get(
        "/api/notifications/unread-count", headers=author.headers
    ).json() == {"count": 0}


def test_follows_are_directional(client, signup):
    alice, bob = signup("alice"), signup("bob")

    first = client.post(f"/api/users/{bob.id}/follow", headers=alice.headers)
    second = client.post(f"/api/users/{alice.id}/follow", headers=bob.headers)
    duplicate = client.post(f"/api/users/{bob.id}/follow", headers=alice.headers)

    assert first.status_code == 201
    assert second.status_code == 201
    assert duplicate.status_code == 409

    client.delete(f"/api/users/{bob.id}/follow", headers=alice.headers)

    alice_status = client.get(f"/api/users/{bob.id}/follow-status", headers=alice.headers)
    bob_status = client.get(f"/api/users/{alice.id}/follow-status", headers=bob.headers)
    assert alice_status.json()["is_following"] is False
    assert bob_status.json()["is_following"] is True
    assert [item["type"] for item in _notifications(client, bob)] == ["follow"]


def test_follow_self_and_missing_relations(client, signup, make_post):
    alice, bob = signup("alice"), signup("bob")
    post = make_post(bob)

    assert client.post(f"/api/users/{alice.id}/follow", headers=alice.headers).status_code == 400
    assert client.delete(f"/api/users/{bob.id}/follow", headers=alice.headers).status_code == 404
    assert client.delete(f"/api/posts/{post['id']}/repost", headers=alice.headers).status_code == 404


def test_repost_notifies_author_once(client, signup, make_post):
    author, reader = signup("author"), signup("reader")
    post = make_post(author)

    first = client.post(
        f"/api/posts/{post['id']}/repost", json={"comment": "Read this"}, headers=reader.headers
    )
    second = client.post(f"/api/posts/{post['id']}/repost", headers=reader.headers)

    assert first.status_code == 201
    assert first.json()["comment"] == "Read this"
    assert second.status_code == 409
    assert client.get(f"/api/posts/{post['id']}").json()["reposts_count"] == 1
    assert [item["type"] for item in _notifications(client, author)] == ["repost"]


def test_reply_notifies_parent_author(client, signup, make_post):
    author, first, second = signup("author"), signup("first"), signup("second")
    post = make_post(author)
    top = client.post(
        f"/api/posts/{post['id']}/comments", json={"content": "Great"}, headers=first.headers
    ).json()

    reply = client.post(
        f"/api/comments/{top['id']}/replies", json={"content": "Agreed"}, headers=second.headers
    )

    assert reply.status_code == 201
    assert reply.json()["level"] == 1
    assert reply.json()["parent_id"] == top["id"]
    notifications = _notifications(client, first)
    assert len(notifications) == 1
    assert notifications[0]["actor_id"] == second.id
    replies = client.get(f"/api/comments/{top['id']}/replies").json()
    assert [item["id"] for item in replies] == [reply.json()["id"]]


def test_comment_like_toggles(client, signup, make_post):
    author = signup("author")
    post = make_post(author)
    comment = client.post(
        f"/api/posts/{post['id']}/comments", json={"content": "Note"}, headers=author.headers
    ).json()

    liked = client.post(f"/api/comments/{comment['id']}/like", headers=author.headers)
    unliked = client.post(f"/api/comments/{comment['id']}/like", headers=author.headers)

    assert liked.json() == {"comment_id": comment["id"], "is_liked": True, "likes_count": 1}
    assert unliked.json() == {"comment_id": comment["id"], "is_liked": False, "likes_count": 0}


def test_mention_notifies_mentioned_writers(client, signup, make_post):
    author, friend = signup("author"), signup("friend")

    make_post(author, "Edited with help from @friend and @author and @nobody")

    notifications = _notifications(client, friend)
    assert [item["type"] for item in notifications] == ["mention"]
    assert _notifications(client, author) == []


def test_bookmarks_are_private_to_the_user(client, signup, make_post):
    author, reader = signup("author"), signup("reader")
    post = make_post(author)

    created = client.post(f"/api/posts/{post['id']}/bookmark", headers=reader.headers)
    duplicate = client.post(f"/api/posts/{post['id']}/bookmark", headers=reader.headers)
    listed = client.get("/api/bookmarks", headers=reader.headers)
    cleared = client.delete("/api/bookmarks", headers=reader.headers)

    assert created.status_code == 201
    assert duplicate.status_code == 409
    assert [item["id"] for item in listed.json()] == [post["id"]]
    assert cleared.json() == {"removed": 1}
    assert _notifications(client, author) == []


def test_failed_push_keeps_the_like(register):
    from main import create_app

    publisher = FailingPublisher(EventBroadcaster(ConnectionRegistry()))
    app = create_app(publisher=publisher)

    with TestClient(app) as failing_client:
        author = register(failing_client, "author")
        reader = register(failing_client, "reader")
        post = failing_client.post(
            "/api/posts", json={"content": "Draft"}, headers=author.headers
        ).json()

        response = failing_client.post(f"/api/posts/{post['id']}/like", headers=reader.headers)

        assert response.status_code == 200
        assert response.json()["likes_count"] == 1
        notifications = _notifications(failing_client, author)
        assert [item["type"] for item in notifications] == ["like"]


def test_failed_counter_update_discards_the_like(client, signup, make_post, monkeypatch):
    author, reader = signup("author"), signup("reader")
    post = make_post(author)

    def broken_counter(self, post_id, counter, delta):
        raise OperationalError("UPDATE post", {}, Exception("disk I/O error"))

    with monkeypatch.context() as patched:
        patched.setattr(PostRepository, "adjust_counter", broken_counter)
        with pytest.raises(OperationalError):
            client.post(f"/api/posts/{post['id']}/like", headers=reader.headers)

    refreshed = client.get(f"/api/posts/{post['id']}", headers=reader.headers).json()
    assert refreshed["likes_count"] == 0
    assert refreshed["is_liked"] is False

    retry = client.post(f"/api/posts/{post['id']}/like", headers=reader.headers)

    assert retry.status_code == 200
    assert retry.json() == {"post_id": post["id"], "is_liked": True, "likes_count": 1}


def test_unstored_notification_keeps_the_like(client, signup, make_post, monkeypatch):
    author, reader = signup("author"), signup("reader")
    post = make_post(author)

    def broken_create(self, notification):
        raise SQLAlchemyError("notification table unavailable")

    with monkeypatch.context() as patched:
        patched.setattr(NotificationRepository, "create", broken_create)
        response = client.post(f"/api/posts/{post['id']}/like", headers=reader.headers)

    assert response.status_code == 200
    assert response.json()["likes_count"] == 1
    refreshed = client.get(f"/api/posts/{post['id']}", headers=reader.headers).json()
    assert refreshed["likes_count"] == 1
    assert refreshed["is_liked"] is True
    assert _notifications(client, author) == []
