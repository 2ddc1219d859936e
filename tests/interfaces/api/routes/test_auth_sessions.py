"""Integration tests for registration, login and the session cookie."""

from __future__ import annotations

import pytest
from fastapi import WebSocketDisconnect

from writers_guild.config import get_settings


def test_register_opens_a_session(client, signup):
    writer = signup("alice")

    response = client.get("/api/auth/user", headers=writer.headers)

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == writer.id
    assert body["username"] == "alice"
    assert body["email"] == "alice@example.com"
    assert "password" not in body


def test_register_rejects_duplicate_username(client, signup):
    signup("alice")

    response = client.post(
        "/api/register",
        json={"username": "alice", "email": "other@example.com", "password": "s3cret-pass"},
    )

    assert response.status_code == 409


def test_login_with_username_or_email(client, signup):
    signup("bob")

    by_username = client.post("/api/login", json={"login": "bob", "password": "s3cret-pass"})
    client.cookies.clear()
    by_email = client.post(
        "/api/login", json={"login": "bob@example.com", "password": "s3cret-pass"}
    )

    assert by_username.status_code == 200
    assert by_email.status_code == 200
    cookie_name = get_settings().session_cookie_name
    assert by_username.cookies[cookie_name] != by_email.cookies[cookie_name]


def test_login_with_wrong_password_is_rejected(client, signup):
    signup("carol")

    response = client.post("/api/login", json={"login": "carol", "password": "wrong-pass"})

    assert response.status_code == 401


def test_protected_endpoint_requires_session(client):
    response = client.get("/api/notifications")

    assert response.status_code == 401
    assert response.json()["detail"] == "Authentication required"


def test_tampered_token_is_rejected(client, signup):
    writer = signup("dave")
    cookie_name = get_settings().session_cookie_name

    response = client.get(
        "/api/auth/user", headers={"cookie": f"{cookie_name}={writer.token}x"}
    )

    assert response.status_code == 401


def test_logout_revokes_the_session(client, signup):
    writer = signup("erin")

    logout = client.post("/api/auth/logout", headers=writer.headers)
    after = client.get("/api/auth/user", headers=writer.headers)

    assert logout.status_code == 204
    assert after.status_code == 401


def test_websocket_without_session_is_closed_with_4001(client):
    with client.websocket_connect("/ws") as websocket:
        with pytest.raises(WebSocketDisconnect) as excinfo:
            websocket.receive_json()

    assert excinfo.value.code == 4001


def test_websocket_with_session_is_acknowledged(client, signup):
    writer = signup("frank")

    with client.websocket_connect("/ws", headers=writer.headers) as websocket:
        assert websocket.receive_json() == {"type": "auth_success", "userId": writer.id}
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}


def test_websocket_ignores_malformed_frames(client, signup):
    writer = signup("gina")

    with client.websocket_connect("/ws", headers=writer.headers) as websocket:
        websocket.receive_json()
        websocket.send_text("not json")
        websocket.send_json(["not", "an", "object"])
        websocket.send_json({"type": "unknown"})
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}
