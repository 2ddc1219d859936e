"""Integration tests for co-writing invitations and post reports."""

from __future__ import annotations

from writers_guild.infrastructure.database import SessionLocal
from writers_guild.infrastructure.models import UserModel


def _promote_to_admin(user_id: int) -> None:
    session = SessionLocal()
    try:
        session.get(UserModel, user_id).is_admin = True
        session.commit()
    finally:
        session.close()


def _notification_types(client, writer):
    return [item["type"] for item in client.get("/api/notifications", headers=writer.headers).json()]


def test_invite_accept_adds_collaborator(client, signup, make_post):
    author, cowriter = signup("author"), signup("cowriter")
    post = make_post(author, is_private=True)

    hidden = client.get(f"/api/posts/{post['id']}", headers=cowriter.headers)
    invite = client.post(
        f"/api/posts/{post['id']}/collaborators",
        json={"user_id": cowriter.id},
        headers=author.headers,
    )
    pending = client.get("/api/collaborations/invites", headers=cowriter.headers)
    accepted = client.post(
        f"/api/collaborations/{invite.json()['id']}/accept", headers=cowriter.headers
    )

    assert hidden.status_code == 404
    assert invite.status_code == 201
    assert [item["id"] for item in pending.json()] == [invite.json()["id"]]
    assert accepted.json()["status"] == "accepted"
    assert _notification_types(client, cowriter) == ["collaboration_invite"]
    assert _notification_types(client, author) == ["collaboration_accepted"]

    visible = client.get(f"/api/posts/{post['id']}", headers=cowriter.headers)
    assert visible.status_code == 200
    assert cowriter.id in visible.json()["collaborator_ids"]

    edited = client.patch(
        f"/api/posts/{post['id']}", json={"content": "Revised draft"}, headers=cowriter.headers
    )
    assert edited.status_code == 200
    assert edited.json()["content"] == "Revised draft"


def test_invite_rules(client, signup, make_post):
    author, cowriter, stranger = signup("author"), signup("cowriter"), signup("stranger")
    post = make_post(author)
    url = f"/api/posts/{post['id']}/collaborators"

    not_author = client.post(url, json={"user_id": cowriter.id}, headers=stranger.headers)
    to_self = client.post(url, json={"user_id": author.id}, headers=author.headers)
    first = client.post(url, json={"user_id": cowriter.id}, headers=author.headers)
    duplicate = client.post(url, json={"user_id": cowriter.id}, headers=author.headers)
    wrong_user = client.post(
        f"/api/collaborations/{first.json()['id']}/decline", headers=stranger.headers
    )
    declined = client.post(
        f"/api/collaborations/{first.json()['id']}/decline", headers=cowriter.headers
    )
    answered = client.post(
        f"/api/collaborations/{first.json()['id']}/accept", headers=cowriter.headers
    )

    assert not_author.status_code == 403
    assert to_self.status_code == 400
    assert duplicate.status_code == 409
    assert wrong_user.status_code == 403
    assert declined.json()["status"] == "declined"
    assert answered.status_code == 400
    assert _notification_types(client, author) == ["collaboration_declined"]


def test_report_notifies_admins_once(client, signup, make_post):
    author, reporter, admin = signup("author"), signup("reporter"), signup("admin")
    _promote_to_admin(admin.id)
    post = make_post(author)
    url = f"/api/posts/{post['id']}/report"

    created = client.post(url, json={"reason": "spam"}, headers=reporter.headers)
    duplicate = client.post(url, json={"reason": "spam"}, headers=reporter.headers)
    own = client.post(url, json={"reason": "spam"}, headers=author.headers)
    unknown = client.post(url, json={"reason": "boring"}, headers=admin.headers)

    assert created.status_code == 201
    assert duplicate.status_code == 409
    assert own.status_code == 400
    assert unknown.status_code == 400
    assert _notification_types(client, admin) == ["report"]
    assert _notification_types(client, author) == []


def test_reports_are_listed_for_admins_only(client, signup, make_post):
    author, reporter, admin = signup("author"), signup("reporter"), signup("admin")
    _promote_to_admin(admin.id)
    post = make_post(author)
    client.post(
        f"/api/posts/{post['id']}/report",
        json={"reason": "harassment", "details": "  see paragraph two  "},
        headers=reporter.headers,
    )

    denied = client.get("/api/admin/reports", headers=reporter.headers)
    listed = client.get("/api/admin/reports", headers=admin.headers)

    assert denied.status_code == 403
    assert listed.status_code == 200
    assert [(item["reason"], item["details"]) for item in listed.json()] == [
        ("harassment", "see paragraph two")
    ]
