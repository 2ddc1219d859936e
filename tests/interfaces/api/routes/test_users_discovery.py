"""Integration tests for profiles, discovery and admin account management."""

from __future__ import annotations

from writers_guild.infrastructure.database import SessionLocal
from writers_guild.infrastructure.models import UserModel


def _grant(user_id: int, **flags) -> None:
    session = SessionLocal()
    try:
        model = session.get(UserModel, user_id)
        for name, value in flags.items():
            setattr(model, name, value)
        session.commit()
    finally:
        session.close()


def test_profile_update_and_public_profile(client, signup):
    writer = signup("novelist")

    updated = client.patch(
        "/api/users/profile",
        json={"display_name": "The Novelist", "bio": "Writes long books", "genres": ["fantasy"]},
        headers=writer.headers,
    )
    public = client.get("/api/users/novelist")

    assert updated.status_code == 200
    assert public.json()["display_name"] == "The Novelist"
    assert public.json()["genres"] == ["fantasy"]
    assert "email" not in public.json()
    assert client.get("/api/users/missing").status_code == 404


def test_stats_and_follow_lists(client, signup, make_post):
    alice, bob = signup("alice"), signup("bob")
    post = make_post(alice)
    client.post(f"/api/users/{alice.id}/follow", headers=bob.headers)
    client.post(f"/api/posts/{post['id']}/like", headers=bob.headers)

    stats = client.get(f"/api/users/{alice.id}/stats").json()
    followers = client.get(f"/api/users/{alice.id}/followers").json()
    following = client.get(f"/api/users/{bob.id}/following").json()

    assert stats["posts_count"] == 1
    assert stats["followers_count"] == 1
    assert stats["following_count"] == 0
    assert stats["likes_received"] == 1
    assert [user["id"] for user in followers] == [bob.id]
    assert [user["id"] for user in following] == [alice.id]


def test_private_posts_stay_out_of_public_listings(client, signup, make_post):
    author, reader = signup("author"), signup("reader")
    public = make_post(author, "Visible piece about dragons")
    make_post(author, "Secret piece about dragons", is_private=True)

    feed = client.get("/api/posts", headers=reader.headers).json()
    own = client.get(f"/api/users/{author.id}/posts", headers=author.headers).json()
    found = client.get("/api/search/posts", params={"q": "dragons"}).json()

    assert [item["id"] for item in feed] == [public["id"]]
    assert len(own) == 2
    assert [item["id"] for item in found] == [public["id"]]


def test_search_and_trending_topics(client, signup, make_post):
    writer = signup("poet")
    make_post(writer, "Roses are red", genre="poetry")
    make_post(writer, "Violets are blue", genre="poetry")
    make_post(writer, "Once upon a time", genre="fiction")

    combined = client.get("/api/search", params={"q": "poet"}).json()
    topics = client.get("/api/explore/trending-topics").json()

    assert [user["username"] for user in combined["users"]] == ["poet"]
    assert topics[0] == {"genre": "poetry", "posts_count": 2}
    assert client.get("/api/search/users", params={"q": "  "}).json() == []


def test_only_super_admins_grant_admin_rights(client, signup):
    root, admin, writer = signup("root"), signup("admin"), signup("writer")
    _grant(root.id, is_admin=True, is_super_admin=True)
    _grant(admin.id, is_admin=True)

    denied = client.post(
        f"/api/admin/users/{writer.id}/admin", json={"value": True}, headers=admin.headers
    )
    granted = client.post(
        f"/api/admin/users/{writer.id}/admin", json={"value": True}, headers=root.headers
    )
    verified = client.post(
        f"/api/admin/users/{writer.id}/verify", json={"value": True}, headers=admin.headers
    )

    assert denied.status_code == 403
    assert granted.json()["is_admin"] is True
    assert verified.json()["is_verified"] is True


def test_admin_deletes_user_and_their_content(client, signup, make_post):
    admin, writer = signup("admin"), signup("writer")
    _grant(admin.id, is_admin=True)
    post = make_post(writer)

    forbidden = client.delete(f"/api/admin/users/{admin.id}", headers=writer.headers)
    deleted = client.delete(f"/api/admin/users/{writer.id}", headers=admin.headers)

    assert forbidden.status_code == 403
    assert deleted.status_code == 204
    assert client.get(f"/api/posts/{post['id']}").status_code == 404
    assert client.get("/api/auth/user", headers=writer.headers).status_code == 401
