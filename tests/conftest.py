"""Shared fixtures for the API and realtime tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["SESSION_COOKIE_SECURE"] = "false"


@pytest.fixture(autouse=True)
def clean_database():
    """Give every test an empty schema."""

    from writers_guild.infrastructure import database, models  # noqa: F401

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)
    yield
    database.engine.dispose()


@pytest.fixture(scope="session", autouse=True)
def remove_database_file():
    yield
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


class Writer:
    """A registered account and the headers that authenticate as it."""

    def __init__(self, user_id: int, username: str, token: str) -> None:
        from writers_guild.config import get_settings

        self.id = user_id
        self.username = username
        self.token = token
        self.headers = {"cookie": f"{get_settings().session_cookie_name}={token}"}


@pytest.fixture()
def app():
    from main import create_app

    return create_app()


@pytest.fixture()
def client(app):
    """Return a test client whose requests and websockets share one event loop."""

    from fastapi.testclient import TestClient

    with TestClient(app) as test_client:
        yield test_client


def register_writer(test_client, username: str, password: str = "s3cret-pass") -> Writer:
    """Register ``username`` through the API and return its :class:`Writer`.

    The client's cookie jar is cleared afterwards so requests authenticate
    only through the explicit ``headers`` of a writer.
    """

    from writers_guild.config import get_settings

    response = test_client.post(
        "/api/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": password,
        },
    )
    assert response.status_code == 201, response.text
    token = response.cookies[get_settings().session_cookie_name]
    test_client.cookies.clear()
    return Writer(response.json()["id"], username, token)


@pytest.fixture()
def register():
    return register_writer


@pytest.fixture()
def signup(client):
    def _signup(username: str, password: str = "s3cret-pass") -> Writer:
        return register_writer(client, username, password)

    return _signup


@pytest.fixture()
def make_post(client):
    def _make_post(author: Writer, content: str = "A short story", **fields) -> dict:
        response = client.post(
            "/api/posts",
            json={"content": content, **fields},
            headers=author.headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make_post
