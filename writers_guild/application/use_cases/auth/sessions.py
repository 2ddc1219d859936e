"""Login, logout and session resolution."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from sqlalchemy.orm import Session

from writers_guild.config import get_settings
from writers_guild.domain.entities import User, UserSession
from writers_guild.domain.errors import AuthenticationError
from writers_guild.infrastructure.repositories import SessionRepository, UserRepository
from writers_guild.infrastructure.security import (
    create_session_token,
    decode_session_token,
    generate_session_id,
    get_password_hash,
    needs_rehash,
    verify_password,
)
from writers_guild.utils import utcnow


@dataclass
class LoginResult:
    user: User
    session: UserSession
    token: str


def authenticate_user(session: Session, *, login: str, password: str) -> User:
    """Return the active user matching ``login`` and ``password``."""

    repository = UserRepository(session)
    user = repository.get_by_login(login.strip())
    if user is None or not verify_password(password, user.password):
        raise AuthenticationError("Invalid username or password")
    if not user.is_active:
        raise AuthenticationError("Account is disabled")

    if needs_rehash(user.password):
        user.password = get_password_hash(password)
        user = repository.update(user)
    return user


def login_user(session: Session, *, login: str, password: str) -> LoginResult:
    """Authenticate and open a new server-side session."""

    user = authenticate_user(session, login=login, password=password)
    settings = get_settings()
    repository = SessionRepository(session)
    now = utcnow()
    repository.prune_expired(now)

    user_session = repository.create(
        UserSession(
            id=generate_session_id(),
            user_id=user.id,
            created_at=now,
            expires_at=now + timedelta(minutes=settings.session_ttl_minutes),
        )
    )
    token = create_session_token(user_session.id, user_session.expires_at)
    return LoginResult(user=user, session=user_session, token=token)


def logout_user(session: Session, *, token: str | None) -> None:
    """Revoke the session carried by ``token``; unknown tokens are ignored."""

    if not token:
        return
    try:
        session_id = decode_session_token(token)
    except ValueError:
        return
    SessionRepository(session).delete(session_id)


def resolve_session_user(session: Session, token: str | None) -> User:
    """Return the user owning the session carried by ``token``.

    Raises :class:`AuthenticationError` for missing, forged or expired
    tokens, revoked sessions and deleted or disabled accounts.
    """

    if not token:
        raise AuthenticationError("Authentication required")
    try:
        session_id = decode_session_token(token)
    except ValueError as exc:
        raise AuthenticationError("Authentication required") from exc

    sessions = SessionRepository(session)
    user_session = sessions.get(session_id)
    if user_session is None:
        raise AuthenticationError("Authentication required")
    if user_session.is_expired(utcnow()):
        sessions.delete(session_id)
        raise AuthenticationError("Authentication required")

    user = UserRepository(session).get(user_session.user_id)
    if user is None or not user.is_active:
        raise AuthenticationError("Authentication required")
    return user


__all__ = [
    "LoginResult",
    "authenticate_user",
    "login_user",
    "logout_user",
    "resolve_session_user",
]
