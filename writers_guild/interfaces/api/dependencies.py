"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.auth import resolve_session_user
from writers_guild.config import get_settings
from writers_guild.domain.entities import User
from writers_guild.domain.errors import AuthenticationError
from writers_guild.infrastructure.database import get_db

AUTHENTICATION_REQUIRED = "Authentication required"


def get_session_token(request: Request) -> str | None:
    """Return the signed session token from the request cookies."""

    return request.cookies.get(get_settings().session_cookie_name)


def get_current_user(
    token: str | None = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user or reject the request with 401."""

    try:
        return resolve_session_user(db, token)
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=AUTHENTICATION_REQUIRED,
        ) from exc


def get_optional_user(
    token: str | None = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> User | None:
    """Return the authenticated user, or ``None`` for anonymous requests."""

    if not token:
        return None
    try:
        return resolve_session_user(db, token)
    except AuthenticationError:
        return None


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.has_admin_rights():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


__all__ = [
    "AUTHENTICATION_REQUIRED",
    "get_current_user",
    "get_optional_user",
    "get_session_token",
    "require_admin",
]
