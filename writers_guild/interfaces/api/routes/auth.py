"""Endpoints for registration, login and logout."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.auth import (
    LoginResult,
    login_user,
    logout_user,
    register_user,
)
from writers_guild.config import get_settings
from writers_guild.domain.entities import User
from writers_guild.domain.errors import AuthenticationError, WritersGuildError
from writers_guild.infrastructure.database import get_db
from writers_guild.interfaces.api.dependencies import get_current_user, get_session_token
from writers_guild.interfaces.api.routes_helpers import http_error
from writers_guild.interfaces.api.schemas import CurrentUserRead, UserLogin, UserRegister

router = APIRouter(prefix="/api", tags=["auth"])
logger = logging.getLogger(__name__)


def _set_session_cookie(response: Response, result: LoginResult) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=result.token,
        max_age=settings.session_ttl_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


@router.post("/register", response_model=CurrentUserRead, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, response: Response, db: Session = Depends(get_db)):
    """Create an account and open a session for it."""

    try:
        register_user(
            db,
            username=payload.username,
            email=payload.email,
            password=payload.password,
            display_name=payload.display_name,
        )
        result = login_user(db, login=payload.username, password=payload.password)
    except WritersGuildError as exc:
        raise http_error(exc) from exc

    _set_session_cookie(response, result)
    logger.info("Registered user %s", result.user.id)
    return CurrentUserRead.model_validate(result.user)


@router.post("/login", response_model=CurrentUserRead)
def login(payload: UserLogin, response: Response, db: Session = Depends(get_db)):
    try:
        result = login_user(db, login=payload.login, password=payload.password)
    except AuthenticationError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc

    _set_session_cookie(response, result)
    return CurrentUserRead.model_validate(result.user)


@router.post("/auth/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    token: str | None = Depends(get_session_token),
    db: Session = Depends(get_db),
):
    """Revoke the current session and clear its cookie."""

    logout_user(db, token=token)
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(get_settings().session_cookie_name, httponly=True, samesite="lax")
    return response


@router.get("/auth/user", response_model=CurrentUserRead)
def read_current_user(current_user: User = Depends(get_current_user)):
    return CurrentUserRead.model_validate(current_user)
