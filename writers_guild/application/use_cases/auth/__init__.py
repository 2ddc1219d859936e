"""Use cases for accounts and login sessions."""

from .register_user import register_user
from .sessions import (
    LoginResult,
    authenticate_user,
    login_user,
    logout_user,
    resolve_session_user,
)

__all__ = [
    "LoginResult",
    "authenticate_user",
    "login_user",
    "logout_user",
    "register_user",
    "resolve_session_user",
]
