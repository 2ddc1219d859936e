"""Security helpers for password hashing and session tokens."""

from datetime import datetime
import secrets

from jose import JWTError, jwt
from passlib.context import CryptContext

from writers_guild.config import get_settings

_ALGORITHM = "HS256"

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=310_000,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def needs_rehash(hashed_password: str) -> bool:
    return pwd_context.needs_update(hashed_password)


def generate_session_id() -> str:
    """Return an opaque, URL-safe identifier for a server-side session row."""

    return secrets.token_urlsafe(32)


def create_session_token(session_id: str, expires_at: datetime) -> str:
    """Sign ``session_id`` into the value stored in the session cookie."""

    settings = get_settings()
    claims = {"sid": session_id, "exp": expires_at}
    return jwt.encode(claims, settings.secret_key, algorithm=_ALGORITHM)


def decode_session_token(token: str) -> str:
    """Return the session id carried by ``token``.

    Raises ``ValueError`` when the signature is invalid, the token has
    expired or the session id claim is missing.
    """

    settings = get_settings()
    try:
        claims = jwt.decode(token, settings.secret_key, algorithms=[_ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate session") from exc
    session_id = claims.get("sid")
    if not isinstance(session_id, str) or not session_id:
        raise ValueError("Could not validate session")
    return session_id


__all__ = [
    "create_session_token",
    "decode_session_token",
    "generate_session_id",
    "get_password_hash",
    "needs_rehash",
    "pwd_context",
    "verify_password",
]
