"""Use case for creating writer accounts."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from writers_guild.domain.entities import User
from writers_guild.domain.errors import DuplicateActionError
from writers_guild.infrastructure.repositories import UserRepository
from writers_guild.infrastructure.security import get_password_hash
from writers_guild.utils import utcnow


def register_user(
    session: Session,
    *,
    username: str,
    email: str,
    password: str,
    display_name: str | None = None,
) -> User:
    """Create a new user ensuring unique usernames and email addresses."""

    repository = UserRepository(session)
    username = username.strip()
    email = email.strip().lower()

    if repository.exists_with_username_or_email(username, email):
        raise DuplicateActionError("Username or email already registered")

    user = User(
        id=None,
        username=username,
        email=email,
        password=get_password_hash(password),
        display_name=(display_name or "").strip() or username,
        created_at=utcnow(),
    )
    try:
        return repository.create(user)
    except IntegrityError as exc:
        session.rollback()
        raise DuplicateActionError("Username or email already registered") from exc


__all__ = ["register_user"]
