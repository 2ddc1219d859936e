"""Administrative actions on accounts."""

from sqlalchemy.orm import Session

from writers_guild.domain.entities import User
from writers_guild.domain.errors import NotFoundError, PermissionDeniedError, SelfActionError
from writers_guild.infrastructure.repositories import SessionRepository, UserRepository


def set_user_admin(session: Session, *, acting_user: User, user_id: int, is_admin: bool) -> User:
    """Grant or revoke admin rights; reserved to super administrators."""

    if not acting_user.is_super_admin:
        raise PermissionDeniedError("Only super admins can change admin status")
    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    user.is_admin = is_admin
    return repository.update(user)


def set_user_verified(session: Session, *, acting_user: User, user_id: int, is_verified: bool) -> User:
    if not acting_user.has_admin_rights():
        raise PermissionDeniedError("Only admins can change verification status")
    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    user.is_verified = is_verified
    return repository.update(user)


def delete_user(session: Session, *, acting_user: User, user_id: int) -> None:
    """Remove an account together with everything it owns."""

    if not acting_user.has_admin_rights():
        raise PermissionDeniedError("Only admins can delete users")
    if acting_user.id == user_id:
        raise SelfActionError("Admins cannot delete their own account")
    repository = UserRepository(session)
    if repository.get(user_id) is None:
        raise NotFoundError("User not found")
    SessionRepository(session).delete_for_user(user_id)
    repository.delete(user_id)


__all__ = ["delete_user", "set_user_admin", "set_user_verified"]
