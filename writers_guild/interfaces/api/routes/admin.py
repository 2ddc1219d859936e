"""Administrative endpoints."""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.posts import delete_post
from writers_guild.application.use_cases.users import delete_user, set_user_admin, set_user_verified
from writers_guild.domain.entities import User
from writers_guild.domain.errors import WritersGuildError
from writers_guild.infrastructure.database import get_db
from writers_guild.interfaces.api.dependencies import require_admin
from writers_guild.interfaces.api.routes_helpers import http_error
from writers_guild.interfaces.api.schemas import AdminFlagUpdate, UserRead

router = APIRouter(prefix="/api/admin", tags=["admin"])
logger = logging.getLogger(__name__)


@router.post("/users/{user_id}/admin", response_model=UserRead)
def change_admin_status(
    user_id: int,
    payload: AdminFlagUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Grant or revoke admin rights. Only super admins may do this."""

    try:
        user = set_user_admin(db, acting_user=admin, user_id=user_id, is_admin=payload.value)
    except WritersGuildError as exc:
        raise http_error(exc) from exc
    logger.info("User %s set admin=%s for user %s", admin.id, payload.value, user_id)
    return UserRead.model_validate(user)


@router.post("/users/{user_id}/verify", response_model=UserRead)
def change_verified_status(
    user_id: int,
    payload: AdminFlagUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    try:
        user = set_user_verified(db, acting_user=admin, user_id=user_id, is_verified=payload.value)
    except WritersGuildError as exc:
        raise http_error(exc) from exc
    return UserRead.model_validate(user)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_user(
    user_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    try:
        delete_user(db, acting_user=admin, user_id=user_id)
    except WritersGuildError as exc:
        raise http_error(exc) from exc
    logger.info("User %s deleted user %s", admin.id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_post(
    post_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    try:
        delete_post(db, post_id=post_id, acting_user=admin)
    except WritersGuildError as exc:
        raise http_error(exc) from exc
    logger.info("User %s deleted post %s", admin.id, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
