"""Automatic verification of prolific writers."""

import logging

from sqlalchemy.orm import Session

from writers_guild.config import get_settings
from writers_guild.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)


def check_auto_verification(session: Session, user_id: int) -> bool:
    """Verify ``user_id`` once both post and comment thresholds are reached.

    Returns ``True`` when the user was verified by this call.
    """

    settings = get_settings()
    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None or user.is_verified:
        return False
    if (
        user.posts_count >= settings.auto_verify_posts_threshold
        and user.comments_count >= settings.auto_verify_comments_threshold
    ):
        repository.mark_verified(user_id)
        logger.info("User %s verified automatically", user_id)
        return True
    return False


__all__ = ["check_auto_verification"]
