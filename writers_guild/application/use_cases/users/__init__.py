"""Use cases for managing users."""

from .admin import delete_user, set_user_admin, set_user_verified
from .profiles import (
    get_user,
    get_user_by_username,
    get_user_stats,
    list_followers,
    list_following,
    list_suggested_users,
    list_trending_users,
    update_profile,
)
from .verification import check_auto_verification

__all__ = [
    "check_auto_verification",
    "delete_user",
    "get_user",
    "get_user_by_username",
    "get_user_stats",
    "list_followers",
    "list_following",
    "list_suggested_users",
    "list_trending_users",
    "set_user_admin",
    "set_user_verified",
    "update_profile",
]
