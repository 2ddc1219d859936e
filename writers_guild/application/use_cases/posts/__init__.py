"""Use cases for posts."""

from .create_post import create_post
from .manage_posts import (
    delete_post,
    get_post,
    get_visible_post,
    list_posts,
    list_user_posts,
    update_post,
)

__all__ = [
    "create_post",
    "delete_post",
    "get_post",
    "get_visible_post",
    "list_posts",
    "list_user_posts",
    "update_post",
]
