"""Engagement use cases: likes, comments, follows, reposts and bookmarks."""

from .bookmarks import bookmark_post, clear_bookmarks, list_bookmarks, remove_bookmark
from .comments import (
    add_comment,
    list_comments,
    list_replies,
    reply_to_comment,
    toggle_comment_like,
)
from .follows import follow_user, is_following, unfollow_user
from .likes import like_post, unlike_post
from .reposts import repost_post, unrepost_post

__all__ = [
    "add_comment",
    "bookmark_post",
    "clear_bookmarks",
    "follow_user",
    "is_following",
    "like_post",
    "list_bookmarks",
    "list_comments",
    "list_replies",
    "remove_bookmark",
    "reply_to_comment",
    "repost_post",
    "toggle_comment_like",
    "unfollow_user",
    "unlike_post",
    "unrepost_post",
]
