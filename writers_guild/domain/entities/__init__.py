"""Domain entities exposed by the application."""

from .collaboration import (
    INVITE_ACCEPTED,
    INVITE_DECLINED,
    INVITE_PENDING,
    CollaborationInvite,
    Report,
)
from .comment import MAX_COMMENT_DEPTH, Comment
from .conversation import Conversation, ConversationOverview, Message
from .notification import (
    NOTIFICATION_COLLABORATION_ACCEPTED,
    NOTIFICATION_COLLABORATION_DECLINED,
    NOTIFICATION_COLLABORATION_INVITE,
    NOTIFICATION_COMMENT,
    NOTIFICATION_FOLLOW,
    NOTIFICATION_LIKE,
    NOTIFICATION_MENTION,
    NOTIFICATION_REPORT,
    NOTIFICATION_REPOST,
    Notification,
)
from .post import (
    POST_TYPES,
    Bookmark,
    Follow,
    Like,
    Post,
    PostView,
    Repost,
    UserSummary,
)
from .session import UserSession
from .user import User, UserStats

__all__ = [
    "Bookmark",
    "CollaborationInvite",
    "Comment",
    "Conversation",
    "ConversationOverview",
    "Follow",
    "INVITE_ACCEPTED",
    "INVITE_DECLINED",
    "INVITE_PENDING",
    "Like",
    "MAX_COMMENT_DEPTH",
    "Message",
    "NOTIFICATION_COLLABORATION_ACCEPTED",
    "NOTIFICATION_COLLABORATION_DECLINED",
    "NOTIFICATION_COLLABORATION_INVITE",
    "NOTIFICATION_COMMENT",
    "NOTIFICATION_FOLLOW",
    "NOTIFICATION_LIKE",
    "NOTIFICATION_MENTION",
    "NOTIFICATION_REPORT",
    "NOTIFICATION_REPOST",
    "Notification",
    "POST_TYPES",
    "Post",
    "PostView",
    "Report",
    "Repost",
    "User",
    "UserSession",
    "UserStats",
    "UserSummary",
]
