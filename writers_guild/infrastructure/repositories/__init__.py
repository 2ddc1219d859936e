"""Repository implementations backed by SQLAlchemy."""

from .collaboration_repository import CollaborationInviteRepository
from .comment_repository import CommentRepository
from .conversation_repository import ConversationRepository
from .engagement_repository import (
    BookmarkRepository,
    FollowRepository,
    LikeRepository,
    RepostRepository,
)
from .notification_repository import NotificationRepository
from .post_repository import PostRepository
from .report_repository import ReportRepository
from .session_repository import SessionRepository
from .user_repository import UserRepository

__all__ = [
    "BookmarkRepository",
    "CollaborationInviteRepository",
    "CommentRepository",
    "ConversationRepository",
    "FollowRepository",
    "LikeRepository",
    "NotificationRepository",
    "PostRepository",
    "ReportRepository",
    "RepostRepository",
    "SessionRepository",
    "UserRepository",
]
