"""ORM models used by the application infrastructure."""

from .collaboration import CollaborationInviteModel, ReportModel
from .comment import CommentLikeModel, CommentModel
from .conversation import ConversationModel, MessageModel
from .follow import FollowModel
from .notification import NotificationModel
from .post import (
    BookmarkModel,
    PostLikeModel,
    PostModel,
    RepostModel,
    post_collaborator_table,
)
from .session import SessionModel
from .user import UserModel

__all__ = [
    "BookmarkModel",
    "CollaborationInviteModel",
    "CommentLikeModel",
    "CommentModel",
    "ConversationModel",
    "FollowModel",
    "MessageModel",
    "NotificationModel",
    "PostLikeModel",
    "PostModel",
    "ReportModel",
    "RepostModel",
    "SessionModel",
    "UserModel",
    "post_collaborator_table",
]
