from .collaboration import CollaborationInviteRead, CollaboratorInvite, ReportCreate, ReportRead
from .conversation import (
    ConversationCreate,
    ConversationOverviewRead,
    ConversationRead,
    MessageCreate,
    MessageRead,
)
from .discovery import SearchResultsRead, TrendingTopicRead
from .notification import MarkedReadResponse, NotificationRead, UnreadCountRead
from .post import (
    BookmarkRead,
    ClearedRead,
    CommentCreate,
    CommentLikeRead,
    CommentRead,
    FollowRead,
    FollowStatusRead,
    LikeStatusRead,
    PostCreate,
    PostRead,
    PostUpdate,
    ReplyCreate,
    RepostCreate,
    RepostRead,
)
from .user import (
    AdminFlagUpdate,
    CurrentUserRead,
    ProfileUpdate,
    UserLogin,
    UserRead,
    UserRegister,
    UserStatsRead,
    UserSummaryRead,
)

__all__ = [
    "AdminFlagUpdate",
    "BookmarkRead",
    "ClearedRead",
    "CollaborationInviteRead",
    "CollaboratorInvite",
    "CommentCreate",
    "CommentLikeRead",
    "CommentRead",
    "ConversationCreate",
    "ConversationOverviewRead",
    "ConversationRead",
    "CurrentUserRead",
    "FollowRead",
    "FollowStatusRead",
    "LikeStatusRead",
    "MarkedReadResponse",
    "MessageCreate",
    "MessageRead",
    "NotificationRead",
    "PostCreate",
    "PostRead",
    "PostUpdate",
    "ProfileUpdate",
    "ReplyCreate",
    "ReportCreate",
    "ReportRead",
    "RepostCreate",
    "RepostRead",
    "SearchResultsRead",
    "TrendingTopicRead",
    "UnreadCountRead",
    "UserLogin",
    "UserRead",
    "UserRegister",
    "UserStatsRead",
    "UserSummaryRead",
]
