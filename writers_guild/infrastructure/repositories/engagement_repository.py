"""Persistence for likes, reposts, bookmarks and follow relationships.

Writes are flushed but not committed: the calling use case commits the row
together with the counters derived from it.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from writers_guild.domain.entities import Bookmark, Follow, Like, Repost
from writers_guild.infrastructure.models import (
    BookmarkModel,
    FollowModel,
    PostLikeModel,
    RepostModel,
)


class LikeRepository:
    """Rows recording that a user liked a post."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, user_id: int, post_id: int) -> bool:
        return self._find(user_id, post_id) is not None

    def create(self, user_id: int, post_id: int) -> Like:
        model = PostLikeModel(user_id=user_id, post_id=post_id)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return Like(id=model.id, user_id=model.user_id, post_id=model.post_id, created_at=model.created_at)

    def delete(self, user_id: int, post_id: int) -> bool:
        model = self._find(user_id, post_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.flush()
        return True

    def _find(self, user_id: int, post_id: int) -> PostLikeModel | None:
        return (
            self.session.query(PostLikeModel)
            .filter_by(user_id=user_id, post_id=post_id)
            .first()
        )


class RepostRepository:
    """Rows recording that a user reposted (optionally quoting) a post."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, user_id: int, post_id: int) -> bool:
        return self._find(user_id, post_id) is not None

    def create(self, user_id: int, post_id: int, comment: str | None = None) -> Repost:
        model = RepostModel(user_id=user_id, post_id=post_id, comment=comment)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return Repost(
            id=model.id,
            user_id=model.user_id,
            post_id=model.post_id,
            comment=model.comment,
            created_at=model.created_at,
        )

    def delete(self, user_id: int, post_id: int) -> bool:
        model = self._find(user_id, post_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.flush()
        return True

    def _find(self, user_id: int, post_id: int) -> RepostModel | None:
        return self.session.query(RepostModel).filter_by(user_id=user_id, post_id=post_id).first()


class BookmarkRepository:
    """Rows recording posts a user saved for later."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, user_id: int, post_id: int) -> bool:
        return self._find(user_id, post_id) is not None

    def create(self, user_id: int, post_id: int) -> Bookmark:
        model = BookmarkModel(user_id=user_id, post_id=post_id)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return Bookmark(id=model.id, user_id=model.user_id, post_id=model.post_id, created_at=model.created_at)

    def delete(self, user_id: int, post_id: int) -> bool:
        model = self._find(user_id, post_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.flush()
        return True

    def clear(self, user_id: int) -> int:
        deleted = (
            self.session.query(BookmarkModel)
            .filter(BookmarkModel.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.session.flush()
        return deleted

    def _find(self, user_id: int, post_id: int) -> BookmarkModel | None:
        return self.session.query(BookmarkModel).filter_by(user_id=user_id, post_id=post_id).first()


class FollowRepository:
    """Directed follower -> following edges."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, follower_id: int, following_id: int) -> bool:
        return self._find(follower_id, following_id) is not None

    def create(self, follower_id: int, following_id: int) -> Follow:
        model = FollowModel(follower_id=follower_id, following_id=following_id)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return Follow(
            id=model.id,
            follower_id=model.follower_id,
            following_id=model.following_id,
            created_at=model.created_at,
        )

    def delete(self, follower_id: int, following_id: int) -> bool:
        model = self._find(follower_id, following_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.flush()
        return True

    def _find(self, follower_id: int, following_id: int) -> FollowModel | None:
        return (
            self.session.query(FollowModel)
            .filter_by(follower_id=follower_id, following_id=following_id)
            .first()
        )


__all__ = ["BookmarkRepository", "FollowRepository", "LikeRepository", "RepostRepository"]
