"""Persistence helpers for comments and comment likes."""

from __future__ import annotations

from sqlalchemy import case
from sqlalchemy.orm import Session

from writers_guild.domain.entities import Comment
from writers_guild.infrastructure.models import CommentLikeModel, CommentModel
from writers_guild.utils import utcnow

from .user_repository import UserRepository


class CommentRepository:
    """Provide CRUD operations for :class:`Comment` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, comment_id: int) -> Comment | None:
        model = self.session.get(CommentModel, comment_id)
        return self._to_entity(model) if model else None

    def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            user_id=comment.user_id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            content=comment.content,
            level=comment.level,
            created_at=comment.created_at or utcnow(),
        )
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_post(self, post_id: int, *, viewer_id: int | None = None) -> list[Comment]:
        query = (
            self.session.query(CommentModel)
            .filter(CommentModel.post_id == post_id)
            .order_by(CommentModel.created_at.asc(), CommentModel.id.asc())
        )
        return self._with_viewer_flags(query.all(), viewer_id)

    def list_replies(self, comment_id: int, *, viewer_id: int | None = None) -> list[Comment]:
        query = (
            self.session.query(CommentModel)
            .filter(CommentModel.parent_id == comment_id)
            .order_by(CommentModel.created_at.asc(), CommentModel.id.asc())
        )
        return self._with_viewer_flags(query.all(), viewer_id)

    def has_liked(self, user_id: int, comment_id: int) -> bool:
        return (
            self.session.query(CommentLikeModel.id)
            .filter_by(user_id=user_id, comment_id=comment_id)
            .first()
            is not None
        )

    def like(self, user_id: int, comment_id: int) -> None:
        self.session.add(CommentLikeModel(user_id=user_id, comment_id=comment_id))
        self._adjust_likes(comment_id, 1)
        self.session.flush()

    def unlike(self, user_id: int, comment_id: int) -> None:
        self.session.query(CommentLikeModel).filter_by(
            user_id=user_id, comment_id=comment_id
        ).delete(synchronize_session=False)
        self._adjust_likes(comment_id, -1)
        self.session.flush()

    def _adjust_likes(self, comment_id: int, delta: int) -> None:
        column = CommentModel.likes_count
        self.session.query(CommentModel).filter(CommentModel.id == comment_id).update(
            {column: case((column + delta < 0, 0), else_=column + delta)},
            synchronize_session=False,
        )

    def _with_viewer_flags(self, models: list[CommentModel], viewer_id: int | None) -> list[Comment]:
        liked: set[int] = set()
        if viewer_id is not None and models:
            rows = (
                self.session.query(CommentLikeModel.comment_id)
                .filter(CommentLikeModel.user_id == viewer_id)
                .filter(CommentLikeModel.comment_id.in_([model.id for model in models]))
                .all()
            )
            liked = {comment_id for (comment_id,) in rows}
        comments = []
        for model in models:
            comment = self._to_entity(model)
            comment.is_liked = model.id in liked
            comments.append(comment)
        return comments

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            user_id=model.user_id,
            post_id=model.post_id,
            content=model.content,
            parent_id=model.parent_id,
            level=model.level or 0,
            likes_count=model.likes_count or 0,
            created_at=model.created_at,
            updated_at=model.updated_at,
            author=UserRepository.to_summary(model.author),
        )


__all__ = ["CommentRepository"]
