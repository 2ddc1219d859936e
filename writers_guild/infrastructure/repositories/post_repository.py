"""Persistence helpers for posts and the per-post engagement aggregation."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from writers_guild.domain.entities import Post, PostView
from writers_guild.infrastructure.models import (
    BookmarkModel,
    PostLikeModel,
    PostModel,
    RepostModel,
    UserModel,
)
from writers_guild.utils import utcnow

from .user_repository import UserRepository

_COUNTERS = {
    "likes_count": PostModel.likes_count,
    "comments_count": PostModel.comments_count,
    "reposts_count": PostModel.reposts_count,
    "views_count": PostModel.views_count,
}


class PostRepository:
    """Provide CRUD operations and feed queries for :class:`Post` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, post_id: int) -> Post | None:
        model = self.session.get(PostModel, post_id)
        return self._to_entity(model) if model else None

    def get_view(self, post_id: int, *, viewer_id: int | None = None) -> PostView | None:
        model = self.session.get(PostModel, post_id)
        if model is None:
            return None
        return self._build_views([model], viewer_id)[0]

    def create(self, post: Post) -> Post:
        model = PostModel()
        self._apply_entity_to_model(model, post)
        model.created_at = post.created_at or utcnow()
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, post: Post) -> Post:
        model = self.session.get(PostModel, post.id)
        if model is None:
            msg = f"Post with id {post.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, post)
        model.updated_at = utcnow()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, post_id: int) -> None:
        model = self.session.get(PostModel, post_id)
        if model is None:
            msg = f"Post with id {post_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def adjust_counter(self, post_id: int, counter: str, delta: int) -> None:
        """Add ``delta`` to ``counter`` in the database, never going below zero.

        Only flushed; the caller commits it with the row the counter derives from.
        """

        column = _COUNTERS[counter]
        new_value = case((column + delta < 0, 0), else_=column + delta)
        self.session.query(PostModel).filter(PostModel.id == post_id).update(
            {column: new_value}, synchronize_session=False
        )
        self.session.flush()

    def add_collaborator(self, post_id: int, user_id: int) -> None:
        model = self.session.get(PostModel, post_id)
        user = self.session.get(UserModel, user_id)
        if model is None or user is None:
            msg = f"Post {post_id} or user {user_id} not found"
            raise ValueError(msg)
        if user not in model.collaborators:
            model.collaborators.append(user)
            self.session.flush()

    def list_feed(
        self,
        *,
        limit: int = 20,
        offset: int = 0,
        viewer_id: int | None = None,
        author_id: int | None = None,
    ) -> list[PostView]:
        query = self.session.query(PostModel)
        if author_id is not None:
            query = query.filter(PostModel.author_id == author_id)
            if viewer_id != author_id:
                query = query.filter(PostModel.is_private.is_(False))
        else:
            query = query.filter(PostModel.is_private.is_(False))
        query = (
            query.order_by(PostModel.created_at.desc(), PostModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return self._build_views(query.all(), viewer_id)

    def list_bookmarked(self, user_id: int) -> list[PostView]:
        query = (
            self.session.query(PostModel)
            .join(BookmarkModel, BookmarkModel.post_id == PostModel.id)
            .filter(BookmarkModel.user_id == user_id)
            .order_by(BookmarkModel.created_at.desc(), BookmarkModel.id.desc())
        )
        return self._build_views(query.all(), user_id)

    def search(self, query_text: str, *, limit: int = 20, viewer_id: int | None = None) -> list[PostView]:
        pattern = f"%{query_text.lower()}%"
        query = (
            self.session.query(PostModel)
            .filter(PostModel.is_private.is_(False))
            .filter(
                func.lower(PostModel.content).like(pattern)
                | func.lower(func.coalesce(PostModel.title, "")).like(pattern)
            )
            .order_by(PostModel.created_at.desc(), PostModel.id.desc())
            .limit(limit)
        )
        return self._build_views(query.all(), viewer_id)

    def list_trending(
        self, *, since: datetime, limit: int = 20, viewer_id: int | None = None
    ) -> list[PostView]:
        """Rank recent public posts by weighted engagement."""

        score = PostModel.likes_count * 2 + PostModel.comments_count * 3 + PostModel.reposts_count * 4
        query = (
            self.session.query(PostModel)
            .filter(PostModel.is_private.is_(False))
            .filter(PostModel.created_at >= since)
            .order_by(score.desc(), PostModel.created_at.desc())
            .limit(limit)
        )
        return self._build_views(query.all(), viewer_id)

    def count_by_genre(self, *, since: datetime, limit: int = 10) -> list[tuple[str | None, int]]:
        total = func.count(PostModel.id)
        query = (
            self.session.query(PostModel.genre, total)
            .filter(PostModel.is_private.is_(False))
            .filter(PostModel.created_at >= since)
            .group_by(PostModel.genre)
            .order_by(total.desc())
            .limit(limit)
        )
        return [(genre, int(count)) for genre, count in query.all()]

    def _build_views(self, models: Sequence[PostModel], viewer_id: int | None) -> list[PostView]:
        if not models:
            return []
        liked: set[int] = set()
        bookmarked: set[int] = set()
        reposted: set[int] = set()
        if viewer_id is not None:
            post_ids = [model.id for model in models]
            liked = self._post_ids_for(PostLikeModel, viewer_id, post_ids)
            bookmarked = self._post_ids_for(BookmarkModel, viewer_id, post_ids)
            reposted = self._post_ids_for(RepostModel, viewer_id, post_ids)
        return [
            PostView(
                post=self._to_entity(model),
                author=UserRepository.to_summary(model.author),
                is_liked=model.id in liked,
                is_bookmarked=model.id in bookmarked,
                is_reposted=model.id in reposted,
            )
            for model in models
        ]

    def _post_ids_for(self, table, user_id: int, post_ids: Sequence[int]) -> set[int]:
        rows = (
            self.session.query(table.post_id)
            .filter(table.user_id == user_id)
            .filter(table.post_id.in_(post_ids))
            .all()
        )
        return {post_id for (post_id,) in rows}

    @staticmethod
    def _apply_entity_to_model(model: PostModel, post: Post) -> None:
        model.author_id = post.author_id
        model.title = post.title
        model.content = post.content
        model.formatted_content = post.formatted_content
        model.post_type = post.post_type
        model.genre = post.genre
        model.is_private = post.is_private

    @staticmethod
    def _to_entity(model: PostModel) -> Post:
        return Post(
            id=model.id,
            author_id=model.author_id,
            title=model.title,
            content=model.content,
            formatted_content=model.formatted_content,
            post_type=model.post_type,
            genre=model.genre,
            is_private=bool(model.is_private),
            likes_count=model.likes_count or 0,
            comments_count=model.comments_count or 0,
            reposts_count=model.reposts_count or 0,
            views_count=model.views_count or 0,
            collaborator_ids=[user.id for user in model.collaborators],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["PostRepository"]
