"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from writers_guild.domain.entities import User, UserStats, UserSummary
from writers_guild.infrastructure.models import (
    FollowModel,
    PostModel,
    UserModel,
)
from writers_guild.utils import utcnow


class UserRepository:
    """Provide CRUD and discovery queries for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_username(self, username: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.username) == username.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def get_by_login(self, login: str) -> User | None:
        """Return the user whose username or email matches ``login``."""

        lowered = login.lower()
        model = (
            self.session.query(UserModel)
            .filter(
                or_(
                    func.lower(UserModel.username) == lowered,
                    func.lower(UserModel.email) == lowered,
                )
            )
            .first()
        )
        return self._to_entity(model) if model else None

    def exists_with_username_or_email(self, username: str, email: str) -> bool:
        query = self.session.query(UserModel.id).filter(
            or_(
                func.lower(UserModel.username) == username.lower(),
                func.lower(UserModel.email) == email.lower(),
            )
        )
        return query.first() is not None

    def list_by_usernames(self, usernames: Sequence[str]) -> list[User]:
        if not usernames:
            return []
        lowered = [username.lower() for username in usernames]
        query = self.session.query(UserModel).filter(
            func.lower(UserModel.username).in_(lowered)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_admin_ids(self) -> list[int]:
        query = self.session.query(UserModel.id).filter(
            or_(UserModel.is_admin.is_(True), UserModel.is_super_admin.is_(True))
        )
        return [user_id for (user_id,) in query.all()]

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        model.created_at = user.created_at or utcnow()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if model is None:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        model.updated_at = utcnow()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def increment_counter(self, user_id: int, counter: str) -> None:
        """Atomically add one to ``posts_count`` or ``comments_count``; flushed only."""

        column = {
            "posts_count": UserModel.posts_count,
            "comments_count": UserModel.comments_count,
        }[counter]
        self.session.query(UserModel).filter(UserModel.id == user_id).update(
            {column: column + 1}, synchronize_session=False
        )
        self.session.flush()

    def mark_verified(self, user_id: int) -> None:
        self.session.query(UserModel).filter(UserModel.id == user_id).update(
            {UserModel.is_verified: True, UserModel.updated_at: utcnow()},
            synchronize_session=False,
        )
        self.session.commit()

    def delete(self, user_id: int) -> None:
        model = self.session.get(UserModel, user_id)
        if model is None:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def search(self, query_text: str, *, limit: int = 10) -> list[User]:
        pattern = f"%{query_text.lower()}%"
        query = (
            self.session.query(UserModel)
            .filter(UserModel.is_active.is_(True))
            .filter(
                or_(
                    func.lower(UserModel.username).like(pattern),
                    func.lower(UserModel.display_name).like(pattern),
                    func.lower(func.coalesce(UserModel.bio, "")).like(pattern),
                )
            )
            .order_by(UserModel.username.asc())
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_suggested(self, user_id: int, *, limit: int = 5) -> list[User]:
        """Return active users that ``user_id`` does not follow yet."""

        followed = select(FollowModel.following_id).where(FollowModel.follower_id == user_id)
        followers_count = (
            select(func.count(FollowModel.id))
            .where(FollowModel.following_id == UserModel.id)
            .scalar_subquery()
        )
        query = (
            self.session.query(UserModel)
            .filter(UserModel.id != user_id)
            .filter(UserModel.is_active.is_(True))
            .filter(UserModel.id.not_in(followed))
            .order_by(followers_count.desc(), UserModel.id.asc())
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_trending(self, *, since: datetime, limit: int = 10) -> list[User]:
        """Return authors ranked by likes received on posts since ``since``."""

        likes_total = func.coalesce(func.sum(PostModel.likes_count), 0)
        query = (
            self.session.query(UserModel, likes_total.label("likes_total"))
            .join(PostModel, PostModel.author_id == UserModel.id)
            .filter(PostModel.created_at >= since)
            .filter(PostModel.is_private.is_(False))
            .group_by(UserModel.id)
            .order_by(likes_total.desc(), UserModel.id.asc())
            .limit(limit)
        )
        return [self._to_entity(model) for model, _ in query.all()]

    def list_followers(self, user_id: int) -> list[User]:
        query = (
            self.session.query(UserModel)
            .join(FollowModel, FollowModel.follower_id == UserModel.id)
            .filter(FollowModel.following_id == user_id)
            .order_by(FollowModel.created_at.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_following(self, user_id: int) -> list[User]:
        query = (
            self.session.query(UserModel)
            .join(FollowModel, FollowModel.following_id == UserModel.id)
            .filter(FollowModel.follower_id == user_id)
            .order_by(FollowModel.created_at.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get_stats(self, user_id: int) -> UserStats | None:
        model = self.session.get(UserModel, user_id)
        if model is None:
            return None
        followers = (
            self.session.query(func.count(FollowModel.id))
            .filter(FollowModel.following_id == user_id)
            .scalar()
        )
        following = (
            self.session.query(func.count(FollowModel.id))
            .filter(FollowModel.follower_id == user_id)
            .scalar()
        )
        likes_received = (
            self.session.query(func.coalesce(func.sum(PostModel.likes_count), 0))
            .filter(PostModel.author_id == user_id)
            .scalar()
        )
        return UserStats(
            user_id=user_id,
            posts_count=model.posts_count or 0,
            comments_count=model.comments_count or 0,
            followers_count=int(followers or 0),
            following_count=int(following or 0),
            likes_received=int(likes_received or 0),
        )

    @staticmethod
    def to_summary(model: UserModel | None) -> UserSummary | None:
        if model is None:
            return None
        return UserSummary(
            id=model.id,
            username=model.username,
            display_name=model.display_name,
            profile_image_url=model.profile_image_url,
            is_verified=bool(model.is_verified),
        )

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.username = user.username
        model.email = user.email
        model.password = user.password
        model.display_name = user.display_name
        model.bio = user.bio
        model.location = user.location
        model.website = user.website
        model.profile_image_url = user.profile_image_url
        model.cover_image_url = user.cover_image_url
        model.genres = list(user.genres or [])
        model.is_verified = user.is_verified
        model.is_admin = user.is_admin
        model.is_super_admin = user.is_super_admin
        model.is_active = user.is_active

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            password=model.password,
            display_name=model.display_name,
            bio=model.bio,
            location=model.location,
            website=model.website,
            profile_image_url=model.profile_image_url,
            cover_image_url=model.cover_image_url,
            genres=list(model.genres or []),
            is_verified=bool(model.is_verified),
            is_admin=bool(model.is_admin),
            is_super_admin=bool(model.is_super_admin),
            is_active=bool(model.is_active),
            posts_count=model.posts_count or 0,
            comments_count=model.comments_count or 0,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["UserRepository"]
