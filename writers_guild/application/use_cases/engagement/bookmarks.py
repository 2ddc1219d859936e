"""Use cases for saving posts for later."""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from writers_guild.application.use_cases.posts import get_visible_post
from writers_guild.domain.entities import Bookmark, PostView, User
from writers_guild.domain.errors import DuplicateActionError, NotFoundError
from writers_guild.infrastructure.repositories import BookmarkRepository, PostRepository


def bookmark_post(session: Session, *, user: User, post_id: int) -> Bookmark:
    get_visible_post(session, post_id, viewer_id=user.id)
    bookmarks = BookmarkRepository(session)
    if bookmarks.exists(user.id, post_id):
        raise DuplicateActionError("Post already bookmarked")
    try:
        bookmark = bookmarks.create(user.id, post_id)
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise DuplicateActionError("Post already bookmarked") from exc
    except SQLAlchemyError:
        session.rollback()
        raise
    return bookmark


def remove_bookmark(session: Session, *, user: User, post_id: int) -> None:
    if not BookmarkRepository(session).delete(user.id, post_id):
        raise NotFoundError("Post is not bookmarked")
    session.commit()


def list_bookmarks(session: Session, *, user: User) -> list[PostView]:
    return PostRepository(session).list_bookmarked(user.id)


def clear_bookmarks(session: Session, *, user: User) -> int:
    removed = BookmarkRepository(session).clear(user.id)
    session.commit()
    return removed


__all__ = ["bookmark_post", "clear_bookmarks", "list_bookmarks", "remove_bookmark"]
