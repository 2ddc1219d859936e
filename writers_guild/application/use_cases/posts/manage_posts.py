"""Use cases for reading, editing and removing posts."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from writers_guild.domain.entities import Post, PostView, User
from writers_guild.domain.errors import NotFoundError, PermissionDeniedError
from writers_guild.infrastructure.repositories import PostRepository

from .create_post import validate_post_fields

_EDITABLE_FIELDS = ("title", "content", "formatted_content", "post_type", "genre", "is_private")


def get_visible_post(session: Session, post_id: int, *, viewer_id: int | None = None) -> Post:
    """Return ``post_id`` if ``viewer_id`` may see it.

    Private posts are only visible to their author and collaborators; to
    anyone else they do not exist.
    """

    post = PostRepository(session).get(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    if post.is_private and (viewer_id is None or not post.is_editable_by(viewer_id)):
        raise NotFoundError("Post not found")
    return post


def get_post(session: Session, post_id: int, *, viewer_id: int | None = None) -> PostView:
    get_visible_post(session, post_id, viewer_id=viewer_id)
    return PostRepository(session).get_view(post_id, viewer_id=viewer_id)


def list_posts(
    session: Session,
    *,
    viewer_id: int | None = None,
    limit: int = 20,
    offset: int = 0,
) -> list[PostView]:
    return PostRepository(session).list_feed(limit=limit, offset=offset, viewer_id=viewer_id)


def list_user_posts(
    session: Session,
    *,
    author_id: int,
    viewer_id: int | None = None,
    limit: int = 20,
    offset: int = 0,
) -> list[PostView]:
    return PostRepository(session).list_feed(
        limit=limit, offset=offset, viewer_id=viewer_id, author_id=author_id
    )


def update_post(session: Session, *, post_id: int, editor: User, changes: dict[str, Any]) -> PostView:
    repository = PostRepository(session)
    post = repository.get(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    if not post.is_editable_by(editor.id):
        raise PermissionDeniedError("Only the author or a collaborator can edit this post")

    for field_name in _EDITABLE_FIELDS:
        if field_name in changes and changes[field_name] is not None:
            setattr(post, field_name, changes[field_name])
    validate_post_fields(content=post.content, post_type=post.post_type)
    repository.update(post)
    return repository.get_view(post_id, viewer_id=editor.id)


def delete_post(session: Session, *, post_id: int, acting_user: User) -> None:
    """Delete a post as its author, or as an administrator."""

    repository = PostRepository(session)
    post = repository.get(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    if post.author_id != acting_user.id and not acting_user.has_admin_rights():
        raise PermissionDeniedError("Only the author can delete this post")
    repository.delete(post_id)


__all__ = [
    "delete_post",
    "get_post",
    "get_visible_post",
    "list_posts",
    "list_user_posts",
    "update_post",
]
