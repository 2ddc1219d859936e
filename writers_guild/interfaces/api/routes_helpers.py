"""Shared helpers for the API route modules."""

from fastapi import HTTPException, status

from writers_guild.domain.entities import PostView
from writers_guild.domain.errors import (
    AuthenticationError,
    DuplicateActionError,
    NotFoundError,
    PermissionDeniedError,
    SelfActionError,
    ValidationFailedError,
    WritersGuildError,
)
from writers_guild.interfaces.api.schemas import PostRead, UserSummaryRead

_STATUS_BY_ERROR: tuple[tuple[type[WritersGuildError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateActionError, status.HTTP_409_CONFLICT),
    (SelfActionError, status.HTTP_400_BAD_REQUEST),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (ValidationFailedError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
)


def http_error(exc: WritersGuildError) -> HTTPException:
    """Translate a domain error into the matching ``HTTPException``."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def post_to_read(view: PostView) -> PostRead:
    post = view.post
    return PostRead(
        id=post.id,
        author_id=post.author_id,
        title=post.title,
        content=post.content,
        formatted_content=post.formatted_content,
        post_type=post.post_type,
        genre=post.genre,
        is_private=post.is_private,
        likes_count=post.likes_count,
        comments_count=post.comments_count,
        reposts_count=post.reposts_count,
        views_count=post.views_count,
        collaborator_ids=list(post.collaborator_ids),
        created_at=post.created_at,
        updated_at=post.updated_at,
        author=UserSummaryRead.model_validate(view.author) if view.author else None,
        is_liked=view.is_liked,
        is_bookmarked=view.is_bookmarked,
        is_reposted=view.is_reposted,
    )


__all__ = ["http_error", "post_to_read"]
