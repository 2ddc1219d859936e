"""Domain level exceptions raised by the application use cases."""

from __future__ import annotations


class WritersGuildError(Exception):
    """Base class for expected, client-facing failures."""


class NotFoundError(WritersGuildError):
    """The referenced resource does not exist or is not visible."""


class DuplicateActionError(WritersGuildError):
    """The action was already performed (double like, double follow...)."""


class SelfActionError(WritersGuildError):
    """The actor targeted themselves where that is not allowed."""


class PermissionDeniedError(WritersGuildError):
    """The actor is authenticated but not allowed to perform the action."""


class ValidationFailedError(WritersGuildError):
    """The request is syntactically valid but semantically rejected."""


class AuthenticationError(WritersGuildError):
    """No valid session could be resolved for the request."""


__all__ = [
    "AuthenticationError",
    "DuplicateActionError",
    "NotFoundError",
    "PermissionDeniedError",
    "SelfActionError",
    "ValidationFailedError",
    "WritersGuildError",
]
