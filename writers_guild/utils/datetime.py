"""Helpers for working with stored datetimes."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current time as a naive UTC datetime for storage."""

    return datetime.now(tz=timezone.utc).replace(tzinfo=None)


__all__ = ["utcnow"]
