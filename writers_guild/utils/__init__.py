"""Utility helpers for reusable functionality."""

from .datetime import utcnow
from .mentions import excerpt, extract_mentions

__all__ = [
    "excerpt",
    "extract_mentions",
    "utcnow",
]
