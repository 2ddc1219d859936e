"""Extraction of ``@username`` mentions from post content."""

from __future__ import annotations

import re

_MENTION_PATTERN = re.compile(r"(?<![\w@])@([A-Za-z0-9_]{3,30})\b")


def extract_mentions(content: str) -> list[str]:
    """Return mentioned usernames in order of first appearance, lowercased."""

    seen: set[str] = set()
    usernames: list[str] = []
    for match in _MENTION_PATTERN.finditer(content or ""):
        username = match.group(1).lower()
        if username in seen:
            continue
        seen.add(username)
        usernames.append(username)
    return usernames


def excerpt(content: str, length: int = 80) -> str:
    """Return a single-line preview of ``content`` of at most ``length`` chars."""

    flattened = " ".join((content or "").split())
    if len(flattened) <= length:
        return flattened
    return flattened[: length - 1].rstrip() + "…"


__all__ = ["excerpt", "extract_mentions"]
