"""Tests for ``@username`` extraction and previews."""

import pytest

from writers_guild.utils import excerpt, extract_mentions


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("Thanks @alice and @bob_2!", ["alice", "bob_2"]),
        ("@Alice wrote this with @alice", ["alice"]),
        ("mail me at someone@example.com", []),
        ("@ab is too short", []),
        ("", []),
    ],
)
def test_extract_mentions(content, expected):
    assert extract_mentions(content) == expected


def test_excerpt_flattens_whitespace_and_truncates():
    text = "line one\n\nline   two " + "x" * 100

    preview = excerpt(text, length=20)

    assert len(preview) <= 20
    assert preview.startswith("line one line two")
    assert preview.endswith("…")


def test_excerpt_keeps_short_content():
    assert excerpt("  short  ") == "short"
