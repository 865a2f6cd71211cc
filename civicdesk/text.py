"""Small text helpers shared by the record parsers."""

from __future__ import annotations


def trim(text: str) -> str:
    """Remove leading and trailing spaces (only the space character)."""
    return text.strip(" ")


def tokenize(text: str, delim: str) -> list[str]:
    """Split ``text`` on ``delim`` the way a line reader would.

    An empty string yields no tokens, and a single trailing delimiter does
    not produce a trailing empty token.
    """
    if not text:
        return []
    parts = text.split(delim)
    if parts[-1] == "":
        parts.pop()
    return parts