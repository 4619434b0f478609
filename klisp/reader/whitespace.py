"""Whitespace and comment handling for the reader."""

from __future__ import annotations

import re

# Runs of spaces, tabs and newlines, and `;` line comments up to (not including)
# the line break.
WS_RE = re.compile(r"(?:[ \t\r\n]+|;[^\r\n]*)*")


def skip_ws(source: str, pos: int = 0) -> int:
    """Return the first position at or after `pos` that is not whitespace or
    part of a comment. Always succeeds; returns `pos` itself when nothing is
    skipped."""
    return WS_RE.match(source, pos).end()


def ws(source: str) -> str:
    """Strip leading whitespace and comments, returning the remainder."""
    return source[skip_ws(source):]
