"""Small text scanning helpers used by the XPM reader."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def find(text: str, needle: str, limit: int) -> int:
    """Return the index of the first ``needle`` in ``text``, or -1.

    When the needle is longer than ``limit`` nothing is searched and -1
    is returned.
    """
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches inside double-quoted strings.

    Each double quote met while scanning toggles the quoted state; a match
    only counts when it starts outside a quoted region.
    """
    if len(needle) > limit:
        return -1
    quoted = False
    last = len(text) - len(needle)
    if last < 0:
        return -1
    for pos, char in enumerate(text[: last + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs only."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]