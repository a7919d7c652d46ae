"""Substring search and word splitting used by the XPM reader."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _terminated(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    return text.split("\0", 1)[0]


def find_substring(text: str, find: str, length: int) -> int:
    """Return the position of ``find`` in ``text``, or -1.

    ``length`` is the space available in ``text``; a pattern longer than it is
    never found. The search stops at the first NUL character.
    """
    if len(find) > length:
        return -1
    return _terminated(text).find(find)


def find_substring_unquoted(text: str, find: str, length: int) -> int:
    """Like :func:`find_substring`, but ignore matches inside double quotes."""
    if len(find) > length:
        return -1
    body = _terminated(text)
    quoted = False
    for pos in range(len(body) - len(find) + 1):
        if body[pos] == '"':
            quoted = not quoted
        if not quoted and body.startswith(find, pos):
            return pos
    return -1


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]