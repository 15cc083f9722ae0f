"""
Display-width and grapheme utilities.

Every width comparison in monogrid goes through this module, so that
double-width (CJK, emoji) and zero-width (combining marks, control)
characters are measured the way a terminal renders them.

Key functions:
    display_width: Rendered column width of a string
    grapheme_clusters: Split text into user-perceived characters
    split_lines: Split text on any line-break convention
    wrapped_width: Widest line of possibly multi-line text
"""

from __future__ import annotations

import regex
import wcwidth

NEWLINE = regex.compile(r"\r\n|\n|\r")
"""Matches every supported hard line break."""

GRAPHEME = regex.compile(r"\X")


def display_width(text: str) -> int:
    """
    Return the number of terminal columns occupied by ``text``.

    ``wcwidth.wcswidth`` returns -1 when the string holds a non-printable
    character; in that case the width is summed per character with
    non-printables counted as zero.

    Args:
        text: Text to measure

    Returns:
        Non-negative display width (0 for the empty string)
    """
    if not text:
        return 0
    width = wcwidth.wcswidth(text)
    if width >= 0:
        return width
    total = 0
    for char in text:
        char_width = wcwidth.wcwidth(char)
        if char_width > 0:
            total += char_width
    return total


def grapheme_clusters(text: str) -> list[str]:
    """Split ``text`` into extended grapheme clusters."""
    return GRAPHEME.findall(text)


def split_lines(text: str) -> list[str]:
    """
    Split ``text`` on hard line breaks.

    Unlike ``str.splitlines`` a trailing break yields a final empty segment,
    and only ``\\r\\n``, ``\\n`` and ``\\r`` count as breaks.
    """
    return NEWLINE.split(text)


def wrapped_width(text: str) -> int:
    """Return the display width of the widest line in ``text``."""
    return max(display_width(line) for line in split_lines(text))
