"""
Cell layout engine.

A :class:`Cell` turns one logical value into a stack of fixed-width display
lines ("subcells") for a given column width:

- **Hard breaks**: the formatted text is split on line breaks first; every
  segment, even an empty one, yields at least one subcell.
- **Wrapping**: each segment is wrapped by grapheme cluster (``rune``) or at
  word boundaries (``word``) so that no line exceeds the column width and no
  user-perceived character is split across lines.
- **Alignment**: each subcell is aligned and padded on its own; the styler
  sees the unpadded text so escape codes never count toward the width.
- **Height bounding**: :meth:`Cell.padded_truncated_subcells` fits the stack
  to a row height, blank-filling short cells and marking truncated ones.

Key functions:
    pad_content: Align and pad one line of content to a width
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import regex

from .alignment import resolve_alignment, split_padding
from .models import Alignment, ValueKind, WrapPreserve
from .text import display_width, grapheme_clusters, split_lines

LineStyler = Callable[[Any, str, int], str]
"""Internal styler form: ``(value, text, line_index) -> str``."""

# Each word keeps its trailing space or dash: "this " or "well-"
WORD_BOUNDARY = regex.compile(r"(?<=[ \-—–])\b", regex.VERSION1)


def pad_content(
    content: str,
    width: int,
    alignment: Alignment,
    style: Callable[[str], str] | None = None,
) -> str:
    """
    Align ``content`` within ``width`` columns using literal spaces.

    Args:
        content: Unpadded text, at most ``width`` columns wide
        width: Target display width
        alignment: Concrete alignment (not ``AUTO``)
        style: Optional callable applied to ``content`` before padding

    Returns:
        The padded (and possibly styled) line
    """
    padding = max(width - display_width(content), 0)
    left, right = split_padding(padding, alignment)
    if style is not None:
        content = style(content)
    return f"{' ' * left}{content}{' ' * right}"


class Cell:
    """
    A single cell of a table, laid out for a fixed column width.

    All derived fields are computed in the constructor. Errors raised by
    the formatter or styler propagate to the caller unchanged.

    Attributes:
        value: The raw value extracted from the record
        kind: Classification of ``value`` used for ``auto`` alignment
        alignment: The concrete alignment applied to every subcell
        formatted_content: ``value`` after applying the formatter
        subcells: Wrapped, aligned lines, each exactly ``width`` columns wide
    """

    def __init__(
        self,
        value: Any,
        *,
        formatter: Callable[[Any], str],
        alignment: Alignment,
        width: int,
        styler: LineStyler | None = None,
        truncation_indicator: str = "~",
        padding_character: str = " ",
        wrap_preserve: WrapPreserve = WrapPreserve.RUNE,
    ) -> None:
        self.value = value
        self.kind = ValueKind.of(value)
        self.alignment = resolve_alignment(self.kind, alignment)
        self.width = width
        self.truncation_indicator = truncation_indicator
        self.padding_character = padding_character
        self.wrap_preserve = wrap_preserve
        self._styler = styler
        self.formatted_content = formatter(value)
        self.subcells: tuple[str, ...] = tuple(self._calculate_subcells())

    @property
    def height(self) -> int:
        """Number of subcells needed to show the whole content."""
        return len(self.subcells)

    def padded_truncated_subcells(
        self,
        target_height: int,
        left_padding: int,
        right_padding: int,
    ) -> list[str]:
        """
        Fit the subcells to ``target_height`` lines and add outer padding.

        Short cells are filled with blank lines. When lines are dropped and
        there is outer padding to spare, the last line carries the styled
        truncation indicator just before the remaining right padding (or,
        with no right padding, right after the content). Without outer
        padding excess lines are dropped silently.

        Args:
            target_height: Number of lines to return
            left_padding: Padding characters before each line
            right_padding: Padding characters after each line

        Returns:
            ``target_height`` strings, each ``width + left_padding +
            right_padding`` columns wide
        """
        truncated = self.height > target_height
        mark_last = truncated and (left_padding + right_padding) != 0
        blank = self.padding_character * self.width

        lines: list[str] = []
        for index in range(target_height):
            inner = self.subcells[index] if index < self.height else blank
            lpad = self.padding_character * left_padding
            rpad = self.padding_character * right_padding
            if mark_last and index == target_height - 1:
                indicator = self._style(self.truncation_indicator, index)
                if right_padding > 0:
                    rpad = indicator + self.padding_character * (right_padding - 1)
                else:
                    lpad = self.padding_character * (left_padding - 1)
                    rpad = indicator
            lines.append(f"{lpad}{inner}{rpad}")
        return lines

    def _style(self, text: str, line_index: int) -> str:
        if self._styler is None:
            return text
        return self._styler(self.value, text, line_index)

    def _calculate_subcells(self) -> list[str]:
        subcells: list[str] = []
        for segment in split_lines(self.formatted_content):
            if self.wrap_preserve is WrapPreserve.WORD:
                lines = self._wrap_words(segment)
            else:
                lines = self._wrap_runes(segment)
            for line in lines:
                line_index = len(subcells)
                subcells.append(
                    pad_content(
                        line,
                        self.width,
                        self.alignment,
                        lambda text, i=line_index: self._style(text, i),
                    )
                )
        return subcells

    def _fit_unit(self, unit: str) -> tuple[str, int]:
        """Return ``unit`` and its width, or the indicator if it can never fit."""
        unit_width = display_width(unit)
        if unit_width > self.width:
            return self.truncation_indicator, display_width(self.truncation_indicator)
        return unit, unit_width

    def _wrap_runes(self, segment: str) -> list[str]:
        lines: list[str] = []
        current, current_width = "", 0
        for unit in grapheme_clusters(segment):
            unit, unit_width = self._fit_unit(unit)
            if current_width + unit_width > self.width:
                lines.append(current)
                current, current_width = "", 0
            current += unit
            current_width += unit_width
        lines.append(current)
        return lines

    def _wrap_words(self, segment: str) -> list[str]:
        lines: list[str] = []
        current, current_width = "", 0
        for word in WORD_BOUNDARY.split(segment):
            if not word:
                continue
            word_width = display_width(word)
            combined_width = current_width + word_width
            if combined_width - 1 == self.width and word.endswith(" "):
                # Final word of the line; its trailing space is stripped
                pass
            elif combined_width > self.width and current.strip():
                lines.append(current.strip())
                current, current_width = "", 0

            if word_width >= self.width:
                for unit in grapheme_clusters(word):
                    unit, unit_width = self._fit_unit(unit)
                    if current_width + unit_width > self.width and unit != " ":
                        if current.strip():
                            lines.append(current.strip())
                        current, current_width = "", 0
                    current += unit
                    current_width += unit_width
            else:
                current += word
                current_width += word_width
        lines.append(current.strip())

        fitted: list[str] = []
        for line in lines:
            if display_width(line) > self.width:
                fitted.extend(self._wrap_runes(line))
            else:
                fitted.append(line)
        return fitted
