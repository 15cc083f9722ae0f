"""Table-wide configuration and defaults."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Any

from .alignment import parse_alignment
from .border import Border, BorderStyler
from .exceptions import (
    InvalidHeaderFrequencyError,
    InvalidPaddingCharacterError,
    InvalidTruncationIndicatorError,
    InvalidWidthError,
    InvalidWrapError,
)
from .models import Alignment, WrapPreserve
from .text import display_width

DEFAULT_COLUMN_WIDTH = 8
"""Content width of a column that is declared without an explicit width."""

DEFAULT_COLUMN_PADDING = 1
"""Padding characters on each side of every cell."""

DEFAULT_BORDER = "classic"

DEFAULT_TRUNCATION_INDICATOR = "~"

HEADER_AT_START = "start"
"""Header frequency showing the header above the first row only."""

BORDER_ENV_VAR = "MONOGRID_BORDER"
"""Environment variable overriding the default border preset."""

COLUMN_WIDTH_ENV_VAR = "MONOGRID_COLUMN_WIDTH"
"""Environment variable overriding the default column width."""

TRUNCATION_INDICATOR_ENV_VAR = "MONOGRID_TRUNCATION_INDICATOR"
"""Environment variable overriding the default truncation indicator."""


def validate_truncation_indicator(value: Any) -> str:
    """Return ``value`` if it is a single character of display width 1."""
    if not isinstance(value, str) or display_width(value) != 1:
        raise InvalidTruncationIndicatorError(value)
    return value


def validate_width(value: Any, field: str = "column width") -> int:
    """Return ``value`` if it is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidWidthError(field, value, "must be a positive integer")
    return value


def _validate_wrap(value: Any, field: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidWrapError(field, value, "must be None or a positive integer")
    return value


def _parse_padding(value: Any) -> tuple[int, int]:
    if isinstance(value, int) and not isinstance(value, bool):
        pair: tuple[Any, ...] = (value, value)
    elif isinstance(value, (tuple, list)) and len(value) == 2:
        pair = tuple(value)
    else:
        raise InvalidWidthError(
            "column padding", value, "expected an int or a (left, right) pair"
        )
    for amount in pair:
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise InvalidWidthError(
                "column padding", value, "padding amounts must be non-negative integers"
            )
    return pair[0], pair[1]


@dataclass(frozen=True)
class TableConfig:
    """
    Defaults shared by every column of a table.

    Values are validated and normalised on construction, so a
    ``TableConfig`` that exists is always usable for rendering.

    Attributes:
        column_width: Content width for columns declared without a width
        column_padding: Padding on each side, or a (left, right) pair
        header_frequency: "start", None (no header) or N (repeat every N rows)
        row_divider_frequency: Draw a rule before every Nth non-header row
        wrap_header_cells_to: Maximum header height in lines (None: unbounded)
        wrap_body_cells_to: Maximum body row height in lines (None: unbounded)
        wrap_preserve: Wrap by grapheme cluster ("rune") or by word ("word")
        truncation_indicator: Marker shown where content was cut off
        padding_character: Character used for outer cell padding
        align_header: Default header alignment
        align_body: Default body alignment
        border: Border preset name or :class:`Border` instance
        border_styler: Optional callable applied to each border fragment
    """

    column_width: int = DEFAULT_COLUMN_WIDTH
    column_padding: int | tuple[int, int] = DEFAULT_COLUMN_PADDING
    header_frequency: str | int | None = HEADER_AT_START
    row_divider_frequency: int | None = None
    wrap_header_cells_to: int | None = None
    wrap_body_cells_to: int | None = None
    wrap_preserve: WrapPreserve | str = WrapPreserve.RUNE
    truncation_indicator: str = DEFAULT_TRUNCATION_INDICATOR
    padding_character: str = " "
    align_header: Alignment | str = Alignment.CENTER
    align_body: Alignment | str = Alignment.AUTO
    border: Border | str = DEFAULT_BORDER
    border_styler: BorderStyler | None = None

    def __post_init__(self) -> None:
        set_ = object.__setattr__
        validate_width(self.column_width)
        set_(self, "column_padding", _parse_padding(self.column_padding))

        frequency = self.header_frequency
        if not (
            frequency is None
            or frequency == HEADER_AT_START
            or (isinstance(frequency, int) and not isinstance(frequency, bool) and frequency > 0)
        ):
            raise InvalidHeaderFrequencyError(frequency)

        _validate_wrap(self.row_divider_frequency, "row divider frequency")
        _validate_wrap(self.wrap_header_cells_to, "wrap_header_cells_to")
        _validate_wrap(self.wrap_body_cells_to, "wrap_body_cells_to")

        try:
            set_(self, "wrap_preserve", WrapPreserve(self.wrap_preserve))
        except ValueError:
            raise InvalidWrapError(
                "wrap_preserve", self.wrap_preserve, "expected 'rune' or 'word'"
            ) from None

        validate_truncation_indicator(self.truncation_indicator)
        padding_character = self.padding_character
        if not isinstance(padding_character, str) or display_width(padding_character) != 1:
            raise InvalidPaddingCharacterError(padding_character)

        set_(self, "align_header", parse_alignment(self.align_header))
        set_(self, "align_body", parse_alignment(self.align_body))

        if isinstance(self.border, Border):
            if self.border_styler is not None:
                set_(self, "border", dataclasses.replace(self.border, styler=self.border_styler))
        else:
            set_(self, "border", Border.from_preset(self.border, self.border_styler))

    @property
    def left_padding(self) -> int:
        return self.column_padding[0]  # type: ignore[index]

    @property
    def right_padding(self) -> int:
        return self.column_padding[1]  # type: ignore[index]

    @classmethod
    def from_env(cls, **overrides: Any) -> TableConfig:
        """
        Build a configuration from environment variables and overrides.

        Reads ``MONOGRID_BORDER``, ``MONOGRID_COLUMN_WIDTH`` and
        ``MONOGRID_TRUNCATION_INDICATOR``. Explicit keyword overrides
        take precedence over the environment.
        """
        options: dict[str, Any] = {}
        if border := os.environ.get(BORDER_ENV_VAR):
            options["border"] = border
        if width := os.environ.get(COLUMN_WIDTH_ENV_VAR):
            try:
                options["column_width"] = int(width)
            except ValueError:
                raise InvalidWidthError(
                    COLUMN_WIDTH_ENV_VAR, width, "must be a positive integer"
                ) from None
        if indicator := os.environ.get(TRUNCATION_INDICATOR_ENV_VAR):
            options["truncation_indicator"] = indicator
        options.update(overrides)
        return cls(**options)
