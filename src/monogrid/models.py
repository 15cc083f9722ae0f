"""Core models for monogrid."""

from __future__ import annotations

import numbers
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Alignment(Enum):
    """Horizontal alignment of cell content."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    AUTO = "auto"


class ValueKind(Enum):
    """
    Kind of an extracted cell value, used to infer ``auto`` alignment.

    The kind is computed once, when the value is extracted from its record.
    """

    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    OTHER = "other"

    @classmethod
    def of(cls, value: Any) -> ValueKind:
        """Classify a value. ``bool`` is checked first since it subclasses ``int``."""
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, numbers.Number):
            return cls.NUMERIC
        return cls.OTHER


class BorderPosition(Enum):
    """Vertical position of a horizontal rule within a table."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class WrapPreserve(Enum):
    """Unit that cell wrapping keeps intact across line breaks."""

    RUNE = "rune"
    WORD = "word"


@dataclass(frozen=True)
class Position:
    """
    Position of a cell within a table.

    Attributes:
        row: Index of the record within the table's source (0 for the first)
        column: Index of the column, counting from the left (0 for the first)
    """

    row: int
    column: int


@dataclass(frozen=True)
class CellData:
    """
    Metadata passed to extended formatters and stylers.

    Attributes:
        source: The record from which the cell's row was derived
        position: Where the cell sits in the table
    """

    source: Any
    position: Position


@dataclass(frozen=True)
class ExtendedHook:
    """
    A formatter or styler that also receives cell metadata.

    Wrap a callable with :func:`extended` to opt in. The wrapped callable
    gets the extra arguments documented for its role:

    - formatter: ``(value, cell_data)``
    - styler: ``(value, text, cell_data, line_index)``
    - header styler: ``(text, column_index, line_index)``
    """

    function: Callable[..., str]

    def __call__(self, *args: Any) -> str:
        return self.function(*args)


def extended(function: Callable[..., str]) -> ExtendedHook:
    """Mark ``function`` as a hook that receives cell metadata."""
    return ExtendedHook(function)
