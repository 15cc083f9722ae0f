"""
Alignment resolution.

Maps a requested alignment and the kind of a cell's value to the concrete
alignment used for padding, and splits padding between the two sides.
"""

from __future__ import annotations

from typing import Any

from .exceptions import InvalidAlignmentError
from .models import Alignment, ValueKind

_AUTO_ALIGNMENTS = {
    ValueKind.NUMERIC: Alignment.RIGHT,
    ValueKind.BOOLEAN: Alignment.CENTER,
    ValueKind.OTHER: Alignment.LEFT,
}


def parse_alignment(value: Any) -> Alignment:
    """
    Convert a user-supplied alignment into an :class:`Alignment`.

    Accepts an ``Alignment`` member or its name (``"left"``, ``"right"``,
    ``"center"``, ``"auto"``, case-insensitive).

    Raises:
        InvalidAlignmentError: If the value is not a known alignment
    """
    if isinstance(value, Alignment):
        return value
    if isinstance(value, str):
        try:
            return Alignment(value.lower())
        except ValueError:
            pass
    raise InvalidAlignmentError(value)


def resolve_alignment(kind: ValueKind, requested: Alignment) -> Alignment:
    """Return the concrete alignment, inferring ``AUTO`` from the value kind."""
    if requested is Alignment.AUTO:
        return _AUTO_ALIGNMENTS[kind]
    return requested


def split_padding(padding: int, alignment: Alignment) -> tuple[int, int]:
    """
    Split ``padding`` columns into (left, right) for a concrete alignment.

    For ``CENTER`` an odd column goes to the left side.
    """
    if alignment is Alignment.RIGHT:
        return padding, 0
    if alignment is Alignment.CENTER:
        half = padding // 2
        return padding - half, half
    return 0, padding
