"""
Row composition.

Takes the cells of one table row, bounds them to a common height, and
joins the per-column line stacks into bordered output lines.
"""

from __future__ import annotations

from collections.abc import Sequence

from .border import Border
from .cell import Cell


def row_height(cells: Sequence[Cell], wrap_limit: int | None) -> int:
    """Height of a row: the tallest cell, capped at ``wrap_limit`` (at least 1)."""
    tallest = max((cell.height for cell in cells), default=1)
    if wrap_limit is not None:
        tallest = min(tallest, wrap_limit)
    return max(tallest, 1)


def compose_row(
    cells: Sequence[Cell],
    border: Border,
    wrap_limit: int | None,
    left_padding: int,
    right_padding: int,
) -> list[str]:
    """
    Render one row of cells as bordered lines.

    Args:
        cells: One cell per column, left to right
        border: Border used to join cell contents
        wrap_limit: Maximum number of lines per row (None for unbounded)
        left_padding: Padding characters before each cell's content
        right_padding: Padding characters after each cell's content

    Returns:
        One string per rendered line of the row
    """
    height = row_height(cells, wrap_limit)
    stacks = [cell.padded_truncated_subcells(height, left_padding, right_padding) for cell in cells]
    return [border.join_cell_contents(line) for line in zip(*stacks)]
