"""Row views over a table's records."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .table import Table


class Row:
    """
    One record of a table, bound to that table.

    Iterating a row yields the raw (unformatted) value of each column;
    ``str(row)`` renders it, including any header block or divider that
    precedes it in the table.

    Example:
        table = Table([1, 10], "n")
        row = next(iter(table))
        list(row)       # [1]
        row.to_dict()   # {"n": 1}
    """

    def __init__(
        self,
        table: Table,
        source: Any,
        *,
        index: int,
        header: bool = False,
        divider: bool = False,
    ) -> None:
        self.table = table
        self.source = source
        self.index = index
        self.header = header
        self.divider = divider

    def __iter__(self) -> Iterator[Any]:
        for column in self.table.columns:
            yield column.body_cell_value(self.source)

    def __str__(self) -> str:
        if not self.table.columns:
            return ""
        return self.table.formatted_body_row(
            self.source,
            index=self.index,
            with_header=self.header,
            divider=self.divider,
        )

    def __repr__(self) -> str:
        return f"Row(index={self.index}, source={self.source!r})"

    def to_dict(self) -> dict[Any, Any]:
        """Map each column label to this row's raw value for that column."""
        return {column.label: value for column, value in zip(self.table.columns, self)}
