"""
Table driver.

A :class:`Table` owns an ordered set of columns, a record source and a
:class:`~monogrid.config.TableConfig`. It is built once by declaring
columns, optionally resized with :meth:`Table.pack`, then rendered any
number of times with ``str(table)`` or row by row by iterating it.

Example:
    from monogrid import Table

    table = Table(range(1, 6))
    table.add_column("N", extractor=lambda n: n)
    table.add_column("Doubled", extractor=lambda n: n * 2)
    print(table)

    +----------+----------+
    |     N    |  Doubled |
    +----------+----------+
    |        1 |        2 |
    |        2 |        4 |
    ...
    +----------+----------+

Rendering only reads column widths; ``pack``, ``autosize_columns`` and
``shrink_to`` write them. A table may be rendered from several threads at
once, but callers must not resize it while a render is in progress.
"""

from __future__ import annotations

import dataclasses
import logging
import warnings
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .cell import Cell
from .column import (
    Column,
    Extractor,
    Formatter,
    HeaderStyler,
    Styler,
    attribute_extractor,
)
from .composer import compose_row
from .config import TableConfig, validate_width
from .exceptions import InvalidColumnLabelError
from .models import Alignment, BorderPosition, ExtendedHook
from .row import Row
from .terminal import terminal_width
from .text import wrapped_width

logger = logging.getLogger(__name__)

AUTO = "auto"
"""``pack`` maximum width that asks the terminal for its width."""


class _FieldNamesLabel:
    """Label of the field-names column of a transposed table."""

    def __repr__(self) -> str:
        return "<field names>"


FIELD_NAMES = _FieldNamesLabel()


def _label_key(label: Any) -> str:
    if label is None:
        raise InvalidColumnLabelError(label, "a column label is required")
    if label is FIELD_NAMES:
        return "\x00field-names"
    return str(label)


class Table:
    """
    A table for display in a fixed-width font.

    Args:
        sources: Iterable of records; it is traversed once per render and
            once per ``pack``, so it must be re-iterable
        *columns: Labels of columns to add with default settings
        config: Table-wide defaults; keyword options override its fields
        **options: Any :class:`~monogrid.config.TableConfig` field

    Raises:
        ConfigurationError: If any option or column label is invalid
    """

    def __init__(
        self,
        sources: Iterable[Any],
        *columns: Any,
        config: TableConfig | None = None,
        **options: Any,
    ) -> None:
        if config is None:
            config = TableConfig(**options)
        elif options:
            config = dataclasses.replace(config, **options)
        self.sources = sources
        self.config = config
        self._columns: dict[str, Column] = {}
        for label in columns:
            self.add_column(label)

    # -------------------------------------------------------------------------
    # Columns
    # -------------------------------------------------------------------------

    @property
    def columns(self) -> list[Column]:
        """The table's columns, left to right."""
        return list(self._columns.values())

    def column(self, label: Any) -> Column:
        """Return the column labelled ``label``."""
        try:
            return self._columns[_label_key(label)]
        except KeyError:
            raise InvalidColumnLabelError(label, "no column with this label") from None

    def add_column(
        self,
        label: Any,
        *,
        header: Any = None,
        align_header: Alignment | str | None = None,
        align_body: Alignment | str | None = None,
        width: int | None = None,
        extractor: Extractor | None = None,
        formatter: Formatter | ExtendedHook = str,
        styler: Styler | ExtendedHook | None = None,
        header_styler: HeaderStyler | ExtendedHook | None = None,
        before: Any = None,
        after: Any = None,
    ) -> Table:
        """
        Declare a column.

        Args:
            label: Unique identifier of the column (compared as ``str(label)``)
            header: Header text, converted with ``str`` (default: ``str(label)``)
            align_header: Header alignment (default: the table's)
            align_body: Body alignment (default: the table's)
            width: Content width (default: the table's ``column_width``)
            extractor: Callable returning the cell value for a record
                (default: look ``label`` up as a key or attribute)
            formatter: Callable turning the value into text (default: ``str``)
            styler: Callable ``(value, text) -> str`` applied to each line
            header_styler: Callable ``(text) -> str`` applied to header lines
            before: Insert before the column with this label
            after: Insert after the column with this label

        Returns:
            The table, for chaining

        Raises:
            InvalidColumnLabelError: If the label is taken or ``before`` /
                ``after`` names no column
            ConfigurationError: If an alignment or width is invalid
        """
        key = _label_key(label)
        if key in self._columns:
            raise InvalidColumnLabelError(label)
        if before is not None and after is not None:
            raise InvalidColumnLabelError(label, "specify at most one of before and after")

        config = self.config
        column = Column(
            label,
            header=str(label if header is None else header),
            width=config.column_width if width is None else width,
            index=len(self._columns),
            align_header=config.align_header if align_header is None else align_header,
            align_body=config.align_body if align_body is None else align_body,
            extractor=extractor or attribute_extractor(label),
            formatter=formatter,
            styler=styler,
            header_styler=header_styler,
            truncation_indicator=config.truncation_indicator,
            padding_character=config.padding_character,
            wrap_preserve=config.wrap_preserve,  # type: ignore[arg-type]
        )

        items = list(self._columns.items())
        position = len(items)
        if before is not None or after is not None:
            anchor = _label_key(before if before is not None else after)
            keys = [k for k, _ in items]
            if anchor not in keys:
                raise InvalidColumnLabelError(
                    before if before is not None else after, "no column with this label"
                )
            position = keys.index(anchor) + (0 if before is not None else 1)
        items.insert(position, (key, column))
        self._set_columns(items)
        return self

    def remove_column(self, label: Any) -> bool:
        """Remove the column labelled ``label``; return whether one was removed."""
        key = _label_key(label)
        if key not in self._columns:
            return False
        self._set_columns([(k, c) for k, c in self._columns.items() if k != key])
        return True

    def _set_columns(self, items: list[tuple[str, Column]]) -> None:
        for index, (_, column) in enumerate(items):
            column.index = index
        self._columns = dict(items)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[Row]:
        frequency = self.config.header_frequency
        divider_frequency = self.config.row_divider_frequency
        for index, source in enumerate(self.sources):
            if frequency is None:
                with_header = False
            elif index == 0:
                with_header = True
            elif isinstance(frequency, int):
                with_header = index % frequency == 0
            else:
                with_header = False
            divider = (
                not with_header
                and divider_frequency is not None
                and index > 0
                and index % divider_frequency == 0
            )
            yield Row(self, source, index=index, header=with_header, divider=divider)

    def __str__(self) -> str:
        if not self._columns:
            return ""
        lines = [str(row) for row in self]
        if not lines and self.config.header_frequency is not None:
            lines = self._nonblank(
                [self.horizontal_rule(BorderPosition.TOP), self.formatted_header()]
            )
        bottom = self.horizontal_rule(BorderPosition.BOTTOM)
        if bottom:
            lines.append(bottom)
        return "\n".join(lines)

    def formatted_header(self) -> str:
        """Render the header row alone, without rules."""
        cells = [column.header_cell() for column in self.columns]
        return "\n".join(self._compose(cells, self.config.wrap_header_cells_to))

    def horizontal_rule(self, position: BorderPosition | str = BorderPosition.BOTTOM) -> str:
        """Render a horizontal rule sized to the current column widths."""
        widths = [column.width + self._padding_width for column in self.columns]
        return self.config.border.horizontal_rule(  # type: ignore[union-attr]
            widths, BorderPosition(position)
        )

    def formatted_body_row(
        self,
        source: Any,
        *,
        index: int,
        with_header: bool = False,
        divider: bool = False,
    ) -> str:
        """
        Render the row for ``source``, preceded by a header block or divider.

        Rules that the border draws as nothing are left out rather than
        rendered as blank lines.
        """
        cells = [column.body_cell(source, index) for column in self.columns]
        body = self._compose(cells, self.config.wrap_body_cells_to)
        if with_header:
            first = BorderPosition.TOP if index == 0 else BorderPosition.MIDDLE
            lines = self._nonblank(
                [
                    self.horizontal_rule(first),
                    self.formatted_header(),
                    self.horizontal_rule(BorderPosition.MIDDLE),
                ]
            )
        elif divider:
            lines = self._nonblank([self.horizontal_rule(BorderPosition.MIDDLE)])
        else:
            lines = []
        return "\n".join(lines + body)

    def _compose(self, cells: list[Cell], wrap_limit: int | None) -> list[str]:
        return compose_row(
            cells,
            self.config.border,  # type: ignore[arg-type]
            wrap_limit,
            self.config.left_padding,
            self.config.right_padding,
        )

    @staticmethod
    def _nonblank(lines: list[str]) -> list[str]:
        return [line for line in lines if line]

    @property
    def _padding_width(self) -> int:
        return self.config.left_padding + self.config.right_padding

    # -------------------------------------------------------------------------
    # Sizing
    # -------------------------------------------------------------------------

    def total_width(self) -> int:
        """Rendered width of the table: padded columns plus vertical borders."""
        columns = self.columns
        border = self.config.border
        return sum(column.width + self._padding_width for column in columns) + (
            border.frame_width(len(columns))  # type: ignore[union-attr]
        )

    def pack(
        self,
        max_table_width: int | str | None = AUTO,
        *,
        exclude: Iterable[Any] = (),
        width_provider: Callable[[], int] | None = None,
    ) -> Table:
        """
        Resize columns to fit their content, then shrink to a maximum width.

        Args:
            max_table_width: Maximum total width; ``"auto"`` asks
                ``width_provider`` (default: the terminal) once, None means
                no limit
            exclude: Labels of columns to leave at their current width
            width_provider: Callable returning the available width

        Returns:
            The table, for chaining
        """
        self.autosize_columns(exclude=exclude)
        if max_table_width == AUTO:
            max_table_width = (width_provider or terminal_width)()
            logger.debug("Using available width %d for pack", max_table_width)
        if max_table_width is not None:
            self.shrink_to(max_table_width)  # type: ignore[arg-type]
        return self

    def shrinkwrap(self, max_table_width: int | None = None) -> Table:
        """
        Resize columns to fit their content.

        .. deprecated::
            Use :meth:`pack` instead.
        """
        warnings.warn(
            "Table.shrinkwrap() is deprecated. Use Table.pack() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.pack(max_table_width)

    def autosize_columns(self, *, exclude: Iterable[Any] = ()) -> Table:
        """
        Set each column's width to the widest line of its header or content.

        Traverses the whole record source once.
        """
        excluded = {_label_key(label) for label in exclude}
        targets = [column for key, column in self._columns.items() if key not in excluded]
        for column in targets:
            column.width = max(wrapped_width(column.header), 1)
        for row_index, source in enumerate(self.sources):
            for column in targets:
                content = column.formatted_content(source, row_index)
                column.width = max(column.width, wrapped_width(content))
        logger.debug(
            "Autosized %d columns: %s",
            len(targets),
            ", ".join(f"{c.label}={c.width}" for c in targets),
        )
        return self

    def shrink_to(self, max_table_width: int) -> Table:
        """
        Narrow the widest columns, one column at a time, until the table fits.

        Columns never shrink below one character of content, so the table
        may remain wider than ``max_table_width``.
        """
        validate_width(max_table_width, "max table width")
        columns = self.columns
        if not columns:
            return self
        min_table_width = len(columns) * (1 + self._padding_width) + (
            self.config.border.frame_width(len(columns))  # type: ignore[union-attr]
        )
        target = max(max_table_width, min_table_width)
        total = self.total_width()
        if total > target:
            logger.debug("Shrinking table from %d to %d columns wide", total, target)
        while total > target:
            widest = max(columns, key=lambda column: column.width)
            widest.width -= 1
            total -= 1
        return self

    # -------------------------------------------------------------------------
    # Transposition
    # -------------------------------------------------------------------------

    def transpose(
        self,
        *,
        field_names_header: str = "",
        field_names_header_alignment: Alignment | str = Alignment.RIGHT,
        field_names_body_alignment: Alignment | str = Alignment.RIGHT,
        field_names_width: int | None = None,
        headers: Callable[[Any], str] = str,
        **options: Any,
    ) -> Table:
        """
        Build a table with rows and columns swapped.

        The new table's records are this table's columns. Its first column
        shows the original headers; it then has one column per original
        record, showing that record's raw value for each original column.

        Args:
            field_names_header: Header of the field-names column
            field_names_header_alignment: Its header alignment
            field_names_body_alignment: Its body alignment
            field_names_width: Its width (default: widest original header)
            headers: Callable giving the header for each original record
            **options: :class:`~monogrid.config.TableConfig` overrides for
                the new table

        Returns:
            A new table; this table is left unchanged
        """
        fields = self.columns
        if field_names_width is None:
            field_names_width = max(
                [wrapped_width(column.header) for column in fields] + [1]
            )

        result = Table(fields, config=dataclasses.replace(self.config, **options))
        result.add_column(
            FIELD_NAMES,
            header=field_names_header,
            align_header=field_names_header_alignment,
            align_body=field_names_body_alignment,
            width=field_names_width,
            extractor=lambda column: column.header,
        )
        for index, source in enumerate(self.sources):
            result.add_column(
                index,
                header=headers(source),
                extractor=lambda column, source=source: column.body_cell_value(source),
            )
        return result
