"""Column declarations."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .alignment import parse_alignment
from .cell import Cell, LineStyler
from .config import validate_truncation_indicator, validate_width
from .models import Alignment, CellData, ExtendedHook, Position, WrapPreserve

Extractor = Callable[[Any], Any]
Formatter = Callable[[Any], str]
Styler = Callable[[Any, str], str]
HeaderStyler = Callable[[str], str]


def attribute_extractor(label: Any) -> Extractor:
    """
    Default extractor for a column labelled ``label``.

    Looks the label up as a key of mapping records, and as an attribute of
    any other record.
    """

    def extract(source: Any) -> Any:
        if isinstance(source, Mapping):
            return source[label]
        return getattr(source, str(label))

    return extract


class Column:
    """
    A column of a table.

    ``width`` is the column's content width, excluding padding. It is only
    changed by the table's pack and shrink operations.
    """

    def __init__(
        self,
        label: Any,
        *,
        header: str,
        width: int,
        index: int,
        align_header: Alignment | str,
        align_body: Alignment | str,
        extractor: Extractor,
        formatter: Formatter | ExtendedHook = str,
        styler: Styler | ExtendedHook | None = None,
        header_styler: HeaderStyler | ExtendedHook | None = None,
        truncation_indicator: str = "~",
        padding_character: str = " ",
        wrap_preserve: WrapPreserve = WrapPreserve.RUNE,
    ) -> None:
        self.label = label
        self.header = header
        self.width = validate_width(width)
        self.index = index
        self.align_header = parse_alignment(align_header)
        self.align_body = parse_alignment(align_body)
        self.extractor = extractor
        self.formatter = formatter
        self.styler = styler
        self.header_styler = header_styler
        self.truncation_indicator = validate_truncation_indicator(truncation_indicator)
        self.padding_character = padding_character
        self.wrap_preserve = wrap_preserve

    def __repr__(self) -> str:
        return f"Column(label={self.label!r}, header={self.header!r}, width={self.width})"

    def header_cell(self) -> Cell:
        """Lay out this column's header text."""
        return Cell(
            self.header,
            formatter=str,
            alignment=self.align_header,
            width=self.width,
            styler=self._header_line_styler(),
            truncation_indicator=self.truncation_indicator,
            padding_character=self.padding_character,
            wrap_preserve=self.wrap_preserve,
        )

    def body_cell(self, source: Any, row_index: int) -> Cell:
        """Lay out this column's cell for ``source``, the record at ``row_index``."""
        cell_data = CellData(source, Position(row_index, self.index))
        return Cell(
            self.body_cell_value(source),
            formatter=self._body_formatter(cell_data),
            alignment=self.align_body,
            width=self.width,
            styler=self._body_line_styler(cell_data),
            truncation_indicator=self.truncation_indicator,
            padding_character=self.padding_character,
            wrap_preserve=self.wrap_preserve,
        )

    def body_cell_value(self, source: Any) -> Any:
        """Extract this column's raw value from ``source``."""
        return self.extractor(source)

    def formatted_content(self, source: Any, row_index: int) -> str:
        """Format this column's value for ``source`` without laying it out."""
        cell_data = CellData(source, Position(row_index, self.index))
        return self._body_formatter(cell_data)(self.body_cell_value(source))

    def _body_formatter(self, cell_data: CellData) -> Formatter:
        formatter = self.formatter
        if isinstance(formatter, ExtendedHook):
            return lambda value: formatter(value, cell_data)
        return formatter

    def _body_line_styler(self, cell_data: CellData) -> LineStyler | None:
        styler = self.styler
        if styler is None:
            return None
        if isinstance(styler, ExtendedHook):
            return lambda value, text, line_index: styler(value, text, cell_data, line_index)
        return lambda value, text, line_index: styler(value, text)

    def _header_line_styler(self) -> LineStyler | None:
        styler = self.header_styler
        if styler is None:
            return None
        if isinstance(styler, ExtendedHook):
            return lambda value, text, line_index: styler(text, self.index, line_index)
        return lambda value, text, line_index: styler(text)
