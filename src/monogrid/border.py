"""
Border glyphs and rendering.

A :class:`Border` holds the 15 glyphs that draw a table's corners, edges,
tees, dividers and intersection, plus an optional styler applied to every
rendered border fragment. The styler's output width is never measured, so
it may add escape codes (to colour the borders, say) without disturbing
the layout.

Example output (``classic``)::

    +----------+----------+
    |     N    |  Doubled |
    +----------+----------+
    |        1 |        2 |
    +----------+----------+
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, fields

from .exceptions import InvalidBorderCharacterError, InvalidBorderError
from .models import BorderPosition
from .text import display_width

BorderStyler = Callable[[str], str]

_ASCII = {
    "corner_top_left": "+",
    "corner_top_right": "+",
    "corner_bottom_right": "+",
    "corner_bottom_left": "+",
    "edge_top": "-",
    "edge_right": "|",
    "edge_bottom": "-",
    "edge_left": "|",
    "tee_top": "+",
    "tee_right": "+",
    "tee_bottom": "+",
    "tee_left": "+",
    "divider_vertical": "|",
    "divider_horizontal": "-",
    "intersection": "+",
}

BORDER_STYLES: dict[str, dict[str, str]] = {
    "ascii": _ASCII,
    "classic": _ASCII,
    "reduced_ascii": {
        "edge_top": "-",
        "edge_bottom": "-",
        "tee_top": " ",
        "tee_bottom": " ",
        "divider_vertical": " ",
        "divider_horizontal": "-",
        "intersection": " ",
    },
    "markdown": {
        "edge_right": "|",
        "edge_left": "|",
        "tee_right": "|",
        "tee_left": "|",
        "divider_vertical": "|",
        "divider_horizontal": "-",
        "intersection": "|",
    },
    "modern": {
        "corner_top_left": "┌",
        "corner_top_right": "┐",
        "corner_bottom_right": "┘",
        "corner_bottom_left": "└",
        "edge_top": "─",
        "edge_right": "│",
        "edge_bottom": "─",
        "edge_left": "│",
        "tee_top": "┬",
        "tee_right": "┤",
        "tee_bottom": "┴",
        "tee_left": "├",
        "divider_vertical": "│",
        "divider_horizontal": "─",
        "intersection": "┼",
    },
    "blank": {},
    "null": {},
}
"""Named border presets; omitted slots are empty."""


@dataclass(frozen=True)
class Border:
    """
    Immutable set of border glyphs.

    Every glyph is either empty (draw nothing) or exactly one column wide.
    """

    corner_top_left: str = ""
    corner_top_right: str = ""
    corner_bottom_right: str = ""
    corner_bottom_left: str = ""
    edge_top: str = ""
    edge_right: str = ""
    edge_bottom: str = ""
    edge_left: str = ""
    tee_top: str = ""
    tee_right: str = ""
    tee_bottom: str = ""
    tee_left: str = ""
    divider_vertical: str = ""
    divider_horizontal: str = ""
    intersection: str = ""
    styler: BorderStyler | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name == "styler":
                continue
            glyph = getattr(self, f.name)
            if not isinstance(glyph, str) or (glyph and display_width(glyph) != 1):
                raise InvalidBorderCharacterError(f.name, glyph)

    @classmethod
    def from_preset(cls, name: str, styler: BorderStyler | None = None) -> Border:
        """
        Create a border from a named preset.

        Args:
            name: One of the keys of :data:`BORDER_STYLES`
            styler: Optional callable applied to each border fragment

        Raises:
            InvalidBorderError: If ``name`` is not a known preset
        """
        glyphs = BORDER_STYLES.get(name) if isinstance(name, str) else None
        if glyphs is None:
            raise InvalidBorderError(name, sorted(BORDER_STYLES))
        return cls(**glyphs, styler=styler)

    def horizontal_rule(
        self,
        column_widths: Sequence[int],
        position: BorderPosition = BorderPosition.BOTTOM,
    ) -> str:
        """
        Render a horizontal rule across columns of the given padded widths.

        The styler is applied once, to the whole rule. Returns an empty
        string if the rule would draw nothing at this position.
        """
        if position is BorderPosition.TOP:
            left, center, right, segment = (
                self.corner_top_left,
                self.tee_top,
                self.corner_top_right,
                self.edge_top,
            )
        elif position is BorderPosition.MIDDLE:
            left, center, right, segment = (
                self.tee_left,
                self.intersection,
                self.tee_right,
                self.divider_horizontal,
            )
        else:
            left, center, right, segment = (
                self.corner_bottom_left,
                self.tee_bottom,
                self.corner_bottom_right,
                self.edge_bottom,
            )
        segments = [segment * width for width in column_widths]
        rule = f"{left}{center.join(segments)}{right}"
        if not rule:
            return ""
        return self._style(rule)

    def join_cell_contents(self, cells: Sequence[str]) -> str:
        """Join one line of padded cell contents with vertical borders."""
        divider = self._style(self.divider_vertical)
        return self._style(self.edge_left) + divider.join(cells) + self._style(self.edge_right)

    def frame_width(self, num_columns: int) -> int:
        """Columns taken by vertical borders in a row of ``num_columns`` cells."""
        if num_columns == 0:
            return 0
        return (
            display_width(self.edge_left)
            + display_width(self.edge_right)
            + display_width(self.divider_vertical) * (num_columns - 1)
        )

    def _style(self, fragment: str) -> str:
        return self.styler(fragment) if self.styler and fragment else fragment
