"""
monogrid: Fixed-width text tables for terminals and documents.

This library renders records as aligned, optionally bordered text with:
- Grapheme-aware wrapping of wide (CJK, emoji) and combining characters
- Per-column alignment, with numeric/boolean inference for ``auto``
- Height-limited rows with a truncation indicator
- Border presets (classic, modern, markdown, ...) and border styling
- Column auto-sizing that shrinks to the terminal width
- Transposition of rows and columns

Example:
    from monogrid import Table

    table = Table(range(1, 6))
    table.add_column("N", extractor=lambda n: n)
    table.add_column("Doubled", extractor=lambda n: n * 2)
    print(table.pack(max_table_width=None))
"""

from importlib.metadata import PackageNotFoundError, version

from .border import BORDER_STYLES, Border
from .cell import Cell, pad_content
from .column import Column
from .config import TableConfig
from .exceptions import (
    ConfigurationError,
    InvalidAlignmentError,
    InvalidBorderCharacterError,
    InvalidBorderError,
    InvalidColumnLabelError,
    InvalidHeaderFrequencyError,
    InvalidPaddingCharacterError,
    InvalidTruncationIndicatorError,
    InvalidWidthError,
    InvalidWrapError,
    MonogridError,
)
from .models import (
    Alignment,
    BorderPosition,
    CellData,
    Position,
    ValueKind,
    WrapPreserve,
    extended,
)
from .row import Row
from .table import Table

try:
    __version__ = version("monogrid")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Table",
    "Row",
    "Column",
    "Cell",
    "Border",
    "TableConfig",
    "BORDER_STYLES",
    "pad_content",
    # Models
    "Alignment",
    "BorderPosition",
    "CellData",
    "Position",
    "ValueKind",
    "WrapPreserve",
    "extended",
    # Exceptions
    "MonogridError",
    "ConfigurationError",
    "InvalidAlignmentError",
    "InvalidBorderCharacterError",
    "InvalidBorderError",
    "InvalidColumnLabelError",
    "InvalidHeaderFrequencyError",
    "InvalidPaddingCharacterError",
    "InvalidTruncationIndicatorError",
    "InvalidWidthError",
    "InvalidWrapError",
]
