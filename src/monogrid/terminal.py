"""Terminal width provider used by ``Table.pack("auto")``."""

from __future__ import annotations

import shutil

DEFAULT_TERMINAL_WIDTH = 80


def terminal_width(default: int = DEFAULT_TERMINAL_WIDTH) -> int:
    """Return the current terminal column width with a sensible default."""
    try:
        return shutil.get_terminal_size((default, 20)).columns
    except OSError:
        return default
