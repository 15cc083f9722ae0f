"""Exceptions for monogrid."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class MonogridError(Exception):
    """
    Base exception for all monogrid errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause. Errors raised by caller-supplied extractors, formatters
    and stylers are never wrapped and do not inherit from this class.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(MonogridError):
    """
    Base exception for invalid table, column or border configuration.

    Configuration errors are raised synchronously while a table is being
    declared, never while it is being rendered.

    Attributes:
        field: Name of the offending option
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


# ---------------------------------------------------------------------------
# Column Exceptions
# ---------------------------------------------------------------------------


class InvalidColumnLabelError(ConfigurationError):
    """Raised when a column label is missing or already in use."""

    def __init__(self, label: Any, reason: str = "a column with this label already exists") -> None:
        super().__init__("column label", label, reason)


class InvalidAlignmentError(ConfigurationError):
    """Raised when an alignment is not one of left, right, center or auto."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            "alignment",
            value,
            "expected one of 'left', 'right', 'center', 'auto'",
        )


class InvalidTruncationIndicatorError(ConfigurationError):
    """Raised when the truncation indicator is not exactly one column wide."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            "truncation indicator",
            value,
            "must be a single character of display width 1",
        )


class InvalidPaddingCharacterError(ConfigurationError):
    """Raised when the padding character is not exactly one column wide."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            "padding character",
            value,
            "must be a single character of display width 1",
        )


class InvalidWidthError(ConfigurationError):
    """Raised when a column width or padding amount is out of range."""

    pass


class InvalidWrapError(ConfigurationError):
    """Raised when a wrap limit or wrap mode is invalid."""

    pass


class InvalidHeaderFrequencyError(ConfigurationError):
    """Raised when the header frequency is not 'start', None or a positive int."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            "header frequency",
            value,
            "expected 'start', None or a positive integer",
        )


# ---------------------------------------------------------------------------
# Border Exceptions
# ---------------------------------------------------------------------------


class InvalidBorderError(ConfigurationError):
    """Raised when a border preset name is not recognised."""

    def __init__(self, value: Any, known: list[str] | None = None) -> None:
        reason = "unknown border preset"
        if known:
            reason += f" (known presets: {', '.join(known)})"
        super().__init__("border", value, reason)


class InvalidBorderCharacterError(ConfigurationError):
    """Raised when a border glyph is neither empty nor exactly one column wide."""

    def __init__(self, slot: str, value: Any) -> None:
        self.slot = slot
        super().__init__(
            f"border character for {slot}",
            value,
            "must be empty or a single character of display width 1",
        )
