"""Tests for display-width and grapheme utilities."""

from monogrid.text import display_width, grapheme_clusters, split_lines, wrapped_width


class TestDisplayWidth:
    """Tests for display_width."""

    def test_empty(self) -> None:
        assert display_width("") == 0

    def test_ascii(self) -> None:
        assert display_width("hello") == 5

    def test_east_asian_wide(self) -> None:
        """CJK characters take two columns each."""
        assert display_width("你好") == 4

    def test_combining_mark_is_zero_width(self) -> None:
        assert display_width("e\u0301") == 1

    def test_non_printable_counts_as_zero(self) -> None:
        """Control characters never make the width negative."""
        assert display_width("a\x07b") == 2


class TestGraphemeClusters:
    """Tests for grapheme_clusters."""

    def test_plain_text(self) -> None:
        assert grapheme_clusters("abc") == ["a", "b", "c"]

    def test_keeps_combining_marks_with_base(self) -> None:
        assert grapheme_clusters("e\u0301x") == ["e\u0301", "x"]

    def test_empty(self) -> None:
        assert grapheme_clusters("") == []


class TestSplitLines:
    """Tests for split_lines."""

    def test_all_break_styles(self) -> None:
        assert split_lines("a\nb\r\nc\rd") == ["a", "b", "c", "d"]

    def test_trailing_break_yields_empty_segment(self) -> None:
        assert split_lines("a\n") == ["a", ""]

    def test_no_break(self) -> None:
        assert split_lines("abc") == ["abc"]


class TestWrappedWidth:
    """Tests for wrapped_width."""

    def test_widest_line_wins(self) -> None:
        assert wrapped_width("ab\ncdef\ng") == 4

    def test_empty(self) -> None:
        assert wrapped_width("") == 0
