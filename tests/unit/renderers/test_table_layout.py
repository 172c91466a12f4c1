#  Copyright (c) 2026 termmark contributors
#
# tests/unit/renderers/test_table_layout.py
"""Unit tests for table column sizing and cell formatting."""

import pytest

from termmark.decorator import Decorator
from termmark.exceptions import RenderingError
from termmark.renderers.table_layout import (
    border,
    build_layout,
    distribute_widths,
    format_cell,
    max_column_widths,
    row_heights,
    screen_width,
)
from termmark.symbols import Symbols
from termmark.theme import Theme


@pytest.fixture
def plain_decorator() -> Decorator:
    return Decorator(Theme.from_config(), enabled=False)


@pytest.mark.unit
class TestColumnWidths:
    """Tests for natural and shrunk column widths."""

    def test_max_column_widths(self) -> None:
        cells = [["a", "bbb"], ["cc", "d\neeee"]]
        assert max_column_widths(cells) == [2, 4]

    def test_max_column_widths_of_empty_table(self) -> None:
        assert max_column_widths([]) == []

    def test_screen_width(self) -> None:
        """Test that borders and twice the indent plus one are subtracted."""
        assert screen_width(80, 3, 0) == 74
        assert screen_width(20, 3, 4) == 6

    def test_widths_that_fit_are_unchanged(self) -> None:
        assert distribute_widths([3, 4], 10) == [3, 4]

    def test_proportional_shrink(self) -> None:
        assert distribute_widths([10, 30], 20) == [5, 15]

    def test_shrink_uses_floor_of_subtracted_amount(self) -> None:
        """Test that rounding leaves the residue unassigned."""
        assert distribute_widths([3, 3, 3], 6) == [2, 2, 2]
        assert distribute_widths([5, 4], 6) == [4, 3]

    def test_widths_never_drop_below_one(self) -> None:
        assert distribute_widths([1, 40], 5) == [1, 5]


@pytest.mark.unit
class TestBuildLayout:
    """Tests for build_layout."""

    def test_narrow_terminal_breaks_words(self) -> None:
        """Test a three column table at width 20 under a level 3 heading."""
        layout = build_layout([["foo", "bar", "baz"]], ["default"] * 3, total_width=20, indent=4)

        assert layout.column_widths == [2, 2, 2]
        assert layout.row_heights == [2]
        assert layout.cell_lines(0, 0) == ["fo", "o "]

    def test_missing_alignments_default(self) -> None:
        layout = build_layout([["a", "b"]], ["right"], total_width=80, indent=0)
        assert layout.alignments == ["right", "default"]

    def test_ragged_rows_raise(self) -> None:
        with pytest.raises(RenderingError, match="same number of cells"):
            build_layout([["a", "b"], ["c"]], [], total_width=80, indent=0)

    def test_empty_table(self) -> None:
        layout = build_layout([], [], total_width=80, indent=0)
        assert layout.column_count == 0

    def test_row_heights(self) -> None:
        assert row_heights([["one two", "x"], ["a", "b"]], [3, 1]) == [2, 1]


@pytest.mark.unit
class TestCellFormatting:
    """Tests for format_cell and border."""

    def test_format_cell_centers_and_pads(self) -> None:
        assert format_cell("ab", 4, 2, "center") == [" ab ", "    "]

    def test_empty_cell_is_spaces(self) -> None:
        assert format_cell("", 3, 1) == ["   "]

    @pytest.mark.parametrize(
        "location,expected",
        [("top", "+---+----+"), ("mid", "+---+----+"), ("bottom", "+---+----+")],
    )
    def test_ascii_border(self, plain_decorator, location, expected) -> None:
        assert border([1, 2], location, Symbols.from_config("ascii"), plain_decorator) == expected

    def test_unicode_borders(self, plain_decorator) -> None:
        symbols = Symbols.from_config("unicode")

        assert border([1], "top", symbols, plain_decorator) == "┌───┐"
        assert border([1, 1], "mid", symbols, plain_decorator) == "├───┼───┤"
        assert border([1], "bottom", symbols, plain_decorator) == "└───┘"

    def test_border_is_decorated(self) -> None:
        decorator = Decorator(Theme.from_config(), enabled=True)
        line = border([1], "top", Symbols.from_config("ascii"), decorator)

        assert line == "\x1b[33m+---+\x1b[0m"
