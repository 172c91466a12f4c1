#  Copyright (c) 2026 termmark contributors
#
# src/termmark/renderers/table_layout.py
"""Column sizing and cell formatting for terminal tables.

The layout is computed in one pass before any row is drawn: the rendered
text of every cell is measured, natural column widths are shrunk to fit the
screen when needed, and every row gets the height of its tallest wrapped
cell. Rows are then drawn from the finished :class:`TableLayout`.

Sizing works as follows:

1. The natural width of a column is the widest visible line of its cells.
2. The screen width available to cell content is the total width minus one
   border character per column plus one, minus twice the current indent
   plus one.
3. Natural widths that fit are used unchanged. Otherwise every column gives
   up ``floor(extra * width / total)`` columns, in a single pass with no
   redistribution of the rounding residue. No column drops below one.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from termmark.constants import Alignment, BorderLocation
from termmark.decorator import Decorator
from termmark.exceptions import RenderingError
from termmark.symbols import Symbols
from termmark.utils.text import max_line_width, pad_lines, wrap_text

logger = logging.getLogger(__name__)


@dataclass
class TableLayout:
    """Sizing and alignment data for one table.

    Parameters
    ----------
    alignments : list of str
        Per-column alignment
    cells : list of list of str
        Rendered text of every cell, row by row
    column_widths : list of int
        Final content width of every column
    row_heights : list of int
        Number of physical lines of every row

    """

    alignments: list[Alignment] = field(default_factory=list)
    cells: list[list[str]] = field(default_factory=list)
    column_widths: list[int] = field(default_factory=list)
    row_heights: list[int] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.column_widths)

    def cell_lines(self, row: int, column: int) -> list[str]:
        """Return the wrapped, aligned and padded lines of one cell."""
        return format_cell(
            self.cells[row][column],
            self.column_widths[column],
            self.row_heights[row],
            self.alignments[column],
        )


def max_column_widths(cells: list[list[str]]) -> list[int]:
    """Return the widest visible line of every column."""
    if not cells:
        return []
    return [max(max_line_width(row[column]) for row in cells) for column in range(len(cells[0]))]


def screen_width(total_width: int, columns: int, indent: int) -> int:
    """Return the columns left for cell content after borders and indentation."""
    return total_width - (columns + 1) - 2 * (indent + 1)


def distribute_widths(widths: list[int], available: int) -> list[int]:
    """Shrink column widths proportionally so they approach ``available``.

    Parameters
    ----------
    widths : list of int
        Natural column widths
    available : int
        Screen width for cell content

    Returns
    -------
    list of int
        ``widths`` unchanged if they fit, otherwise every width reduced by
        ``floor(extra * width / total)`` and clamped to at least one.

    Examples
    --------
        >>> distribute_widths([3, 3, 3], 6)
        [2, 2, 2]

    """
    total = sum(widths)
    if total <= available:
        return list(widths)

    extra = total - available
    shrunk = [max(width - (extra * width) // total, 1) for width in widths]
    logger.debug("Shrinking table columns %s to %s for %d columns of space", widths, shrunk, available)
    return shrunk


def row_heights(cells: list[list[str]], widths: list[int]) -> list[int]:
    """Return the number of wrapped lines of the tallest cell in every row."""
    heights = []
    for row in cells:
        wrapped = [wrap_text(text, widths[column], break_long_words=True) for column, text in enumerate(row)]
        heights.append(max((len(lines) for lines in wrapped), default=1))
    return heights


def format_cell(text: str, width: int, height: int, alignment: str = "left") -> list[str]:
    """Wrap cell text to ``width``, align every line and pad to ``height`` lines."""
    return pad_lines(wrap_text(text, width, break_long_words=True), width, height, alignment)


def build_layout(
    cells: list[list[str]],
    alignments: list[Alignment],
    total_width: int,
    indent: int,
) -> TableLayout:
    """Compute the complete layout of a table.

    Parameters
    ----------
    cells : list of list of str
        Rendered text of every cell
    alignments : list of str
        Column alignments; missing entries default to ``"default"``
    total_width : int
        Total output width
    indent : int
        Current indentation of the table

    Returns
    -------
    TableLayout
        The finished layout

    Raises
    ------
    RenderingError
        If rows have differing numbers of cells.

    """
    counts = {len(row) for row in cells}
    if len(counts) > 1:
        raise RenderingError(
            f"Table rows must have the same number of cells, got {sorted(counts)}",
            rendering_stage="table layout",
        )

    columns = counts.pop() if counts else 0
    aligned = list(alignments[:columns]) + ["default"] * (columns - len(alignments))
    widths = distribute_widths(max_column_widths(cells), screen_width(total_width, columns, indent))
    return TableLayout(
        alignments=aligned,
        cells=cells,
        column_widths=widths,
        row_heights=row_heights(cells, widths),
    )


def border(widths: list[int], location: BorderLocation, symbols: Symbols, decorator: Decorator) -> str:
    """Draw a horizontal border for the given column widths.

    Parameters
    ----------
    widths : list of int
        Column content widths
    location : {"top", "mid", "bottom"}
        Which corner and junction glyphs to use
    symbols : Symbols
        Glyph table
    decorator : Decorator
        Decorator for the ``table`` style

    Returns
    -------
    str
        The decorated border without indentation or line terminator

    """
    left = symbols[f"{location}_left"]
    segments = [symbols["line"] * (width + 2) for width in widths]
    line = left + symbols[f"{location}_center"].join(segments) + symbols[f"{location}_right"]
    return decorator.decorate(line, "table")
