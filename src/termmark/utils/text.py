#  Copyright (c) 2026 termmark contributors
#
# src/termmark/utils/text.py
"""ANSI-aware text measurement, wrapping and alignment.

Rendered text may already contain SGR escape sequences (``ESC[...m``) from
the decorator or the highlighter. The helpers in this module measure and
wrap such text by its visible cell width, never split an escape sequence,
and close/re-open active styles at every line break so that no style
bleeds from one physical line into the next.

Functions
---------
strip_ansi : Remove escape sequences
visible_width : Terminal cell width of a single line
max_line_width : Widest visible line of a multi-line string
wrap_text : Word-wrap styled text to a column width
align_line : Pad a line to a width with left/center/right alignment
pad_lines : Align every line and add blank lines up to a height

Examples
--------
    >>> wrap_text("\\x1b[33mone two three\\x1b[0m", 8)
    ['\\x1b[33mone two\\x1b[0m', '\\x1b[33mthree\\x1b[0m']

"""

from __future__ import annotations

import re

from rich.cells import cell_len

from termmark.constants import NEWLINE, RESET_SEQUENCE, SPACE

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")
_SGR_RE = re.compile(r"\x1b\[([0-9;]*)m")
_WHITESPACE_SPLIT_RE = re.compile(r"([ \t]+)")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return ANSI_RE.sub("", text)


def visible_width(text: str) -> int:
    """Return the terminal cell width of ``text`` ignoring escape sequences."""
    return cell_len(strip_ansi(text))


def max_line_width(text: str) -> int:
    """Return the visible width of the widest line in ``text``."""
    return max((visible_width(line) for line in text.split(NEWLINE)), default=0)


class _StyleTracker:
    """Track SGR sequences that are open at the current position."""

    def __init__(self) -> None:
        self.active: list[str] = []

    def process(self, text: str) -> None:
        for match in _SGR_RE.finditer(text):
            params = match.group(1).split(";")
            if match.group(1) == "" or "0" in params or "00" in params:
                self.active.clear()
            else:
                self.active.append(match.group(0))

    def reopen(self) -> str:
        return "".join(self.active)

    def close(self) -> str:
        return RESET_SEQUENCE if self.active else ""


def _break_word(word: str, width: int) -> list[str]:
    """Split a styled word into chunks of at most ``width`` visible columns."""
    chunks: list[str] = []
    current = ""
    current_width = 0
    position = 0
    while position < len(word):
        match = ANSI_RE.match(word, position)
        if match:
            current += match.group(0)
            position = match.end()
            continue
        char = word[position]
        char_width = cell_len(char)
        if current_width and current_width + char_width > width:
            chunks.append(current)
            current, current_width = "", 0
        current += char
        current_width += char_width
        position += 1
    if current:
        chunks.append(current)
    return chunks


def wrap_text(
    text: str,
    width: int,
    break_long_words: bool = False,
) -> list[str]:
    """Word-wrap styled text to ``width`` visible columns.

    Lines break only at spaces and tabs unless ``break_long_words`` is set.
    Hard newlines in ``text`` are kept. Whitespace at the start of a hard
    line is preserved, whitespace at a soft break is dropped.

    Parameters
    ----------
    text : str
        Text to wrap, possibly containing SGR escape sequences
    width : int
        Maximum visible width of every line; values below one are treated as one
    break_long_words : bool, default False
        Split words wider than the width. When False such a word is placed
        unshortened on a line of its own.

    Returns
    -------
    list of str
        The physical lines without terminators. A line that ends while a
        style is open is closed with a reset and the style is re-opened at
        the start of the next line.

    """
    width = max(width, 1)
    tracker = _StyleTracker()
    lines: list[str] = []

    for hard_line in text.split(NEWLINE):
        line = tracker.reopen()
        line_width = 0
        has_word = False
        pending = ""
        pending_width = 0

        for piece in _WHITESPACE_SPLIT_RE.split(hard_line):
            if not piece:
                continue
            if piece.isspace():
                if has_word or line_width:
                    pending += piece
                    pending_width += cell_len(piece)
                else:
                    line += piece
                    line_width += cell_len(piece)
                continue

            piece_width = visible_width(piece)
            if piece_width == 0:
                pending += piece
                continue

            chunks = [piece]
            if break_long_words and piece_width > width:
                chunks = _break_word(piece, width)

            for chunk in chunks:
                chunk_width = visible_width(chunk)
                if has_word and line_width + pending_width + chunk_width > width:
                    lines.append(line + tracker.close())
                    carried = "".join(ANSI_RE.findall(pending))
                    line = tracker.reopen()
                    line_width = 0
                    pending, pending_width = carried, 0

                line += pending + chunk
                line_width += pending_width + chunk_width
                tracker.process(pending + chunk)
                pending, pending_width = "", 0
                has_word = True

        trailing_codes = "".join(ANSI_RE.findall(pending))
        line += trailing_codes
        tracker.process(trailing_codes)
        if not strip_ansi(line) and not ANSI_RE.search(hard_line):
            lines.append("")
        else:
            lines.append(line + tracker.close())

    return lines


def align_line(line: str, width: int, alignment: str = "left") -> str:
    """Pad ``line`` with spaces to ``width`` visible columns.

    Parameters
    ----------
    line : str
        Text of one line, possibly styled
    width : int
        Target visible width
    alignment : {"left", "center", "right", "default"}
        ``center`` puts the smaller half of the spare space on the left;
        ``default`` behaves like ``left``.

    """
    spare = max(width - visible_width(line), 0)
    if alignment == "right":
        return SPACE * spare + line
    if alignment == "center":
        left = spare // 2
        return SPACE * left + line + SPACE * (spare - left)
    return line + SPACE * spare


def pad_lines(lines: list[str], width: int, height: int, alignment: str = "left") -> list[str]:
    """Align each line to ``width`` and append blank lines up to ``height``."""
    aligned = [align_line(line, width, alignment) for line in lines]
    aligned.extend(SPACE * width for _ in range(height - len(aligned)))
    return aligned
