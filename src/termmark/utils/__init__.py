#  Copyright (c) 2026 termmark contributors
#
# src/termmark/utils/__init__.py
"""Utility modules for the termmark package.

This package contains helpers for measuring, wrapping and aligning text
that may contain ANSI escape sequences.
"""

from termmark.utils.text import align_line, max_line_width, pad_lines, strip_ansi, visible_width, wrap_text

__all__ = [
    "align_line",
    "max_line_width",
    "pad_lines",
    "strip_ansi",
    "visible_width",
    "wrap_text",
]
