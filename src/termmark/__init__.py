"""termmark - Render Markdown documents as styled terminal text.

termmark parses Markdown into a document tree and renders the tree for a
terminal of fixed width: paragraphs are word-wrapped, lists and heading
sections are indented, tables are drawn with box borders and shrunk to fit,
code is syntax highlighted, and every element is styled through a
configurable theme.

Key Features
------------
- ANSI-aware word wrapping that never lets a style bleed across lines
- Box-drawn tables with proportional column shrinking
- Numbered footnote list appended after the document
- ``ascii`` and ``unicode`` glyph sets with per-glyph overrides
- Theme styles given as rich style strings, e.g. ``"bold cyan"``
- Pygments syntax highlighting in 256-color terminals

Requirements
------------
- Python 3.10+
- mistune, rich, pygments, beautifulsoup4

Examples
--------
Render a Markdown string:

    >>> from termmark import parse
    >>> print(parse("# Title\\n\\nSome *text*.", width=60))

Render a document tree built by hand:

    >>> from termmark import render
    >>> from termmark.ast import Document, Paragraph, Text
    >>> render(Document(children=[Paragraph(children=[Text(value="Hi")])]))

"""

__version__ = "0.1.0"

from termmark.api import parse, parse_file, render
from termmark.exceptions import ParsingError, RenderingError, TermmarkError, ValidationError
from termmark.options import MarkdownParserOptions, TerminalRendererOptions

__all__ = [
    "__version__",
    "parse",
    "parse_file",
    "render",
    "MarkdownParserOptions",
    "TerminalRendererOptions",
    "TermmarkError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
]
