#  Copyright (c) 2026 termmark contributors
#
# src/termmark/options.py
"""Configuration options for terminal rendering and Markdown parsing.

This module defines the frozen dataclasses holding the settings of the
terminal renderer and the Markdown parser. Values are validated when an
options object is created, so configuration errors surface before any
document is converted.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Union

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from termmark.color import Color
from termmark.constants import DEFAULT_COLOR, DEFAULT_INDENT, DEFAULT_SYMBOLS, MARKDOWN_PLUGINS, ColorMode
from termmark.exceptions import ValidationError
from termmark.symbols import Symbols
from termmark.theme import Theme


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class TerminalRendererOptions(CloneFrozenMixin):
    """Configuration options for rendering a document tree to a terminal.

    Parameters
    ----------
    width : int or None, default None
        Total column width of the output. None detects the terminal width.
    indent : int, default 2
        Number of columns added per nesting level (lists, description
        details, heading sections).
    color : {"always", "auto", "never"}, default "auto"
        Whether to emit ANSI escape sequences. "auto" decides from the
        terminal and the ``NO_COLOR``/``FORCE_COLOR`` environment.
    mode : int or None, default None
        Terminal color depth, e.g. 16 or 256. None detects it. Code is
        highlighted token by token from 256 colors upward.
    symbols : str or Mapping, default "unicode"
        Glyph set name (``ascii``/``unicode``) or a mapping with ``base``
        and ``override`` keys.
    theme : Mapping, default empty
        Element name to style overrides, e.g. ``{"link": "green"}``.

    Examples
    --------
        >>> options = TerminalRendererOptions(width=60, color="never", symbols="ascii")
        >>> narrower = options.create_updated(width=40)

    """

    width: Optional[int] = field(
        default=None,
        metadata={"help": "Total output width in columns (default: terminal width)", "type": int, "importance": "core"},
    )
    indent: int = field(
        default=DEFAULT_INDENT,
        metadata={"help": "Columns of indentation per nesting level", "type": int, "importance": "core"},
    )
    color: ColorMode = field(
        default=DEFAULT_COLOR,
        metadata={
            "help": "When to emit color: always, auto or never",
            "choices": ["always", "auto", "never"],
            "importance": "core",
        },
    )
    mode: Optional[int] = field(
        default=None,
        metadata={
            "help": "Terminal color depth (default: detected)",
            "type": int,
            "choices": [16, 256, 2**24],
            "importance": "advanced",
        },
    )
    symbols: Union[str, Mapping[str, Any]] = field(
        default=DEFAULT_SYMBOLS,
        metadata={"help": "Glyph set: ascii or unicode", "choices": ["ascii", "unicode"], "importance": "core"},
    )
    theme: Mapping[str, Any] = field(
        default_factory=dict,
        metadata={"help": "Element style overrides as ELEMENT=STYLE", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate every option eagerly.

        Raises
        ------
        ValidationError
            If any field value is invalid.

        """
        if self.width is not None and (not isinstance(self.width, int) or self.width <= 0):
            raise ValidationError(
                f"width must be a positive integer, got {self.width!r}",
                parameter_name="width",
                parameter_value=self.width,
            )
        if not isinstance(self.indent, int) or self.indent <= 0:
            raise ValidationError(
                f"indent must be a positive integer, got {self.indent!r}",
                parameter_name="indent",
                parameter_value=self.indent,
            )
        if self.mode is not None and (not isinstance(self.mode, int) or self.mode <= 0):
            raise ValidationError(
                f"mode must be a positive number of colors, got {self.mode!r}",
                parameter_name="mode",
                parameter_value=self.mode,
            )
        Color(self.color)
        Symbols.from_config(self.symbols)
        Theme.from_config(self.theme)


@dataclass(frozen=True)
class MarkdownParserOptions(CloneFrozenMixin):
    """Configuration options for parsing Markdown into a document tree.

    Parameters
    ----------
    parse_tables : bool, default True
        Parse pipe tables, including ``===`` footer separator rows.
    parse_footnotes : bool, default True
        Parse ``[^name]`` references and their definitions.
    parse_strikethrough : bool, default True
        Parse ``~~deleted~~`` text.
    parse_definition_lists : bool, default True
        Parse ``term`` / ``: details`` description lists.
    parse_math : bool, default True
        Parse ``$inline$`` and ``$$block$$`` math.
    parse_abbreviations : bool, default True
        Parse ``*[ABBR]: title`` abbreviation definitions.
    typographer : bool, default True
        Replace straight quotes, dashes, ellipses and guillemets with
        typographic symbols.

    """

    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse pipe tables", "importance": "core"},
    )
    parse_footnotes: bool = field(
        default=True,
        metadata={"help": "Parse footnote references and definitions", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse ~~strikethrough~~ text", "importance": "advanced"},
    )
    parse_definition_lists: bool = field(
        default=True,
        metadata={"help": "Parse definition lists", "importance": "advanced"},
    )
    parse_math: bool = field(
        default=True,
        metadata={"help": "Parse $inline$ and $$block$$ math", "importance": "advanced"},
    )
    parse_abbreviations: bool = field(
        default=True,
        metadata={"help": "Parse *[ABBR]: title definitions", "importance": "advanced"},
    )
    typographer: bool = field(
        default=True,
        metadata={"help": "Convert quotes, dashes and ellipses to typographic symbols", "importance": "core"},
    )

    def plugins(self) -> list[str]:
        """Return the mistune plugin names enabled by these options."""
        enabled = {
            "strikethrough": self.parse_strikethrough,
            "table": self.parse_tables,
            "footnotes": self.parse_footnotes,
            "def_list": self.parse_definition_lists,
            "math": self.parse_math,
            "abbr": self.parse_abbreviations,
        }
        return [name for name in MARKDOWN_PLUGINS if enabled[name]]
