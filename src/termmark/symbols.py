#  Copyright (c) 2026 termmark contributors
#
# src/termmark/symbols.py
"""Glyph tables used for structural markers in terminal output.

Bullets, table borders, blockquote bars, typographic replacements and the
link arrow are all drawn from a :class:`Symbols` table. Two base tables are
provided, ``ascii`` and ``unicode``; a configuration may pick one of them by
name or start from a base and override individual glyphs::

    Symbols.from_config("ascii")
    Symbols.from_config({"base": "unicode", "override": {"arrow": "=>"}})

"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from termmark.constants import DEFAULT_SYMBOLS
from termmark.exceptions import ValidationError

logger = logging.getLogger(__name__)

ASCII_SYMBOLS: dict[str, str] = {
    "arrow": "->",
    "bar": "|",
    "bottom_center": "+",
    "bottom_right": "+",
    "bottom_left": "+",
    "bracket_left": "[",
    "bracket_right": "]",
    "bullet": "*",
    "diamond": "*",
    "hash": "#",
    "hellip": "...",
    "laquo": "<<",
    "laquo_space": "<< ",
    "ldquo": '"',
    "line": "-",
    "lsquo": '"',
    "mdash": "--",
    "mid_center": "+",
    "mid_left": "+",
    "mid_right": "+",
    "ndash": "-",
    "paren_left": "(",
    "paren_right": ")",
    "pipe": "|",
    "raquo": ">>",
    "raquo_space": " >>",
    "rdquo": '"',
    "rsquo": '"',
    "top_center": "+",
    "top_left": "+",
    "top_right": "+",
}

UNICODE_SYMBOLS: dict[str, str] = {
    "arrow": "»",
    "bar": "┃",
    "bottom_center": "┴",
    "bottom_right": "┘",
    "bottom_left": "└",
    "bracket_left": "[",
    "bracket_right": "]",
    "bullet": "●",
    "diamond": "◈",
    "hash": "#",
    "hellip": "…",
    "laquo": "«",
    "laquo_space": "« ",
    "ldquo": "“",
    "line": "─",
    "lsquo": "‘",
    "mdash": "—",
    "mid_center": "┼",
    "mid_left": "├",
    "mid_right": "┤",
    "ndash": "-",
    "paren_left": "(",
    "paren_right": ")",
    "pipe": "│",
    "raquo": "»",
    "raquo_space": " »",
    "rdquo": "”",
    "rsquo": "’",
    "top_center": "┬",
    "top_left": "┌",
    "top_right": "┐",
}

_BASE_TABLES: dict[str, dict[str, str]] = {
    "ascii": ASCII_SYMBOLS,
    "unicode": UNICODE_SYMBOLS,
}


def _format_names(names: list[str]) -> str:
    return ", ".join(repr(name) for name in names)


class Symbols(Mapping[str, str]):
    """Validated, read-only mapping of glyph names to strings.

    Instances are normally created with :meth:`from_config`, which validates
    the configuration eagerly so that a bad glyph name is reported before
    any document is rendered.

    Parameters
    ----------
    table : Mapping[str, str]
        Complete glyph table. Every key must be a known glyph name.

    Raises
    ------
    ValidationError
        If the table contains unknown glyph names. All unknown names are
        reported in a single message.

    """

    def __init__(self, table: Mapping[str, str]):
        """Validate and store the glyph table."""
        unknown = [name for name in table if name not in ASCII_SYMBOLS]
        if unknown:
            plural = "s" if len(unknown) > 1 else ""
            raise ValidationError(
                f"invalid symbol name{plural}: {_format_names(unknown)}.",
                parameter_name="symbols",
                parameter_value=unknown,
            )
        self._table = dict(table)

    @classmethod
    def from_config(cls, config: Any = DEFAULT_SYMBOLS) -> Symbols:
        """Build a glyph table from a name or a base/override mapping.

        Parameters
        ----------
        config : str or Mapping
            Either ``"ascii"``/``"unicode"``, or a mapping with an optional
            ``"base"`` name (default ``"unicode"``) and an optional
            ``"override"`` mapping of glyph name to replacement string.
            An existing :class:`Symbols` instance is returned unchanged.

        Returns
        -------
        Symbols
            The resolved glyph table

        Raises
        ------
        ValidationError
            If the configuration has the wrong shape, names an unknown base,
            or overrides unknown glyphs.

        """
        if isinstance(config, Symbols):
            return config
        if isinstance(config, str):
            return cls(cls._select_base(config))
        if isinstance(config, Mapping):
            table = dict(cls._select_base(config.get("base", DEFAULT_SYMBOLS)))
            override = config.get("override") or {}
            if not isinstance(override, Mapping):
                raise ValidationError(
                    f"invalid symbols: {config!r}. Use a mapping with base and override keys or a name.",
                    parameter_name="symbols",
                    parameter_value=config,
                )
            table.update({str(name): str(glyph) for name, glyph in override.items()})
            logger.debug("Resolved symbols with %d override(s)", len(override))
            return cls(table)
        raise ValidationError(
            f"invalid symbols: {config!r}. Use a mapping with base and override keys or a name.",
            parameter_name="symbols",
            parameter_value=config,
        )

    @staticmethod
    def _select_base(name: Any) -> dict[str, str]:
        try:
            return _BASE_TABLES[str(name)]
        except KeyError:
            raise ValidationError(
                f"invalid symbols name: {name!r}. Use the 'ascii' or 'unicode' name.",
                parameter_name="symbols",
                parameter_value=name,
            ) from None

    def __getitem__(self, name: str) -> str:
        """Return the glyph for ``name``.

        Raises
        ------
        ValidationError
            If ``name`` is not a known glyph.

        """
        try:
            return self._table[name]
        except KeyError:
            raise ValidationError(
                f"invalid symbol name: {name!r}.", parameter_name="symbols", parameter_value=name
            ) from None

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"Symbols({self._table!r})"

    def wrap_in_brackets(self, content: str) -> str:
        """Surround ``content`` with the bracket glyphs."""
        return f"{self['bracket_left']}{content}{self['bracket_right']}"

    def wrap_in_parentheses(self, content: str) -> str:
        """Surround ``content`` with the parenthesis glyphs."""
        return f"{self['paren_left']}{content}{self['paren_right']}"
