#  Copyright (c) 2026 termmark contributors
#
# src/termmark/theme.py
"""Theme configuration mapping document elements to terminal styles.

Each themed element (``header``, ``link``, ``table`` ...) maps to an ordered
list of style tags understood by :class:`rich.style.Style`, for example
``["cyan", "bold"]``. User configuration replaces the styles of individual
elements and leaves the remaining defaults in place.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from rich.errors import StyleSyntaxError
from rich.style import Style

from termmark.exceptions import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_THEME: dict[str, tuple[str, ...]] = {
    "code": ("yellow",),
    "comment": ("bright_black",),
    "delete": ("red",),
    "em": ("yellow",),
    "header": ("cyan", "bold"),
    "heading1": ("cyan", "bold", "underline"),
    "hr": ("yellow",),
    "image": ("bright_black",),
    "link": ("yellow", "underline"),
    "list": ("yellow",),
    "note": ("yellow",),
    "quote": ("yellow",),
    "strong": ("yellow", "bold"),
    "table": ("yellow",),
}


def _as_style_list(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(value.split())
    return tuple(str(tag) for tag in value)


class Theme(Mapping[str, tuple[str, ...]]):
    """Validated element name to style list mapping.

    Parameters
    ----------
    styles : Mapping[str, Sequence[str]]
        Complete element table

    Raises
    ------
    ValidationError
        If an element name is unknown or a style tag cannot be parsed.

    """

    def __init__(self, styles: Mapping[str, tuple[str, ...]]):
        """Validate and store the element styles."""
        unknown = [name for name in styles if name not in DEFAULT_THEME]
        if unknown:
            plural = "s" if len(unknown) > 1 else ""
            raise ValidationError(
                f"invalid theme element name{plural}: {', '.join(repr(name) for name in unknown)}.",
                parameter_name="theme",
                parameter_value=unknown,
            )

        invalid = []
        for name, tags in styles.items():
            try:
                Style.parse(" ".join(tags))
            except StyleSyntaxError:
                invalid.append(f"{name}: {' '.join(tags)!r}")
        if invalid:
            raise ValidationError(
                f"invalid theme style{'s' if len(invalid) > 1 else ''}: {', '.join(invalid)}.",
                parameter_name="theme",
                parameter_value=invalid,
            )

        self._styles = dict(styles)

    @classmethod
    def from_config(cls, config: Any = None) -> Theme:
        """Merge user overrides onto the default theme.

        Parameters
        ----------
        config : Mapping or None, default None
            Element name to style string (``"green bold"``) or style list
            (``["green", "bold"]``). An existing :class:`Theme` is returned
            unchanged.

        Returns
        -------
        Theme
            The merged theme

        Raises
        ------
        ValidationError
            If ``config`` is not a mapping, or contains unknown element
            names or unparsable styles.

        """
        if isinstance(config, Theme):
            return config
        if config is None:
            config = {}
        if not isinstance(config, Mapping):
            raise ValidationError(
                f"invalid theme: {config!r}. Use a mapping with the element name and style.",
                parameter_name="theme",
                parameter_value=config,
            )

        styles = dict(DEFAULT_THEME)
        for name, value in config.items():
            styles[str(name)] = _as_style_list(value)
        if config:
            logger.debug("Theme overrides: %s", ", ".join(str(name) for name in config))
        return cls(styles)

    def __getitem__(self, name: str) -> tuple[str, ...]:
        return self._styles[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._styles)

    def __len__(self) -> int:
        return len(self._styles)

    def __repr__(self) -> str:
        return f"Theme({self._styles!r})"

    def style(self, name: str) -> Style:
        """Return the combined :class:`rich.style.Style` for an element."""
        return Style.parse(" ".join(self._styles[name]))
