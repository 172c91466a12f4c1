#  Copyright (c) 2026 termmark contributors
#
# src/termmark/decorator.py
"""Apply theme styles to text as ANSI escape sequences.

Styles are rendered with :class:`rich.style.Style` against the color system
matching the configured color depth, so the emitted escape codes follow the
terminal's capabilities (16 colors, 256 colors or true color).
"""

from __future__ import annotations

import logging

from rich.color import ColorSystem

from termmark.constants import NEWLINE, RESET_SEQUENCE
from termmark.theme import Theme

logger = logging.getLogger(__name__)

_SENTINEL = "\x00"


def color_system_for(mode: int) -> ColorSystem:
    """Map a color depth to the rich color system used to render styles."""
    if mode >= 2**24:
        return ColorSystem.TRUECOLOR
    if mode >= 256:
        return ColorSystem.EIGHT_BIT
    return ColorSystem.STANDARD


class Decorator:
    """Wrap text in the start and reset sequences of a theme element.

    Decoration never changes the visible content of the text. When
    decoration is disabled every method returns its input unchanged.

    Parameters
    ----------
    theme : Theme
        Element styles
    enabled : bool, default True
        Whether escape sequences are emitted at all
    mode : int, default 16
        Terminal color depth

    Examples
    --------
        >>> decorator = Decorator(Theme.from_config(), enabled=True)
        >>> decorator.decorate("note", "note")
        '\\x1b[33mnote\\x1b[0m'

    """

    def __init__(self, theme: Theme, enabled: bool = True, mode: int = 16):
        """Resolve the color system and prepare the per-element code cache."""
        self.theme = theme
        self.enabled = enabled
        self.mode = mode
        self._color_system = color_system_for(mode)
        self._codes: dict[str, tuple[str, str]] = {}

    def codes(self, element: str) -> tuple[str, str]:
        """Return the ``(start, reset)`` sequences for an element.

        Both are empty strings when decoration is disabled or the element
        has no effective style.
        """
        if not self.enabled:
            return "", ""
        if element not in self._codes:
            rendered = self.theme.style(element).render(_SENTINEL, color_system=self._color_system)
            start, _, reset = rendered.partition(_SENTINEL)
            self._codes[element] = (start, reset)
        return self._codes[element]

    def decorate(self, text: str, element: str) -> str:
        """Style ``text`` with the theme styles of ``element``.

        Reset sequences produced by nested decorations are followed by the
        outer start sequence so the outer style continues after them.

        Parameters
        ----------
        text : str
            Text to decorate, possibly already containing escape sequences
        element : str
            Theme element name

        Returns
        -------
        str
            The decorated text

        """
        start, reset = self.codes(element)
        if not text or not start:
            return text

        closed = text.endswith(RESET_SEQUENCE)
        body = text[: -len(RESET_SEQUENCE)] if closed else text
        body = body.replace(RESET_SEQUENCE, RESET_SEQUENCE + start)
        return f"{start}{body}{reset}"

    def decorate_each_line(self, text: str, element: str) -> str:
        """Decorate every line of ``text`` separately.

        Empty lines stay empty so no escape sequences surround blank output.
        """
        return NEWLINE.join(self.decorate(line, element) for line in text.split(NEWLINE))
