#  Copyright (c) 2026 termmark contributors
#
# src/termmark/highlighter.py
"""Syntax highlighting of code spans and code blocks."""

from __future__ import annotations

import logging
from typing import Optional

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

from termmark.constants import HIGHLIGHT_256_THRESHOLD
from termmark.decorator import Decorator

logger = logging.getLogger(__name__)


def select_lexer(language: Optional[str]) -> Lexer:
    """Return a pygments lexer for ``language``, falling back to plain text.

    Leading and trailing newlines of the code are kept so that highlighting
    never changes the number of lines.
    """
    if language:
        try:
            return get_lexer_by_name(language, stripnl=False, ensurenl=False)
        except ClassNotFound:
            logger.debug("No lexer for language %r, using plain text", language)
    return TextLexer(stripnl=False, ensurenl=False)


class Highlighter:
    """Turn code text into syntax-colored terminal text.

    Parameters
    ----------
    decorator : Decorator
        Decorator whose enablement and ``code`` style are used
    mode : int, default 256
        Terminal color depth. Below 256 colors every line is painted with
        the ``code`` theme style; otherwise pygments'
        :class:`~pygments.formatters.Terminal256Formatter` colors tokens.

    """

    def __init__(self, decorator: Decorator, mode: int = 256, style: str = "default"):
        """Store collaborators and build the 256-color formatter."""
        self.decorator = decorator
        self.mode = mode
        self._formatter = Terminal256Formatter(style=style)

    def highlight(self, code: str, language: Optional[str] = None) -> str:
        """Highlight ``code`` written in ``language``.

        Parameters
        ----------
        code : str
            Source text, already wrapped to the available width
        language : str, optional
            Language hint, e.g. ``"python"``

        Returns
        -------
        str
            ``code`` unchanged when decoration is disabled, otherwise the
            colored text with the same line structure.

        """
        if not self.decorator.enabled:
            return code

        if self.mode < HIGHLIGHT_256_THRESHOLD:
            return self.decorator.decorate_each_line(code, "code")

        return pygments_highlight(code, select_lexer(language), self._formatter)
