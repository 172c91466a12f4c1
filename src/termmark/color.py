#  Copyright (c) 2026 termmark contributors
#
# src/termmark/color.py
"""Color enablement and terminal capability detection."""

from __future__ import annotations

import logging
from typing import Any, Optional

from rich.console import Console

from termmark.constants import DEFAULT_WIDTH_FALLBACK
from termmark.exceptions import ValidationError

logger = logging.getLogger(__name__)

COLOR_MODES = ("always", "auto", "never")

_COLOR_SYSTEM_TO_MODE = {
    "standard": 16,
    "windows": 16,
    "256": 256,
    "truecolor": 2**24,
}


class Color:
    """Tri-state color setting.

    Parameters
    ----------
    value : {"always", "auto", "never"}
        Requested color mode

    Raises
    ------
    ValidationError
        If ``value`` is not one of the three modes.

    """

    def __init__(self, value: Any):
        """Validate the color mode."""
        if str(value) not in COLOR_MODES:
            raise ValidationError(
                f"invalid color: {value!r}. Use the 'always', 'auto' or 'never' value.",
                parameter_name="color",
                parameter_value=value,
            )
        self.value = str(value)

    def to_enabled(self) -> Optional[bool]:
        """Return True for "always", False for "never", None for "auto".

        None means the decision is left to terminal detection, see
        :func:`detect_color_enabled`.
        """
        if self.value == "always":
            return True
        if self.value == "never":
            return False
        return None

    def resolve(self, console: Console | None = None) -> bool:
        """Return the effective enablement, detecting the terminal for "auto"."""
        enabled = self.to_enabled()
        if enabled is None:
            enabled = detect_color_enabled(console)
        return enabled


def detect_color_enabled(console: Console | None = None) -> bool:
    """Report whether stdout is a terminal that accepts color.

    Honors the ``NO_COLOR``, ``FORCE_COLOR`` and ``TERM`` environment
    variables through rich's console detection.
    """
    console = console or Console()
    enabled = console.color_system is not None
    logger.debug("Detected color support: %s (%s)", enabled, console.color_system)
    return enabled


def detect_color_mode(console: Console | None = None) -> int:
    """Return the number of colors the terminal supports, 16 when unknown."""
    console = console or Console()
    return _COLOR_SYSTEM_TO_MODE.get(str(console.color_system), 16)


def detect_width(console: Console | None = None) -> int:
    """Return the terminal width in columns."""
    console = console or Console()
    return console.width or DEFAULT_WIDTH_FALLBACK
