#  Copyright (c) 2026 termmark contributors
"""Constants and default values for the termmark library.

This module centralizes the hardcoded values and default configuration
constants used across termmark.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Rendering Defaults - Width, indentation and color settings
3. Markdown Front End - Plugins and typographic rules
4. Command Line - Exit codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

ColorMode = Literal["always", "auto", "never"]
ColorDepth = Literal[16, 256]
SymbolsName = Literal["ascii", "unicode"]
Alignment = Literal["left", "center", "right", "default"]
BorderLocation = Literal["top", "mid", "bottom"]
SmartQuoteKind = Literal["ldquo", "rdquo", "lsquo", "rsquo"]

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_INDENT = 2
DEFAULT_COLOR: ColorMode = "auto"
DEFAULT_SYMBOLS: SymbolsName = "unicode"
DEFAULT_WIDTH_FALLBACK = 80

# Color depth at which code is highlighted with the 256-color formatter
HIGHLIGHT_256_THRESHOLD = 256

NEWLINE = "\n"
SPACE = " "
RESET_SEQUENCE = "\x1b[0m"

# =============================================================================
# Markdown Front End
# =============================================================================

MARKDOWN_PLUGINS: tuple[str, ...] = (
    "strikethrough",
    "table",
    "footnotes",
    "def_list",
    "math",
    "abbr",
)

# Longest match first
TYPOGRAPHIC_SYMBOLS: tuple[tuple[str, str], ...] = (
    ("---", "mdash"),
    ("--", "ndash"),
    ("...", "hellip"),
    ("<< ", "laquo_space"),
    (" >>", "raquo_space"),
    ("<<", "laquo"),
    (">>", "raquo"),
)

INLINE_HTML_ELEMENTS = frozenset(
    {"a", "b", "br", "code", "del", "em", "i", "img", "kbd", "s", "small", "span", "strike", "strong", "sub", "sup", "u"}
)
RAW_HTML_ELEMENTS = frozenset({"script", "style"})
VOID_HTML_ELEMENTS = frozenset({"br", "hr", "img", "input", "wbr"})

# =============================================================================
# Command Line
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
