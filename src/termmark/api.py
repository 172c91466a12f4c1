#  Copyright (c) 2026 termmark contributors
#
# src/termmark/api.py
"""Public conversion functions.

The functions in this module chain the Markdown front end and the terminal
renderer. Keyword options are split between :class:`MarkdownParserOptions`
and :class:`TerminalRendererOptions` by field name, so both can be tuned in
a single call::

    parse("# Title", width=60, color="never", typographer=False)

"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional, Union

from termmark.ast.nodes import Document
from termmark.exceptions import ParsingError, ValidationError
from termmark.options import MarkdownParserOptions, TerminalRendererOptions
from termmark.parsers.markdown import MarkdownToTreeConverter
from termmark.renderers.terminal import TerminalRenderer

logger = logging.getLogger(__name__)

_PARSER_FIELDS = frozenset(f.name for f in fields(MarkdownParserOptions))
_RENDERER_FIELDS = frozenset(f.name for f in fields(TerminalRendererOptions))


def _split_options(
    kwargs: dict[str, Any],
    parser_options: Optional[MarkdownParserOptions],
    renderer_options: Optional[TerminalRendererOptions],
) -> tuple[MarkdownParserOptions, TerminalRendererOptions]:
    """Merge keyword options into parser and renderer options.

    Raises
    ------
    ValidationError
        If a keyword is not a field of either options class, or a value is
        invalid.

    """
    unknown = sorted(set(kwargs) - _PARSER_FIELDS - _RENDERER_FIELDS)
    if unknown:
        raise ValidationError(
            f"Unknown option(s): {', '.join(unknown)}",
            parameter_name="options",
            parameter_value=unknown,
        )

    parser_kwargs = {name: value for name, value in kwargs.items() if name in _PARSER_FIELDS}
    renderer_kwargs = {name: value for name, value in kwargs.items() if name in _RENDERER_FIELDS}

    parser_options = parser_options or MarkdownParserOptions()
    renderer_options = renderer_options or TerminalRendererOptions()
    if parser_kwargs:
        parser_options = parser_options.create_updated(**parser_kwargs)
    if renderer_kwargs:
        renderer_options = renderer_options.create_updated(**renderer_kwargs)
    return parser_options, renderer_options


def parse(
    content: str,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[TerminalRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Render Markdown text for the terminal.

    Parameters
    ----------
    content : str
        Markdown source text
    parser_options : MarkdownParserOptions, optional
        Pre-configured parser options
    renderer_options : TerminalRendererOptions, optional
        Pre-configured renderer options
    kwargs : Any
        Individual options of either class, e.g. ``width=80`` or
        ``symbols="ascii"``. They override the pre-configured options.

    Returns
    -------
    str
        The rendered document

    Raises
    ------
    ValidationError
        If any option is invalid
    RenderingError
        If the parsed document is structurally invalid

    Examples
    --------
        >>> parse("- Item 1\\n  - Item 2", width=80, color="never")
        '● Item 1\\n  ● Item 2\\n'

    """
    parser_options, renderer_options = _split_options(kwargs, parser_options, renderer_options)
    document = MarkdownToTreeConverter(parser_options).parse(content)
    return TerminalRenderer(renderer_options).render_to_string(document)


def parse_file(
    path: Union[str, Path],
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[TerminalRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Render a UTF-8 Markdown file for the terminal.

    Parameters
    ----------
    path : str or Path
        Path of the Markdown file
    parser_options : MarkdownParserOptions, optional
        Pre-configured parser options
    renderer_options : TerminalRendererOptions, optional
        Pre-configured renderer options
    kwargs : Any
        Individual options, see :func:`parse`

    Returns
    -------
    str
        The rendered document

    Raises
    ------
    ParsingError
        If the file does not exist, cannot be read or is not valid UTF-8
    ValidationError
        If any option is invalid

    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ParsingError(f"File not found: {file_path}", parsing_stage="input_loading")

    parser_options, renderer_options = _split_options(kwargs, parser_options, renderer_options)
    logger.debug("Rendering %s", file_path)
    document = MarkdownToTreeConverter(parser_options).parse(file_path)
    return TerminalRenderer(renderer_options).render_to_string(document)


def render(document: Document, options: Optional[TerminalRendererOptions] = None) -> str:
    """Render an already built document tree.

    Parameters
    ----------
    document : Document
        Root of the tree
    options : TerminalRendererOptions, optional
        Renderer options, defaults when omitted

    Returns
    -------
    str
        The rendered document

    """
    return TerminalRenderer(options).render_to_string(document)
