#  Copyright (c) 2026 termmark contributors
#
# src/termmark/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class renderers inherit from and the
mixin that captures the output of a run of nodes as a string.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Optional, Union

from termmark.ast.nodes import Document, Node
from termmark.exceptions import ValidationError
from termmark.options import TerminalRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : TerminalRendererOptions or None, default = None
        Rendering options

    """

    def __init__(self, options: TerminalRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        Raises
        ------
        RenderingError
            If the tree is structurally invalid

        """
        pass

    def render(self, doc: Document, output: Union[str, Path, IO[str], IO[bytes]]) -> None:
        """Render the AST and write the text to a file or stream.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[str] or IO[bytes]
            File path or writable stream

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[str], IO[bytes]]) -> None:
        """Write text output to a file path or IO stream.

        Binary streams receive UTF-8 encoded bytes.

        Raises
        ------
        TypeError
            If output type is not supported

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
        elif hasattr(output, "mode") and "b" in getattr(output, "mode", ""):
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
        elif hasattr(output, "write"):
            try:
                output.write(text)  # type: ignore[arg-type]
            except TypeError:
                output.write(text.encode("utf-8"))  # type: ignore[arg-type]
        else:
            raise TypeError(f"Unsupported output type: {type(output).__name__}")

    @staticmethod
    def _validate_options_type(options: object, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        ValidationError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise ValidationError(
                f"{renderer_name} renderer expects {expected_type.__name__}, got {type(options).__name__}",
                parameter_name="options",
                parameter_value=options,
            )


class InlineContentMixin:
    """Mixin capturing the output of a run of nodes as a string.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - Visitor methods that append to `_output`

    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node], parent: Optional[Node] = None) -> str:
        """Render a list of nodes to text.

        This method temporarily captures the output from rendering the nodes
        and returns it as a string, leaving previously accumulated output
        untouched.

        Parameters
        ----------
        content : list of Node
            Nodes to render
        parent : Node, optional
            The node owning ``content``

        Returns
        -------
        str
            Rendered content as a string

        """
        saved_output = self._output
        self._output = []

        for index in range(len(content)):
            self._accept_child(parent, content, index)

        result = "".join(self._output)
        self._output = saved_output
        return result

    def _accept_child(self, parent: Optional[Node], content: list[Node], index: int) -> None:
        """Dispatch one node of a captured run to its visit method."""
        content[index].accept(self)
