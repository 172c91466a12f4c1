#  Copyright (c) 2026 termmark contributors
#
# src/termmark/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy for representing a parsed document
as an Abstract Syntax Tree. Each node represents a structural or inline
element of the document and dispatches to a dedicated ``visit_*`` method of
a visitor through :meth:`Node.accept`.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote, Blank
    - List, ListItem, DescriptionList, DescriptionTerm, DescriptionDetails
    - Table, TableHead, TableBody, TableFoot, TableRow, TableCell
    - ThematicBreak

Inline nodes represent text and formatting:
    - Text, Emphasis, Strong, Delete, CodeSpan
    - Link, Image, LineBreak, Footnote
    - SmartQuote, TypographicSymbol, Entity, Abbreviation

Nodes that may appear at either level:
    - Math, Comment, RawHTML, HTMLElement

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from termmark.constants import Alignment, SmartQuoteKind


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_document method

        Returns
        -------
        Any
            Result from visitor.visit_document(self)

        """
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    level: int
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_heading method

        Returns
        -------
        Any
            Result from visitor.visit_heading(self)

        """
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes representing paragraph content
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_paragraph method

        Returns
        -------
        Any
            Result from visitor.visit_paragraph(self)

        """
        return visitor.visit_paragraph(self)


@dataclass
class Blank(Node):
    """Blank line separating two blocks.

    Parameters
    ----------
    value : str, default = "\\n"
        The blank content, one newline per empty line

    """

    value: str = "\n"
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_blank(self)."""
        return visitor.visit_blank(self)


@dataclass
class CodeBlock(Node):
    """Code block node with optional language specification.

    Parameters
    ----------
    value : str
        The code content, without a trailing newline
    language : str or None, default = None
        Programming language hint used for highlighting
    metadata : dict, default = empty dict
        Code block metadata

    """

    value: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_code_block method

        Returns
        -------
        Any
            Result from visitor.visit_code_block(self)

        """
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing quoted block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes within the quote
    metadata : dict, default = empty dict
        Block quote metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_block_quote(self)."""
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool, default = False
        True for numbered lists, False for bullet lists
    start : int, default = 1
        Number of the first item of an ordered list
    children : list of ListItem, default = empty list
        The list items
    metadata : dict, default = empty dict
        List metadata

    """

    ordered: bool = False
    start: int = 1
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_list method

        Returns
        -------
        Any
            Result from visitor.visit_list(self)

        """
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes of the item, usually a paragraph first
    metadata : dict, default = empty dict
        List item metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_list_item(self)."""
        return visitor.visit_list_item(self)


@dataclass
class DescriptionList(Node):
    """Description list containing alternating terms and details.

    Parameters
    ----------
    children : list of Node, default = empty list
        DescriptionTerm and DescriptionDetails nodes in document order
    metadata : dict, default = empty dict
        Description list metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_description_list(self)."""
        return visitor.visit_description_list(self)


@dataclass
class DescriptionTerm(Node):
    """Term being described in a description list.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes of the term
    metadata : dict, default = empty dict
        Term metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_description_term(self)."""
        return visitor.visit_description_term(self)


@dataclass
class DescriptionDetails(Node):
    """Details describing the preceding term.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes of the description
    metadata : dict, default = empty dict
        Details metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_description_details(self)."""
        return visitor.visit_description_details(self)


@dataclass
class Table(Node):
    """Table node with head, body and foot sections.

    Parameters
    ----------
    alignments : list of str, default = empty list
        Per-column alignment: ``left``, ``center``, ``right`` or ``default``
    children : list of Node, default = empty list
        TableHead, TableBody and TableFoot sections in display order
    metadata : dict, default = empty dict
        Table metadata

    Notes
    -----
    Every row of a table must have the same number of cells.

    """

    alignments: list[Alignment] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_table method

        Returns
        -------
        Any
            Result from visitor.visit_table(self)

        """
        return visitor.visit_table(self)

    def rows(self) -> list[TableRow]:
        """Return all rows of all sections in display order."""
        return [
            row
            for section in self.children
            for row in getattr(section, "children", [])
            if isinstance(row, TableRow)
        ]


@dataclass
class TableHead(Node):
    """Header section of a table."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_table_head(self)."""
        return visitor.visit_table_head(self)


@dataclass
class TableBody(Node):
    """Body section of a table."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_table_body(self)."""
        return visitor.visit_table_body(self)


@dataclass
class TableFoot(Node):
    """Footer section of a table."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_table_foot(self)."""
        return visitor.visit_table_foot(self)


@dataclass
class TableRow(Node):
    """Table row node containing cells.

    Parameters
    ----------
    children : list of TableCell, default = empty list
        Cells in this row
    metadata : dict, default = empty dict
        Row metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_table_row(self)."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell node containing inline content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes of the cell
    metadata : dict, default = empty dict
        Cell metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_table_cell(self)."""
        return visitor.visit_table_cell(self)


@dataclass
class ThematicBreak(Node):
    """Thematic break (horizontal rule) node."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_thematic_break(self)."""
        return visitor.visit_thematic_break(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    value : str
        The text content. Embedded newlines are kept as line breaks.
    metadata : dict, default = empty dict
        Text metadata

    """

    value: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_text method

        Returns
        -------
        Any
            Result from visitor.visit_text(self)

        """
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node containing inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_emphasis(self)."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) node containing inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_strong(self)."""
        return visitor.visit_strong(self)


@dataclass
class Delete(Node):
    """Deleted (struck through) text containing inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_delete(self)."""
        return visitor.visit_delete(self)


@dataclass
class SmartQuote(Node):
    """Typographic quotation mark.

    Parameters
    ----------
    kind : {"ldquo", "rdquo", "lsquo", "rsquo"}
        Which quote glyph to render

    """

    kind: SmartQuoteKind
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_smart_quote(self)."""
        return visitor.visit_smart_quote(self)


@dataclass
class TypographicSymbol(Node):
    """Typographic replacement such as an em dash or an ellipsis.

    Parameters
    ----------
    name : str
        Glyph name, one of ``mdash``, ``ndash``, ``hellip``, ``laquo``,
        ``raquo``, ``laquo_space`` or ``raquo_space``

    """

    name: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_typographic_symbol(self)."""
        return visitor.visit_typographic_symbol(self)


@dataclass
class Entity(Node):
    """Character entity identified by its code point."""

    codepoint: int
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_entity(self)."""
        return visitor.visit_entity(self)


@dataclass
class CodeSpan(Node):
    """Inline code node.

    Parameters
    ----------
    value : str
        The code content
    language : str or None, default = None
        Optional language hint used for highlighting

    """

    value: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code span.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_code_span method

        Returns
        -------
        Any
            Result from visitor.visit_code_span(self)

        """
        return visitor.visit_code_span(self)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    href : str or None
        Link target. A missing target is a structural error at render time.
    title : str or None, default = None
        Optional link title
    children : list of Node, default = empty list
        Inline nodes representing the link label
    metadata : dict, default = empty dict
        Link metadata

    """

    href: Optional[str]
    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_link method

        Returns
        -------
        Any
            Result from visitor.visit_link(self)

        """
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    src : str
        Image source path or URL
    alt : str, default = ""
        Alternative text
    title : str or None, default = None
        Optional image title

    """

    src: str
    alt: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_image(self)."""
        return visitor.visit_image(self)


@dataclass
class LineBreak(Node):
    """Hard line break inside inline content."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_line_break(self)."""
        return visitor.visit_line_break(self)


@dataclass
class Footnote(Node):
    """Footnote reference carrying the body of its definition.

    Parameters
    ----------
    name : str
        Footnote label; references sharing a name share one number
    children : list of Node, default = empty list
        Block-level nodes of the footnote definition

    """

    name: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_footnote(self)."""
        return visitor.visit_footnote(self)


@dataclass
class Abbreviation(Node):
    """Abbreviation with its optional expansion.

    Parameters
    ----------
    value : str
        The abbreviated text, e.g. ``HTML``
    title : str or None, default = None
        The expansion shown after the abbreviation

    """

    value: str
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_abbreviation(self)."""
        return visitor.visit_abbreviation(self)


# ============================================================================
# Block or Inline Nodes
# ============================================================================


@dataclass
class Math(Node):
    """Mathematical expression in TeX notation.

    Parameters
    ----------
    value : str
        The expression source
    block : bool, default = False
        True for display math on its own lines, False for inline math

    """

    value: str
    block: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_math(self)."""
        return visitor.visit_math(self)


@dataclass
class Comment(Node):
    """Comment node.

    Parameters
    ----------
    value : str
        Comment text, with or without ``<!--``/``-->`` delimiters
    block : bool, default = False
        True when the comment stands on its own lines

    """

    value: str
    block: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_comment(self)."""
        return visitor.visit_comment(self)


@dataclass
class RawHTML(Node):
    """Raw markup that cannot be shown in a terminal, e.g. a script."""

    value: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_raw_html(self)."""
        return visitor.visit_raw_html(self)


@dataclass
class HTMLElement(Node):
    """HTML element embedded in the document.

    Parameters
    ----------
    tag : str
        Lower-case tag name, e.g. ``b`` or ``div``
    attrs : dict, default = empty dict
        Element attributes such as ``href`` or ``src``
    children : list of Node, default = empty list
        Converted element content
    block : bool, default = False
        True for elements appearing at block level

    """

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    block: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_html_element(self)."""
        return visitor.visit_html_element(self)
