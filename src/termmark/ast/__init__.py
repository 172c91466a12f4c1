#  Copyright (c) 2026 termmark contributors
#
# src/termmark/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The document tree decouples reading Markdown from drawing it in a terminal:
the Markdown front end builds the tree, the terminal renderer walks it.

- nodes: AST node classes representing document structure
- visitors: Visitor pattern implementation for AST traversal

Examples
--------
Basic usage:

    >>> from termmark.ast import Document, Heading, Paragraph, Text
    >>> from termmark.renderers.terminal import TerminalRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, children=[Text(value="Title")]),
    ...     Paragraph(children=[Text(value="Hello world")])
    ... ])
    >>> text = TerminalRenderer().render_to_string(doc)

"""

from termmark.ast.nodes import (
    Abbreviation,
    Blank,
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Comment,
    Delete,
    DescriptionDetails,
    DescriptionList,
    DescriptionTerm,
    Document,
    Emphasis,
    Entity,
    Footnote,
    Heading,
    HTMLElement,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Math,
    Node,
    Paragraph,
    RawHTML,
    SmartQuote,
    Strong,
    Table,
    TableBody,
    TableCell,
    TableFoot,
    TableHead,
    TableRow,
    Text,
    ThematicBreak,
    TypographicSymbol,
)
from termmark.ast.visitors import NodeVisitor

__all__ = [
    "Abbreviation",
    "Blank",
    "BlockQuote",
    "CodeBlock",
    "CodeSpan",
    "Comment",
    "Delete",
    "DescriptionDetails",
    "DescriptionList",
    "DescriptionTerm",
    "Document",
    "Emphasis",
    "Entity",
    "Footnote",
    "Heading",
    "HTMLElement",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Math",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "RawHTML",
    "SmartQuote",
    "Strong",
    "Table",
    "TableBody",
    "TableCell",
    "TableFoot",
    "TableHead",
    "TableRow",
    "Text",
    "ThematicBreak",
    "TypographicSymbol",
]
