#  Copyright (c) 2026 termmark contributors
#
# src/termmark/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class for traversing and processing
AST nodes. Every node type has its own abstract ``visit_*`` method, so a
visitor that forgets a node type cannot be instantiated.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one visit_* method per node type. The visitor
    pattern allows algorithms to be separated from the node structure.

    All visit methods accept a node and return Any (typically None for
    side-effect visitors, or accumulated results for transforming visitors).

    Nodes dispatch through ``node.accept(visitor)``, which calls the
    matching method, e.g. ``Text.accept`` calls ``visitor.visit_text``.
    :class:`termmark.renderers.terminal.TerminalRenderer` is the concrete
    visitor that produces terminal text.

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node.

        Parameters
        ----------
        node : Heading
            The heading node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node.

        Parameters
        ----------
        node : Paragraph
            The paragraph node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_blank(self, node: Blank) -> Any:
        """Visit a Blank node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_description_list(self, node: DescriptionList) -> Any:
        """Visit a DescriptionList node."""
        pass

    @abstractmethod
    def visit_description_term(self, node: DescriptionTerm) -> Any:
        """Visit a DescriptionTerm node."""
        pass

    @abstractmethod
    def visit_description_details(self, node: DescriptionDetails) -> Any:
        """Visit a DescriptionDetails node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_head(self, node: TableHead) -> Any:
        """Visit a TableHead node."""
        pass

    @abstractmethod
    def visit_table_body(self, node: TableBody) -> Any:
        """Visit a TableBody node."""
        pass

    @abstractmethod
    def visit_table_foot(self, node: TableFoot) -> Any:
        """Visit a TableFoot node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_delete(self, node: Delete) -> Any:
        """Visit a Delete node."""
        pass

    @abstractmethod
    def visit_smart_quote(self, node: SmartQuote) -> Any:
        """Visit a SmartQuote node."""
        pass

    @abstractmethod
    def visit_typographic_symbol(self, node: TypographicSymbol) -> Any:
        """Visit a TypographicSymbol node."""
        pass

    @abstractmethod
    def visit_entity(self, node: Entity) -> Any:
        """Visit an Entity node."""
        pass

    @abstractmethod
    def visit_code_span(self, node: CodeSpan) -> Any:
        """Visit a CodeSpan node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_footnote(self, node: Footnote) -> Any:
        """Visit a Footnote node."""
        pass

    @abstractmethod
    def visit_abbreviation(self, node: Abbreviation) -> Any:
        """Visit an Abbreviation node."""
        pass

    @abstractmethod
    def visit_math(self, node: Math) -> Any:
        """Visit a Math node."""
        pass

    @abstractmethod
    def visit_comment(self, node: Comment) -> Any:
        """Visit a Comment node."""
        pass

    @abstractmethod
    def visit_raw_html(self, node: RawHTML) -> Any:
        """Visit a RawHTML node."""
        pass

    @abstractmethod
    def visit_html_element(self, node: HTMLElement) -> Any:
        """Visit an HTMLElement node."""
        pass
