#  Copyright (c) 2026 termmark contributors
#
# src/termmark/renderers/terminal.py
"""Terminal rendering from AST.

This module provides the TerminalRenderer class which converts a document
tree into a single string for display in a terminal. The renderer honors a
fixed total width, nests indentation for lists, description lists and
heading sections, draws blockquote bars and table borders from the
configured glyphs, and styles elements with ANSI escape sequences from the
configured theme.

The rendering process uses the visitor pattern. Every visit method appends
to the renderer's output buffer; nested content is captured as a string
with :meth:`InlineContentMixin._render_inline_content`, so block nodes can
post-process the complete text of their children (wrapping paragraphs as one
flow, prefixing quoted lines, zipping table cells into rows).

Footnotes are handled in two passes: references are numbered and stored in
the render context while the tree is converted, and the numbered list of
footnote bodies is appended once the document itself is done.

"""

from __future__ import annotations

import logging
import re
from typing import Optional

from rich.console import Console

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
from termmark.color import Color, detect_color_mode, detect_width
from termmark.constants import NEWLINE, SPACE, BorderLocation
from termmark.decorator import Decorator
from termmark.exceptions import RenderingError
from termmark.highlighter import Highlighter
from termmark.options import TerminalRendererOptions
from termmark.renderers.base import BaseRenderer, InlineContentMixin
from termmark.renderers.context import RenderContext, TableCursor
from termmark.renderers.table_layout import border, build_layout
from termmark.symbols import Symbols
from termmark.theme import Theme
from termmark.utils.text import strip_ansi, visible_width, wrap_text

logger = logging.getLogger(__name__)

_COMMENT_START_RE = re.compile(r"^<!-{2,}\s*", re.MULTILINE)
_COMMENT_END_RE = re.compile(r"\s*-{2,}>$", re.MULTILINE)
_MAILTO_PREFIX = "mailto:"


class TerminalRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to styled terminal text.

    Parameters
    ----------
    options : TerminalRendererOptions or None, default = None
        Terminal rendering options

    Attributes
    ----------
    width : int
        Resolved total output width
    mode : int
        Resolved color depth
    symbols : Symbols
        Resolved glyph table
    decorator : Decorator
        Theme style applicator
    highlighter : Highlighter
        Code highlighter
    warnings : list of str
        Warnings collected by the most recent conversion

    Examples
    --------
    Basic usage:

        >>> from termmark.ast import Document, Heading, Text
        >>> from termmark.renderers.terminal import TerminalRenderer
        >>> from termmark.options import TerminalRendererOptions
        >>> doc = Document(children=[Heading(level=2, children=[Text(value="Title")])])
        >>> renderer = TerminalRenderer(TerminalRendererOptions(width=40, color="never"))
        >>> renderer.render_to_string(doc)
        '  Title\\n'

    """

    def __init__(self, options: TerminalRendererOptions | None = None):
        """Resolve configuration and detect terminal capabilities."""
        BaseRenderer._validate_options_type(options, TerminalRendererOptions, "terminal")
        options = options or TerminalRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: TerminalRendererOptions = options

        needs_console = options.width is None or options.mode is None or options.color == "auto"
        console = Console() if needs_console else None
        self.width = options.width or detect_width(console)
        self.mode = options.mode or detect_color_mode(console)
        self.symbols = Symbols.from_config(options.symbols)
        self.theme = Theme.from_config(options.theme)
        self.decorator = Decorator(self.theme, enabled=Color(options.color).resolve(console), mode=self.mode)
        self.highlighter = Highlighter(self.decorator, mode=self.mode)
        logger.debug(
            "Terminal renderer: width=%d indent=%d mode=%d color=%s",
            self.width,
            options.indent,
            self.mode,
            self.decorator.enabled,
        )

        self._output: list[str] = []
        self._context = RenderContext()
        self.warnings: list[str] = []

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to terminal text.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            The rendered document, followed by the numbered footnote list
            when the document references footnotes

        Raises
        ------
        RenderingError
            If the tree is structurally invalid

        """
        context = RenderContext()
        result = self.convert(document, context)
        self.warnings = list(context.warnings)
        return result

    def convert(self, node: Node, context: RenderContext) -> str:
        """Convert one node within an explicit render context.

        Parameters
        ----------
        node : Node
            Node to convert
        context : RenderContext
            State shared by the whole conversion

        Returns
        -------
        str
            Rendered text of ``node`` and its subtree

        """
        saved_output, saved_context = self._output, self._context
        self._output, self._context = [], context
        try:
            node.accept(self)
            return "".join(self._output)
        finally:
            self._output, self._context = saved_output, saved_context

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _accept_child(self, parent: Optional[Node], content: list[Node], index: int) -> None:
        """Dispatch one child with its sibling frame pushed on the context."""
        with self._context.visiting(parent, content, index):  # type: ignore[arg-type]
            content[index].accept(self)

    def _render_child(self, parent: Node, siblings: list[Node], index: int) -> str:
        """Render a single child to a string."""
        saved_output = self._output
        self._output = []
        try:
            self._accept_child(parent, siblings, index)
            return "".join(self._output)
        finally:
            self._output = saved_output

    def _available_width(self) -> int:
        """Return the width left for content at the current indentation."""
        context = self._context
        return max(self.width - context.margin - context.indent, 1)

    def _indent_lines(self, lines: list[str], hanging: int = 0) -> str:
        """Join lines at the current indent.

        A first line that continues a list marker is left unindented.
        """
        indent = SPACE * self._context.indent
        first = "" if hanging else indent
        return NEWLINE.join(
            ((first if index == 0 else indent) + line) if line else line for index, line in enumerate(lines)
        )

    def _wrap_block(self, text: str, element: Optional[str] = None) -> str:
        """Wrap a flow of inline text to the available width and indent it.

        Parameters
        ----------
        text : str
            Rendered inline content
        element : str, optional
            Theme element applied to every wrapped line

        Returns
        -------
        str
            Indented lines without a trailing newline

        """
        hanging = self._context.consume_hanging()
        lines = wrap_text(text, self._available_width() - hanging)
        if element is not None:
            lines = [self.decorator.decorate(line, element) for line in lines]
        return self._indent_lines(lines, hanging)

    def _code_lines(self, code: str, language: Optional[str]) -> str:
        """Wrap, highlight and indent a block of code."""
        hanging = self._context.consume_hanging()
        raw = NEWLINE.join(wrap_text(code, self._available_width() - hanging))
        highlighted = self.highlighter.highlight(raw, language)
        return self._indent_lines(highlighted.split(NEWLINE), hanging)

    def _nested_indent(self) -> int:
        """Return the indent for the children of a list-like container."""
        context = self._context
        if isinstance(context.parent, Document):
            return context.indent
        return context.indent + self.options.indent

    def _decorate_children(self, node: Node, children: list[Node], element: str) -> None:
        content = self._render_inline_content(children, node)
        self._output.append(self.decorator.decorate_each_line(content, element))

    # ------------------------------------------------------------------
    # Block-level nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render the document followed by its footnote list."""
        body = self._render_inline_content(node.children, node)
        self._output.append(body)

        footnotes = self._render_footnotes(node)
        if footnotes:
            self._output.append((NEWLINE if body else "") + footnotes)

    def _render_footnotes(self, document: Document) -> str:
        """Render the registered footnotes as a numbered list.

        The list takes the indent of the heading section the document ends
        in. Footnote bodies may reference further footnotes, so the registry is
        drained until no new entries appear.
        """
        registry = self._context.footnotes
        parts: list[str] = []
        rendered = 0
        with self._context.scoped(margin=0, hanging=0):
            while rendered < len(registry):
                entries = registry.entries(rendered)
                notes = List(
                    ordered=True,
                    start=entries[0].number,
                    children=[ListItem(children=entry.children) for entry in entries],
                )
                parts.append(self._render_inline_content([notes], document))
                rendered += len(entries)
        return "".join(parts)

    def visit_heading(self, node: Heading) -> None:
        """Render a heading.

        A top-level heading also sets the indentation of the content that
        follows it to one indent unit per level below 1.
        """
        context = self._context
        if isinstance(context.parent, Document):
            context.indent = (node.level - 1) * self.options.indent

        element = "heading1" if node.level == 1 else "header"
        content = self._render_inline_content(node.children, node)
        self._output.append(self._wrap_block(content, element) + NEWLINE)

    def visit_paragraph(self, node: Paragraph) -> None:
        content = self._render_inline_content(node.children, node)
        self._output.append(self._wrap_block(content) + NEWLINE)

    def visit_blank(self, node: Blank) -> None:
        self._context.consume_hanging()
        self._output.append(NEWLINE)

    def visit_code_block(self, node: CodeBlock) -> None:
        self._output.append(self._code_lines(node.value, node.language) + NEWLINE)

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render quoted content and prefix every line with the quote bar.

        Children are rendered without indentation into a narrower space; the
        indentation and the decorated bar are added to each finished line.
        """
        context = self._context
        hanging = context.consume_hanging()
        bar = self.decorator.decorate(self.symbols["bar"], "quote") + SPACE * 2
        lead = SPACE * context.indent
        margin = context.margin + len(lead) + hanging + visible_width(bar)

        with context.scoped(indent=0, margin=margin, hanging=0):
            content = self._render_inline_content(node.children, node)

        lines = content.split(NEWLINE)
        if lines and lines[-1] == "":
            lines.pop()
        prefixed = [("" if index == 0 and hanging else lead) + bar + line for index, line in enumerate(lines)]
        self._output.append("".join(line + NEWLINE for line in prefixed))

    def visit_list(self, node: List) -> None:
        context = self._context
        with context.scoped(indent=self._nested_indent()):
            self._output.append(self._render_inline_content(node.children, node))

    def visit_list_item(self, node: ListItem) -> None:
        """Render the item marker followed by the item content.

        The first block of the item continues on the marker's line; the
        marker is emitted once however many lines the item wraps to.
        """
        context = self._context
        parent = context.parent
        if isinstance(parent, List) and parent.ordered:
            marker = f"{parent.start + context.frame.index}."
        else:
            marker = self.symbols["bullet"]

        hanging = context.consume_hanging()
        lead = "" if hanging else SPACE * context.indent
        prefix = lead + self.decorator.decorate(marker, "list")

        with context.scoped(hanging=visible_width(marker) + 1):
            content = self._render_inline_content(node.children, node)

        if content:
            self._output.append(prefix + SPACE + content)
        else:
            self._output.append(prefix + NEWLINE)

    def visit_description_list(self, node: DescriptionList) -> None:
        context = self._context
        with context.scoped(indent=self._nested_indent()):
            self._output.append(self._render_inline_content(node.children, node))

    def visit_description_term(self, node: DescriptionTerm) -> None:
        content = self._render_inline_content(node.children, node)
        self._output.append(self._wrap_block(content) + NEWLINE)

    def visit_description_details(self, node: DescriptionDetails) -> None:
        context = self._context
        next_sibling = context.frame.next
        with context.scoped(indent=self._nested_indent()):
            self._output.append(self._render_inline_content(node.children, node))
        if isinstance(next_sibling, DescriptionTerm):
            self._output.append(NEWLINE)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        context = self._context
        context.consume_hanging()
        diamond = self.symbols["diamond"]
        span = max(self.width - context.margin - 2 * visible_width(diamond), 0)
        rule = diamond + self.symbols["line"] * (span // max(visible_width(self.symbols["line"]), 1)) + diamond
        self._output.append(self.decorator.decorate(rule, "hr") + NEWLINE)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def visit_table(self, node: Table) -> None:
        """Lay out the whole table, then draw its sections.

        Every cell is rendered once, without wrapping, to measure it. The
        resulting layout fixes column widths and row heights before the
        first border is drawn.
        """
        context = self._context
        if context.consume_hanging():
            self._output.append(NEWLINE)

        cursor = TableCursor()
        cells: list[list[str]] = []
        with context.scoped(table_layout=None, table_cursor=cursor):
            for row_index, row in enumerate(node.rows()):
                cursor.row = row_index
                rendered_row = []
                for column, _cell in enumerate(row.children):
                    cursor.column = column
                    rendered_row.append(self._render_child(row, row.children, column))
                cells.append(rendered_row)

        layout = build_layout(cells, node.alignments, self.width - context.margin, context.indent)
        if layout.column_count == 0:
            logger.debug("Skipping table without columns")
            return

        with context.scoped(table_layout=layout, table_cursor=TableCursor()):
            self._output.append(self._render_inline_content(node.children, node))

    def _border(self, location: BorderLocation) -> str:
        layout = self._context.table_layout
        assert layout is not None
        return SPACE * self._context.indent + border(layout.column_widths, location, self.symbols, self.decorator)

    def visit_table_head(self, node: TableHead) -> None:
        frame = self._context.frame
        self._output.append(self._border("top") + NEWLINE)
        self._output.append(self._render_inline_content(node.children, node))
        if frame.next is None:
            self._output.append(self._border("bottom") + NEWLINE)

    def visit_table_body(self, node: TableBody) -> None:
        frame = self._context.frame
        top: BorderLocation = "mid" if isinstance(frame.previous, TableHead) else "top"
        bottom: BorderLocation = "mid" if isinstance(frame.next, TableFoot) else "bottom"
        self._output.append(self._border(top) + NEWLINE)
        self._output.append(self._render_inline_content(node.children, node))
        self._output.append(self._border(bottom) + NEWLINE)

    def visit_table_foot(self, node: TableFoot) -> None:
        frame = self._context.frame
        if not isinstance(frame.previous, TableBody):
            self._output.append(self._border("mid" if frame.previous is not None else "top") + NEWLINE)
        self._output.append(self._render_inline_content(node.children, node))
        self._output.append(self._border("bottom") + NEWLINE)

    def visit_table_row(self, node: TableRow) -> None:
        """Zip the formatted lines of every cell into physical rows."""
        context = self._context
        layout, cursor = context.table_layout, context.table_cursor
        if layout is None or cursor is None:
            self._output.append(self._render_inline_content(node.children, node))
            return

        if isinstance(context.frame.previous, TableRow):
            self._output.append(self._border("mid") + NEWLINE)

        columns = [self._render_child(node, node.children, index).split(NEWLINE) for index in range(len(node.children))]
        pipe = self.decorator.decorate(self.symbols["pipe"], "table")
        lead = SPACE * context.indent + pipe + SPACE
        for line_index in range(layout.row_heights[cursor.row]):
            cells = "".join(column[line_index] + SPACE + pipe + SPACE for column in columns)
            self._output.append(lead + cells + NEWLINE)
        cursor.row += 1

    def visit_table_cell(self, node: TableCell) -> None:
        """Render cell content, or its laid-out lines once the layout exists."""
        context = self._context
        layout, cursor = context.table_layout, context.table_cursor
        if layout is None or cursor is None:
            self._output.append(self._render_inline_content(node.children, node))
            return
        cursor.column = context.frame.index
        self._output.append(NEWLINE.join(layout.cell_lines(cursor.row, cursor.column)))

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        self._output.append(node.value)

    def visit_emphasis(self, node: Emphasis) -> None:
        self._decorate_children(node, node.children, "em")

    def visit_strong(self, node: Strong) -> None:
        self._decorate_children(node, node.children, "strong")

    def visit_delete(self, node: Delete) -> None:
        self._decorate_children(node, node.children, "delete")

    def visit_smart_quote(self, node: SmartQuote) -> None:
        self._output.append(self._glyph(node.kind))

    def visit_typographic_symbol(self, node: TypographicSymbol) -> None:
        self._output.append(self._glyph(node.name))

    def _glyph(self, name: str) -> str:
        if name not in self.symbols:
            raise RenderingError(f"Unknown typographic symbol: {name!r}", rendering_stage="typography")
        return self.symbols[name]

    def visit_entity(self, node: Entity) -> None:
        self._output.append(chr(node.codepoint))

    def visit_code_span(self, node: CodeSpan) -> None:
        self._output.append(self.highlighter.highlight(node.value, node.language))

    def visit_link(self, node: Link) -> None:
        """Render a link as ``label arrow (title) href``.

        The label part is omitted when it equals the target, and the whole
        link is dropped when its label is empty.

        Raises
        ------
        RenderingError
            If the link has no href.

        """
        if node.href is None:
            raise RenderingError("Link is missing its href", rendering_stage="link")

        href = node.href[len(_MAILTO_PREFIX) :] if node.href.startswith(_MAILTO_PREFIX) else node.href
        label = self._render_inline_content(node.children, node)
        plain_label = strip_ansi(label)
        if not plain_label.strip():
            return

        title = f"({node.title}) " if node.title and node.title.strip() else ""
        target = self.decorator.decorate(href, "link")
        if plain_label == href:
            self._output.append(title + target)
        else:
            self._output.append(f"{label} {self.symbols['arrow']} {title}{target}")

    def visit_image(self, node: Image) -> None:
        alt = f"{node.alt} {self.symbols['ndash']} " if node.alt else ""
        self._output.append(self.decorator.decorate(self.symbols.wrap_in_parentheses(alt + node.src), "image"))

    def visit_line_break(self, node: LineBreak) -> None:
        self._output.append(NEWLINE)

    def visit_footnote(self, node: Footnote) -> None:
        number = self._context.footnotes.register(node.name, node.children)
        self._output.append(self.decorator.decorate(self.symbols.wrap_in_brackets(str(number)), "note"))

    def visit_abbreviation(self, node: Abbreviation) -> None:
        self._output.append(f"{node.value}({node.title})" if node.title else node.value)

    # ------------------------------------------------------------------
    # Block or inline nodes
    # ------------------------------------------------------------------

    def visit_math(self, node: Math) -> None:
        if node.block:
            self._output.append(self._code_lines(node.value, None) + NEWLINE)
        else:
            self._output.append(self.highlighter.highlight(node.value))

    def visit_comment(self, node: Comment) -> None:
        """Render a comment as hash-prefixed lines in the comment style."""
        content = node.value.strip()
        if content.startswith("<!--"):
            content = _COMMENT_START_RE.sub("", content)
        if content.endswith("-->"):
            content = _COMMENT_END_RE.sub("", content)

        context = self._context
        hanging = context.consume_hanging() if node.block else 0
        lines = [self.decorator.decorate(f"{self.symbols['hash']} {line}", "comment") for line in content.split(NEWLINE)]
        if node.block:
            self._output.append(self._indent_lines(lines, hanging) + NEWLINE)
        else:
            self._output.append(NEWLINE.join(lines))

    def visit_raw_html(self, node: RawHTML) -> None:
        preview = node.value.strip().split(NEWLINE, 1)[0][:40]
        self._context.warn(f"Raw content is not supported: {preview!r}")

    def visit_html_element(self, node: HTMLElement) -> None:
        """Render an embedded HTML element through its Markdown equivalent."""
        tag = node.tag.lower()
        if tag in ("i", "em"):
            self._decorate_children(node, node.children, "em")
        elif tag in ("b", "strong"):
            self._decorate_children(node, node.children, "strong")
        elif tag in ("del", "s", "strike"):
            self._decorate_children(node, node.children, "delete")
        elif tag == "img":
            image = Image(src=node.attrs.get("src", ""), alt=node.attrs.get("alt", ""), title=node.attrs.get("title"))
            self.visit_image(image)
        elif tag == "a" and "href" in node.attrs:
            self.visit_link(Link(href=node.attrs["href"], title=node.attrs.get("title"), children=node.children))
        elif tag == "br":
            self._output.append(NEWLINE)
        elif tag == "div" or node.children:
            content = self._render_inline_content(node.children, node)
            if node.block and content and not content.endswith(NEWLINE):
                content = self._wrap_block(content) + NEWLINE
            self._output.append(content)
        else:
            self._context.warn(f"HTML element {tag!r} not supported")
