#  Copyright (c) 2026 termmark contributors
#
# src/termmark/parsers/markdown.py
"""Markdown to document tree converter.

This module parses Markdown with mistune and converts the resulting token
stream into the node types of :mod:`termmark.ast`. Besides the CommonMark
constructs it understands pipe tables (with ``===`` footer rows), footnotes,
definition lists, math, abbreviations and strikethrough. Embedded HTML is
turned into :class:`HTMLElement` and :class:`Comment` nodes, and an optional
typographic pass replaces straight quotes, dashes, ellipses and guillemets
with symbol nodes.

"""

from __future__ import annotations

import html
import logging
import re
from pathlib import Path
from typing import IO, Any, Optional, Union

import mistune
from bs4 import BeautifulSoup
from bs4.element import Comment as HTMLComment
from bs4.element import NavigableString, Tag

from termmark.ast import (
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
from termmark.constants import (
    INLINE_HTML_ELEMENTS,
    RAW_HTML_ELEMENTS,
    TYPOGRAPHIC_SYMBOLS,
    VOID_HTML_ELEMENTS,
    Alignment,
    SmartQuoteKind,
)
from termmark.exceptions import ParsingError, ValidationError
from termmark.options import MarkdownParserOptions

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"^<(/?)([A-Za-z][A-Za-z0-9-]*)\b[^>]*?(/?)>$", re.DOTALL)
_ENTITY_PATTERN = r"&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);"
_TYPOGRAPHY_RE = re.compile("|".join([re.escape(text) for text, _ in TYPOGRAPHIC_SYMBOLS] + ["[\"']", _ENTITY_PATTERN]))
_ENTITY_RE = re.compile(_ENTITY_PATTERN)
_FOOTER_SEPARATOR_RE = re.compile(r"^=+$")
_WHITESPACE_RE = re.compile(r"\s+")

_TYPOGRAPHIC_NAMES = dict(TYPOGRAPHIC_SYMBOLS)
_OPENING_CONTEXT = "([{<-—–"
_ALIGNMENTS: dict[Optional[str], Alignment] = {"left": "left", "center": "center", "right": "right"}


class MarkdownToTreeConverter:
    """Convert Markdown to a termmark document tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> converter = MarkdownToTreeConverter()
        >>> doc = converter.parse("# Title")
        >>> type(doc.children[0]).__name__
        'Heading'

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise ValidationError(
                f"markdown parser expects MarkdownParserOptions, got {type(options).__name__}",
                parameter_name="options",
                parameter_value=options,
            )
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()
        self._footnote_tokens: dict[str, list[dict[str, Any]]] = {}
        self._footnote_definitions: dict[str, list[Node]] = {}

    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Markdown input into a Document.

        Parameters
        ----------
        input_data : str, Path, IO or bytes
            Markdown input to parse. Can be:
            - Markdown string
            - File path (Path)
            - File-like object in text or binary mode
            - Raw UTF-8 markdown bytes

        Returns
        -------
        Document
            Document tree. Leading and trailing blank lines are dropped.

        Raises
        ------
        ParsingError
            If the input cannot be read or decoded.

        """
        markdown_content = self._load_text_content(input_data)

        # Reset parser state to prevent leakage across parse calls
        self._footnote_tokens = {}
        self._footnote_definitions = {}

        markdown = mistune.create_markdown(plugins=self.options.plugins(), renderer=None)
        tokens, _state = markdown.parse(markdown_content)
        if not isinstance(tokens, list):
            tokens = []

        children = self._process_tokens(self._collect_footnote_definitions(tokens))
        while children and isinstance(children[-1], Blank):
            children.pop()
        while children and isinstance(children[0], Blank):
            children.pop(0)

        logger.debug("Parsed %d top-level node(s)", len(children))
        return Document(children=children)

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        """Return the Markdown text of any supported input.

        Raises
        ------
        ParsingError
            If a file cannot be read or bytes are not valid UTF-8.

        """
        if isinstance(input_data, str):
            return input_data
        try:
            if isinstance(input_data, Path):
                raw: Union[str, bytes] = input_data.read_bytes()
            elif isinstance(input_data, bytes):
                raw = input_data
            elif hasattr(input_data, "read"):
                raw = input_data.read()
            else:
                raise ParsingError(
                    f"Unsupported input type: {type(input_data).__name__}",
                    parsing_stage="input_loading",
                )
            return raw.decode("utf-8") if isinstance(raw, bytes) else raw
        except OSError as e:
            raise ParsingError(f"Failed to read Markdown input: {e}", parsing_stage="input_loading", original_error=e) from e
        except UnicodeDecodeError as e:
            raise ParsingError(
                f"Markdown input is not valid UTF-8: {e}", parsing_stage="decoding", original_error=e
            ) from e

    # ------------------------------------------------------------------
    # Footnotes
    # ------------------------------------------------------------------

    def _collect_footnote_definitions(self, tokens: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Remove footnote definitions from the stream and store their tokens by key."""
        remaining = []
        for token in tokens:
            token_type = token.get("type", "")
            if token_type == "footnotes":
                for item in token.get("children", []):
                    key = item.get("attrs", {}).get("key", "")
                    self._footnote_tokens[key] = item.get("children", [])
            elif token_type == "footnote_def":
                label = token.get("attrs", {}).get("label", "")
                self._footnote_tokens[label] = token.get("children", [])
            else:
                remaining.append(token)
        return remaining

    def _footnote_body(self, key: str) -> list[Node]:
        """Return the converted body of footnote ``key``, converting it on first use."""
        if key not in self._footnote_definitions:
            # Placeholder so a footnote referencing itself terminates
            self._footnote_definitions[key] = []
            tokens = self._footnote_tokens.get(key)
            if tokens is None:
                logger.debug("Footnote %r has no definition", key)
            else:
                self._footnote_definitions[key] = self._process_tokens(tokens)
        return list(self._footnote_definitions[key])

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into nodes.

        Parameters
        ----------
        tokens : list of dict
            Mistune token dictionaries

        Returns
        -------
        list of Node
            Block nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                if isinstance(node, list):
                    nodes.extend(node)
                else:
                    nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single mistune block token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node, list of Node, or None
            Resulting node(s)

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "blank_line":
            return Blank()
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return self._process_html_block(token)
        elif token_type == "block_math":
            return Math(value=token.get("raw", "").strip("\n"), block=True)
        elif token_type == "def_list":
            return self._process_definition_list(token)

        logger.debug("Skipping unsupported block token %r", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        level = token.get("attrs", {}).get("level", 1)
        return Heading(level=level, children=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process a fenced or indented code block.

        The language is the first word of the fence info string.
        """
        code = token.get("raw", "")
        if code.endswith("\n"):
            code = code[:-1]
        info = token.get("attrs", {}).get("info", "") or ""
        language = info.split()[0] if info.strip() else None
        return CodeBlock(value=code, language=language)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in token.get("children", [])
            if child.get("type") == "list_item"
        ]
        return List(ordered=bool(attrs.get("ordered")), start=attrs.get("start", 1), children=items)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process a table token.

        The head cells sit directly under ``table_head``. A body row made of
        ``===`` cells only separates the body rows from the footer rows.

        Parameters
        ----------
        token : dict
            Table token with 'children' (head and body)

        Returns
        -------
        Table
            Table node with head, body and foot sections

        """
        alignments: list[Alignment] = []
        sections: list[Node] = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                cell_tokens = [cell for cell in section.get("children", []) if cell.get("type") == "table_cell"]
                alignments = [_ALIGNMENTS.get(cell.get("attrs", {}).get("align"), "default") for cell in cell_tokens]
                cells: list[Node] = [self._process_table_cell(cell) for cell in cell_tokens]
                sections.append(TableHead(children=[TableRow(children=cells)]))

            elif section_type == "table_body":
                body_rows: list[Node] = []
                foot_rows: list[Node] = []
                current = body_rows
                for row_token in section.get("children", []):
                    if self._is_footer_separator(row_token):
                        current = foot_rows
                        continue
                    row_cells: list[Node] = [self._process_table_cell(cell) for cell in row_token.get("children", [])]
                    current.append(TableRow(children=row_cells))
                if body_rows:
                    sections.append(TableBody(children=body_rows))
                if foot_rows:
                    sections.append(TableFoot(children=foot_rows))

        return Table(alignments=alignments, children=sections)

    def _process_table_cell(self, token: dict[str, Any]) -> TableCell:
        return TableCell(children=self._process_inline_tokens(token.get("children", [])))

    @staticmethod
    def _is_footer_separator(row_token: dict[str, Any]) -> bool:
        cells = row_token.get("children", [])
        if not cells:
            return False
        for cell in cells:
            text = "".join(child.get("raw", "") for child in cell.get("children", []))
            if not _FOOTER_SEPARATOR_RE.match(text.strip()):
                return False
        return True

    def _process_definition_list(self, token: dict[str, Any]) -> DescriptionList:
        """Process definition list token.

        Every ``def_list_head`` line becomes a term and every item that
        follows it a details node.
        """
        children: list[Node] = []
        for child in token.get("children", []):
            child_type = child.get("type", "")
            if child_type == "def_list_head":
                children.append(DescriptionTerm(children=self._process_inline_tokens(child.get("children", []))))
            elif child_type in ("def_list_item", "def_list_content"):
                children.append(DescriptionDetails(children=self._process_tokens(child.get("children", []))))
        return DescriptionList(children=children)

    # ------------------------------------------------------------------
    # HTML
    # ------------------------------------------------------------------

    def _process_html_block(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process HTML block token.

        Parameters
        ----------
        token : dict
            HTML block token with 'raw'

        Returns
        -------
        Node, list of Node, or None
            A block Comment, or the element nodes of the parsed HTML

        """
        content = token.get("raw", "")

        if self._is_html_comment(content):
            return Comment(value=self._extract_comment_text(content), block=True)

        soup = BeautifulSoup(content, "html.parser")
        nodes: list[Node] = []
        for element in soup.contents:
            nodes.extend(self._convert_html(element, block=True))
        return self._wrap_inline_runs(nodes)

    def _convert_html(self, element: Any, block: bool) -> list[Node]:
        """Convert a BeautifulSoup element to nodes."""
        if isinstance(element, HTMLComment):
            return [Comment(value=str(element).strip(), block=block)]
        if isinstance(element, NavigableString):
            text = _WHITESPACE_RE.sub(" ", str(element))
            return [Text(value=text)] if text.strip() or not block else []
        if not isinstance(element, Tag):
            return []

        tag = element.name.lower()
        if tag in RAW_HTML_ELEMENTS:
            return [RawHTML(value=str(element))]

        is_block = tag not in INLINE_HTML_ELEMENTS
        children: list[Node] = []
        for child in element.children:
            children.extend(self._convert_html(child, block=is_block and isinstance(child, Tag)))
        if is_block:
            children = self._wrap_inline_runs(children)
        return [HTMLElement(tag=tag, attrs=self._html_attrs(element), children=children, block=is_block)]

    @staticmethod
    def _html_attrs(element: Tag) -> dict[str, str]:
        return {
            name: " ".join(value) if isinstance(value, list) else str(value) for name, value in element.attrs.items()
        }

    @staticmethod
    def _is_inline(node: Node) -> bool:
        if isinstance(node, HTMLElement):
            return not node.block
        if isinstance(node, Comment):
            return not node.block
        return isinstance(node, Text)

    def _wrap_inline_runs(self, nodes: list[Node]) -> list[Node]:
        """Group consecutive inline nodes of a block container into paragraphs."""
        result: list[Node] = []
        run: list[Node] = []

        def flush() -> None:
            if run and not all(isinstance(node, Text) and not node.value.strip() for node in run):
                if isinstance(run[0], Text):
                    run[0] = Text(value=run[0].value.lstrip())
                if isinstance(run[-1], Text):
                    run[-1] = Text(value=run[-1].value.rstrip())
                result.append(Paragraph(children=list(run)))
            run.clear()

        for node in nodes:
            if self._is_inline(node):
                run.append(node)
            else:
                flush()
                result.append(node)
        flush()
        return result

    def _parse_inline_tag(self, raw: str) -> tuple[Optional[str], dict[str, str], bool, bool]:
        """Return the tag name, attributes, closing and self-closing flags of a tag."""
        match = _TAG_RE.match(raw.strip())
        if not match:
            return None, {}, False, False
        closing, name, self_closing = match.group(1) == "/", match.group(2).lower(), match.group(3) == "/"
        attrs: dict[str, str] = {}
        if not closing:
            element = BeautifulSoup(raw, "html.parser").find(name)
            if isinstance(element, Tag):
                attrs = self._html_attrs(element)
        return name, attrs, closing, self_closing

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Opening and closing inline HTML tags are paired into elements that
        own the tokens between them. Text goes through the typographic pass,
        which tracks the previous character to pick opening or closing
        quotes.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline nodes

        """
        nodes: list[Node] = []
        open_elements: list[HTMLElement] = []
        previous = ""

        for token in tokens:
            target = open_elements[-1].children if open_elements else nodes
            token_type = token.get("type", "")

            if token_type == "text":
                text_nodes, previous = self._typographic_nodes(token.get("raw", ""), previous)
                target.extend(text_nodes)
                continue

            if token_type == "inline_html" and not self._is_html_comment(token.get("raw", "")):
                raw = token.get("raw", "")
                name, attrs, closing, self_closing = self._parse_inline_tag(raw)
                if name is None:
                    target.append(Text(value=raw))
                elif closing:
                    if any(element.tag == name for element in open_elements):
                        while open_elements.pop().tag != name:
                            pass
                    else:
                        logger.debug("Dropping unmatched closing tag %r", raw)
                else:
                    element = HTMLElement(tag=name, attrs=attrs)
                    target.append(element)
                    if not self_closing and name not in VOID_HTML_ELEMENTS:
                        open_elements.append(element)
                continue

            node = self._process_inline_token(token)
            if isinstance(node, list):
                target.extend(node)
            elif node is not None:
                target.append(node)
            previous = " " if token_type in ("softbreak", "linebreak") else "a"

        return nodes

    def _typographic_nodes(self, text: str, previous: str) -> tuple[list[Node], str]:
        """Split text into Text, Entity, SmartQuote and TypographicSymbol nodes.

        Parameters
        ----------
        text : str
            Raw text of one token
        previous : str
            The character before ``text``, empty at the start of a block

        Returns
        -------
        tuple of (list of Node, str)
            The nodes and the last character of ``text``

        """
        nodes: list[Node] = []
        pattern = _TYPOGRAPHY_RE if self.options.typographer else _ENTITY_RE
        position = 0

        for match in pattern.finditer(text):
            if match.start() > position:
                nodes.append(Text(value=text[position : match.start()]))
            token = match.group(0)
            before = text[match.start() - 1] if match.start() > 0 else previous
            if token.startswith("&"):
                nodes.append(self._entity_node(token))
            elif token in ('"', "'"):
                after = text[match.end()] if match.end() < len(text) else ""
                nodes.append(SmartQuote(kind=self._quote_kind(token, before, after)))
            else:
                nodes.append(TypographicSymbol(name=_TYPOGRAPHIC_NAMES[token]))
            position = match.end()

        if position < len(text):
            nodes.append(Text(value=text[position:]))
        return nodes, (text[-1] if text else previous)

    @staticmethod
    def _quote_kind(quote: str, before: str, after: str) -> SmartQuoteKind:
        """Pick the curly quote for a straight quote from its neighbours."""
        opening = (not before or before.isspace() or before in _OPENING_CONTEXT) and not after.isspace()
        if quote == '"':
            return "ldquo" if opening else "rdquo"
        return "lsquo" if opening else "rsquo"

    @staticmethod
    def _entity_node(reference: str) -> Node:
        value = html.unescape(reference)
        if len(value) == 1:
            return Entity(codepoint=ord(value))
        return Text(value=value)

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Delete:
        return Delete(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> CodeSpan:
        return CodeSpan(value=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = token.get("attrs", {})
        return Link(
            href=attrs.get("url", ""),
            title=attrs.get("title"),
            children=self._process_inline_tokens(token.get("children", [])),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token.

        The alt text is the plain text of the image's children.
        """
        attrs = token.get("attrs", {})
        return Image(src=attrs.get("url", ""), alt=_plain_text(token.get("children", [])), title=attrs.get("title"))

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak()

    def _handle_softbreak_token(self, token: dict[str, Any]) -> Text:
        return Text(value="\n")

    def _handle_inline_html_token(self, token: dict[str, Any]) -> Node | None:
        """Handle an inline HTML comment."""
        content = token.get("raw", "")
        if self._is_html_comment(content):
            return Comment(value=self._extract_comment_text(content), block=False)
        return Text(value=content)

    def _handle_inline_math_token(self, token: dict[str, Any]) -> Math:
        # Display math inside a paragraph stays inline
        return Math(value=token.get("raw", ""), block=False)

    def _handle_abbr_token(self, token: dict[str, Any]) -> Abbreviation:
        title = token.get("attrs", {}).get("title")
        return Abbreviation(value=_plain_text(token.get("children", [])), title=title or None)

    def _handle_footnote_ref_token(self, token: dict[str, Any]) -> Footnote:
        """Handle footnote_ref token, attaching the definition body."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        key = token.get("raw") or attrs.get("label", "")
        return Footnote(name=key, children=self._footnote_body(key))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node, list of Node, or None
            Inline node(s)

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
            "inline_math": self._handle_inline_math_token,
            "block_math": self._handle_inline_math_token,
            "abbr": self._handle_abbr_token,
            "footnote_ref": self._handle_footnote_ref_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug("Skipping unsupported inline token %r", token_type)
        return None

    def _is_html_comment(self, content: str) -> bool:
        """Check if HTML content is a comment.

        Parameters
        ----------
        content : str
            HTML content to check

        Returns
        -------
        bool
            True if content is an HTML comment

        """
        stripped = content.strip()
        return stripped.startswith("<!--") and stripped.endswith("-->")

    def _extract_comment_text(self, content: str) -> str:
        """Extract text from HTML comment.

        Parameters
        ----------
        content : str
            HTML comment content (including <!-- and -->)

        Returns
        -------
        str
            Comment text without HTML comment markers

        """
        stripped = content.strip()
        if stripped.startswith("<!--") and stripped.endswith("-->"):
            return stripped[4:-3].strip()
        return content


def _plain_text(tokens: list[dict[str, Any]]) -> str:
    """Concatenate the raw text of a token subtree."""
    parts = []
    for token in tokens:
        if "children" in token:
            parts.append(_plain_text(token["children"]))
        else:
            parts.append(token.get("raw", ""))
    return "".join(parts)


def markdown_to_tree(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    """Convert Markdown string to a document tree.

    Parameters
    ----------
    markdown_content : str
        Markdown text
    options : MarkdownParserOptions or None, default = None
        Parser options

    Returns
    -------
    Document
        Document tree

    """
    return MarkdownToTreeConverter(options).parse(markdown_content)
