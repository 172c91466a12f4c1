#  Copyright (c) 2026 termmark contributors
#
# tests/unit/renderers/test_terminal_renderer.py
"""Unit tests for the terminal renderer.

Tests cover:
- Paragraph wrapping and heading section indentation
- Lists, description lists, blockquotes and code blocks
- Table borders for every combination of sections
- Links, images, footnotes and comments
- Embedded HTML elements and raw content warnings
- Colored output

"""

import io

import pytest

from termmark.ast import (
    Blank,
    CodeSpan,
    DescriptionDetails,
    DescriptionList,
    DescriptionTerm,
    Document,
    Footnote,
    HTMLElement,
    Link,
    Paragraph,
    RawHTML,
    Table,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
    TypographicSymbol,
)
from termmark.exceptions import RenderingError, ValidationError
from termmark.options import TerminalRendererOptions
from termmark.renderers.terminal import TerminalRenderer
from termmark.utils.text import strip_ansi

YELLOW = "\x1b[33m"
STRONG = "\x1b[1;33m"
HEADER = "\x1b[1;36m"
LINK = "\x1b[4;33m"
RESET = "\x1b[0m"


def _paragraph(text: str) -> Paragraph:
    return Paragraph(children=[Text(value=text)])


def _row(*values: str) -> TableRow:
    return TableRow(children=[TableCell(children=[Text(value=value)]) for value in values])


@pytest.mark.unit
class TestTerminalRendererBasics:
    """Tests for renderer construction and entry points."""

    def test_invalid_options_type(self) -> None:
        with pytest.raises(ValidationError):
            TerminalRenderer(options="wide")  # type: ignore[arg-type]

    def test_explicit_settings_are_used(self) -> None:
        renderer = TerminalRenderer(TerminalRendererOptions(width=42, mode=256, color="never"))

        assert renderer.width == 42
        assert renderer.mode == 256
        assert renderer.decorator.enabled is False

    def test_empty_document(self, render_tree) -> None:
        assert render_tree(Document()) == ""

    def test_render_to_stream(self, plain_options) -> None:
        stream = io.StringIO()
        TerminalRenderer(plain_options).render(Document(children=[_paragraph("hello")]), stream)

        assert stream.getvalue() == "hello\n"

    def test_renderer_is_reusable(self, plain_options) -> None:
        """Test that footnote numbering starts over for each document."""
        renderer = TerminalRenderer(plain_options)
        doc = Document(children=[Paragraph(children=[Footnote(name="n", children=[_paragraph("note")])])])

        first = renderer.render_to_string(doc)
        second = renderer.render_to_string(doc)

        assert first == second == "[1]\n\n1. note\n"


@pytest.mark.unit
class TestParagraphsAndHeadings:
    """Tests for flowing text and heading sections."""

    def test_paragraph_wraps_to_width(self, render_markdown) -> None:
        assert render_markdown("aaa bbb ccc ddd eee fff", width=20) == "aaa bbb ccc ddd eee\nfff\n"

    def test_heading_indents_following_content(self, render_markdown) -> None:
        assert render_markdown("### H\n\np") == "    H\n\n    p\n"

    def test_level_one_heading_resets_indentation(self, render_markdown) -> None:
        result = render_markdown("## A\n\ntext\n\n# B\n\ntext")
        assert result == "  A\n\n  text\n\nB\n\ntext\n"

    def test_indent_unit_is_configurable(self, render_markdown) -> None:
        assert render_markdown("### H\n\np", indent=3) == "      H\n\n      p\n"

    def test_long_heading_wraps_inside_its_section(self, render_markdown) -> None:
        assert render_markdown("### Header3", width=20) == "    Header3\n"
        assert render_markdown("## one two three", width=10) == "  one two\n  three\n"

    def test_heading_styles(self, render_markdown) -> None:
        result = render_markdown("## Title", color="always")
        assert result == f"  {HEADER}Title{RESET}\n"

    def test_level_one_heading_is_underlined(self, render_markdown) -> None:
        result = render_markdown("# Title", color="always")
        assert result == "\x1b[1;4;36mTitle\x1b[0m\n"

    def test_line_breaks(self, render_markdown) -> None:
        assert render_markdown("a  \nb") == "a\nb\n"
        assert render_markdown("a\nb") == "a\nb\n"

    def test_blank_nodes_render_empty_lines(self, render_tree) -> None:
        doc = Document(children=[_paragraph("a"), Blank(), Blank(), _paragraph("b")])
        assert render_tree(doc) == "a\n\n\nb\n"


@pytest.mark.unit
class TestLists:
    """Tests for ordered, unordered and description lists."""

    def test_nested_bullets(self, render_markdown) -> None:
        assert render_markdown("- Item 1\n  - Item 2") == "● Item 1\n  ● Item 2\n"

    def test_ascii_bullets(self, render_markdown) -> None:
        assert render_markdown("- a\n- b", symbols="ascii") == "* a\n* b\n"

    def test_ordered_list_numbers(self, render_markdown) -> None:
        assert render_markdown("1. one\n2. two") == "1. one\n2. two\n"

    def test_ordered_list_start(self, render_markdown) -> None:
        assert render_markdown("3. a\n4. b") == "3. a\n4. b\n"

    def test_wrapped_item_continues_at_list_indent(self, render_markdown) -> None:
        assert render_markdown("- aaa bbb ccc ddd", width=12) == "● aaa bbb\nccc ddd\n"

    def test_multiline_items_in_heading_section(self, render_markdown) -> None:
        source = "### header\n\n- First multiline\n  Item 1\n  - Second multiline\n    Item 2"
        expected = "    header\n\n    ● First multiline\n    Item 1\n      ● Second multiline\n      Item 2\n"

        assert render_markdown(source) == expected

    def test_list_in_heading_section(self, render_markdown) -> None:
        assert render_markdown("## S\n\n- a") == "  S\n\n  ● a\n"

    def test_marker_is_decorated(self, render_markdown) -> None:
        assert render_markdown("- a", color="always") == f"{YELLOW}●{RESET} a\n"

    def test_description_list(self, render_tree) -> None:
        doc = Document(
            children=[
                DescriptionList(
                    children=[
                        DescriptionTerm(children=[Text(value="A")]),
                        DescriptionDetails(children=[_paragraph("a")]),
                        DescriptionTerm(children=[Text(value="B")]),
                        DescriptionDetails(children=[_paragraph("b")]),
                    ]
                )
            ]
        )
        assert render_tree(doc) == "A\n  a\n\nB\n  b\n"

    def test_description_list_from_markdown(self, render_markdown) -> None:
        assert render_markdown("Term\n: Details") == "Term\n  Details\n"


@pytest.mark.unit
class TestBlocks:
    """Tests for blockquotes, code blocks and rules."""

    def test_blockquote(self, render_markdown) -> None:
        assert render_markdown("> quoted") == "┃  quoted\n"

    def test_ascii_blockquote(self, render_markdown) -> None:
        assert render_markdown("> quoted", symbols="ascii") == "|  quoted\n"

    def test_blockquote_in_heading_section(self, render_markdown) -> None:
        assert render_markdown("## S\n\n> q") == "  S\n\n  ┃  q\n"

    def test_blockquote_wraps_inside_bar(self, render_markdown) -> None:
        assert render_markdown("> aaa bbb ccc", width=10) == "┃  aaa bbb\n┃  ccc\n"

    def test_code_block(self, render_markdown) -> None:
        assert render_markdown("```\ncode line\n```") == "code line\n"

    def test_code_block_in_heading_section(self, render_markdown) -> None:
        assert render_markdown("## S\n\n```\nx\n```") == "  S\n\n  x\n"

    def test_code_block_is_highlighted(self, render_markdown) -> None:
        result = render_markdown("```python\nx = 1\n```", color="always")
        assert result == f"{YELLOW}x = 1{RESET}\n"

    def test_code_span(self, render_markdown) -> None:
        assert render_markdown("use `x` here") == "use x here\n"
        assert render_markdown("use `x` here", color="always") == f"use {YELLOW}x{RESET} here\n"

    def test_code_span_language(self, render_tree) -> None:
        doc = Document(children=[Paragraph(children=[CodeSpan(value="x = 1", language="python")])])
        assert render_tree(doc) == "x = 1\n"

    def test_thematic_break_fills_width(self, render_markdown) -> None:
        assert render_markdown("---", width=10) == "◈────────◈\n"
        assert render_markdown("---", width=10, symbols="ascii") == "*--------*\n"

    def test_thematic_break_at_full_width(self, render_markdown) -> None:
        assert render_markdown("***") == "◈" + "─" * 78 + "◈\n"

    def test_block_math(self, render_markdown) -> None:
        assert render_markdown("$$\nx^2\n$$") == "x^2\n"


@pytest.mark.unit
class TestTables:
    """Tests for table layout and borders."""

    def test_ascii_table(self, render_markdown) -> None:
        result = render_markdown("|a|b|\n|-|-|\n|1|2|", symbols="ascii")
        assert result == "+---+---+\n| a | b | \n+---+---+\n| 1 | 2 | \n+---+---+\n"

    def test_unicode_table(self, render_markdown) -> None:
        result = render_markdown("|a|b|\n|-|-|\n|1|2|")
        assert result == "┌───┬───┐\n│ a │ b │ \n├───┼───┤\n│ 1 │ 2 │ \n└───┴───┘\n"

    def test_rows_are_separated(self, render_markdown) -> None:
        result = render_markdown("|a|\n|-|\n|1|\n|2|", symbols="ascii")
        assert result == "+---+\n| a | \n+---+\n| 1 | \n+---+\n| 2 | \n+---+\n"

    def test_footer_rows(self, render_markdown) -> None:
        result = render_markdown("|a|b|\n|-|-|\n|1|2|\n|===|===|\n|3|4|", symbols="ascii")
        expected = "+---+---+\n| a | b | \n+---+---+\n| 1 | 2 | \n+---+---+\n| 3 | 4 | \n+---+---+\n"
        assert result == expected

    def test_alignment(self, render_markdown) -> None:
        result = render_markdown("|a|b|\n|:-:|--:|\n|xyz|1|", symbols="ascii")
        assert result == "+-----+---+\n|  a  | b | \n+-----+---+\n| xyz | 1 | \n+-----+---+\n"

    def test_head_only_table(self, render_tree) -> None:
        doc = Document(children=[Table(children=[TableHead(children=[_row("a")])])])
        assert render_tree(doc, symbols="ascii") == "+---+\n| a | \n+---+\n"

    def test_body_only_table(self, render_tree) -> None:
        doc = Document(children=[Table(children=[TableBody(children=[_row("a")])])])
        assert render_tree(doc, symbols="ascii") == "+---+\n| a | \n+---+\n"

    def test_narrow_table_breaks_cells(self, render_markdown) -> None:
        """Test that cells wider than their column wrap onto extra lines."""
        result = render_markdown("### H\n\n|foo|bar|baz|\n|-|-|-|", width=20, symbols="ascii")
        lines = result.splitlines()

        assert lines[2] == "    +----+----+----+"
        assert lines[3] == "    | fo | ba | ba | "
        assert lines[4] == "    | o  | r  | z  | "

    def test_ragged_table_raises(self, render_tree) -> None:
        doc = Document(children=[Table(children=[TableBody(children=[_row("a", "b"), _row("c")])])])
        with pytest.raises(RenderingError, match="same number of cells"):
            render_tree(doc)

    def test_borders_are_decorated(self, render_markdown) -> None:
        result = render_markdown("|a|\n|-|\n|1|", symbols="ascii", color="always")
        assert result.startswith(f"{YELLOW}+---+{RESET}\n{YELLOW}|{RESET} a {YELLOW}|{RESET} \n")


@pytest.mark.unit
class TestLinksAndImages:
    """Tests for link and image rendering."""

    def test_link_with_title(self, render_markdown) -> None:
        assert render_markdown('[label](http://x "T")') == "label » (T) http://x\n"

    def test_ascii_arrow(self, render_markdown) -> None:
        assert render_markdown('[label](http://x "T")', symbols="ascii") == "label -> (T) http://x\n"

    def test_link_without_title(self, render_markdown) -> None:
        assert render_markdown("[label](http://x)") == "label » http://x\n"

    def test_label_equal_to_target(self, render_markdown) -> None:
        assert render_markdown("<http://x>") == "http://x\n"

    def test_mailto_prefix_is_removed(self, render_markdown) -> None:
        assert render_markdown("<me@x.org>") == "me@x.org\n"
        assert render_markdown("[mail](mailto:me@x.org)") == "mail » me@x.org\n"

    def test_empty_label_drops_link(self, render_tree) -> None:
        doc = Document(children=[Paragraph(children=[Text(value="a "), Link(href="http://x"), Text(value="b")])])
        assert render_tree(doc) == "a b\n"

    def test_link_without_href_raises(self, render_tree) -> None:
        doc = Document(children=[Paragraph(children=[Link(href=None, children=[Text(value="x")])])])
        with pytest.raises(RenderingError, match="href"):
            render_tree(doc)

    def test_link_target_is_decorated(self, render_markdown) -> None:
        result = render_markdown("[label](http://x)", color="always")
        assert result == f"label » {LINK}http://x{RESET}\n"

    def test_image(self, render_markdown) -> None:
        assert render_markdown("![alt](img.png)") == "(alt - img.png)\n"

    def test_image_without_alt(self, render_markdown) -> None:
        assert render_markdown("![](img.png)") == "(img.png)\n"


@pytest.mark.unit
class TestFootnotes:
    """Tests for footnote numbering and the trailing footnote list."""

    def test_footnote_list_follows_document(self, render_markdown) -> None:
        assert render_markdown("x[^f]\n\n[^f]: note") == "x[1]\n\n1. note\n"

    def test_repeated_reference_keeps_its_number(self, render_markdown) -> None:
        source = "a[^x] b[^y] c[^x]\n\n[^x]: X\n\n[^y]: Y"
        assert render_markdown(source) == "a[1] b[2] c[1]\n\n1. X\n2. Y\n"

    def test_footnote_inside_footnote(self, render_tree) -> None:
        inner = Footnote(name="b", children=[_paragraph("b")])
        outer = Footnote(name="a", children=[Paragraph(children=[Text(value="a"), inner])])
        doc = Document(children=[Paragraph(children=[Text(value="x"), outer])])

        assert render_tree(doc) == "x[1]\n\n1. a[2]\n2. b\n"

    def test_footnote_list_keeps_heading_indentation(self, render_markdown) -> None:
        result = render_markdown("### H\n\nx[^f]\n\n[^f]: note")
        assert result == "    H\n\n    x[1]\n\n    1. note\n"

    def test_footnote_list_uses_last_heading_section(self, render_markdown) -> None:
        result = render_markdown("### A\n\nx[^f]\n\n## B\n\ny\n\n[^f]: note")
        assert result.endswith("  y\n\n  1. note\n")

    def test_reference_is_decorated(self, render_markdown) -> None:
        result = render_markdown("x[^f]\n\n[^f]: note", color="always")
        assert result.startswith(f"x{YELLOW}[1]{RESET}\n")


@pytest.mark.unit
class TestInlineMarkup:
    """Tests for emphasis, typography and abbreviations."""

    @pytest.mark.parametrize(
        "source,style",
        [("*em*", YELLOW), ("**s**", STRONG), ("~~d~~", "\x1b[31m")],
    )
    def test_inline_styles(self, render_markdown, source, style) -> None:
        result = render_markdown(source, color="always")
        text = source.strip("*~")

        assert f"{style}{text}{RESET}" in result
        assert strip_ansi(result) == f"{text}\n"

    def test_no_escape_sequences_without_color(self, render_markdown) -> None:
        assert "\x1b" not in render_markdown("**s** *e* `c` [l](u)\n\n---\n\n> q")

    def test_smart_quotes(self, render_markdown) -> None:
        assert render_markdown('"quoted" it\'s') == "“quoted” it’s\n"

    def test_ascii_quotes(self, render_markdown) -> None:
        assert render_markdown('"quoted"', symbols="ascii") == '"quoted"\n'

    def test_dashes_and_ellipsis(self, render_markdown) -> None:
        assert render_markdown("a -- b --- c...") == "a - b — c…\n"

    def test_guillemets(self, render_markdown) -> None:
        assert render_markdown("a << b >> c") == "a « b » c\n"

    def test_entities(self, render_markdown) -> None:
        assert render_markdown("&copy; 2025") == "© 2025\n"

    def test_abbreviation(self, render_markdown) -> None:
        assert render_markdown("HTML rocks\n\n*[HTML]: Hyper Text") == "HTML(Hyper Text) rocks\n"

    def test_inline_math(self, render_markdown) -> None:
        assert render_markdown("so $x$ holds") == "so x holds\n"

    def test_unknown_symbol_raises(self, render_tree) -> None:
        doc = Document(children=[Paragraph(children=[TypographicSymbol(name="sparkle")])])
        with pytest.raises(RenderingError, match="sparkle"):
            render_tree(doc)


@pytest.mark.unit
class TestCommentsAndHTML:
    """Tests for comments and embedded HTML."""

    def test_block_comment(self, render_markdown) -> None:
        assert render_markdown("<!-- note -->") == "# note\n"

    def test_block_comment_is_decorated(self, render_markdown) -> None:
        assert render_markdown("<!-- note -->", color="always") == "\x1b[90m# note\x1b[0m\n"

    def test_inline_comment(self, render_markdown) -> None:
        assert render_markdown("a <!-- c --> b") == "a # c b\n"

    def test_multiline_inline_comment_in_heading_section(self, render_markdown) -> None:
        result = render_markdown("### H\n\ntext <!-- c1\nc2 --> after")
        assert result == "    H\n\n    text # c1\n    # c2 after\n"

    def test_inline_html_elements(self, render_markdown) -> None:
        assert render_markdown("<b>bold</b> text") == "bold text\n"
        assert render_markdown("<b>bold</b> text", color="always") == f"{STRONG}bold{RESET} text\n"

    def test_html_line_break(self, render_markdown) -> None:
        assert render_markdown("a<br>b") == "a\nb\n"

    def test_html_link(self, render_markdown) -> None:
        assert render_markdown('see <a href="http://x">site</a>') == "see site » http://x\n"

    def test_block_html(self, render_markdown) -> None:
        assert render_markdown("<div>hello</div>") == "hello\n"

    def test_raw_html_is_dropped_with_warning(self, plain_options) -> None:
        renderer = TerminalRenderer(plain_options)
        doc = Document(children=[RawHTML(value="<script>alert(1)</script>")])

        assert renderer.render_to_string(doc) == ""
        assert len(renderer.warnings) == 1
        assert "<script>" in renderer.warnings[0]

    def test_unsupported_element_warns(self, plain_options) -> None:
        renderer = TerminalRenderer(plain_options)
        doc = Document(children=[HTMLElement(tag="video", block=True)])

        assert renderer.render_to_string(doc) == ""
        assert renderer.warnings == ["HTML element 'video' not supported"]

    def test_warnings_are_reset(self, plain_options) -> None:
        renderer = TerminalRenderer(plain_options)
        renderer.render_to_string(Document(children=[RawHTML(value="<style></style>")]))
        renderer.render_to_string(Document(children=[_paragraph("clean")]))

        assert renderer.warnings == []
