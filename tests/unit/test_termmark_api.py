#  Copyright (c) 2026 termmark contributors
#
# tests/unit/test_termmark_api.py
"""Unit tests for the public conversion functions."""

from importlib.metadata import metadata

import pytest

import termmark
from termmark import MarkdownParserOptions, TerminalRendererOptions, parse, parse_file, render
from termmark.ast import Document, Heading, Paragraph, Text
from termmark.exceptions import ParsingError, ValidationError


@pytest.mark.unit
class TestParse:
    """Tests for parse()."""

    def test_nested_bullets(self) -> None:
        assert parse("- Item 1\n  - Item 2", width=80, color="never") == "● Item 1\n  ● Item 2\n"

    def test_keywords_reach_the_renderer(self) -> None:
        assert parse("- a", width=80, color="never", symbols="ascii") == "* a\n"

    def test_keywords_reach_the_parser(self) -> None:
        assert parse('"a"', width=80, color="never", typographer=False) == '"a"\n'

    def test_keywords_override_option_objects(self) -> None:
        options = TerminalRendererOptions(width=80, color="never", symbols="ascii")
        assert parse("- a", renderer_options=options, symbols="unicode") == "● a\n"

    def test_option_objects(self) -> None:
        result = parse(
            '"a"',
            parser_options=MarkdownParserOptions(typographer=False),
            renderer_options=TerminalRendererOptions(width=80, color="never"),
        )
        assert result == '"a"\n'

    def test_unknown_option(self) -> None:
        with pytest.raises(ValidationError, match="Unknown option\\(s\\): colour"):
            parse("x", colour="never")

    def test_invalid_option_value(self) -> None:
        with pytest.raises(ValidationError, match="width"):
            parse("x", width=0)

    def test_string_is_never_a_path(self, tmp_path) -> None:
        path = tmp_path / "doc.md"
        path.write_text("# Not read", encoding="utf-8")

        assert parse(str(path), width=200, color="never") == f"{path}\n"


@pytest.mark.unit
class TestParseFile:
    """Tests for parse_file()."""

    def test_renders_file(self, tmp_path) -> None:
        path = tmp_path / "doc.md"
        path.write_text("## Title\n\nbody", encoding="utf-8")

        assert parse_file(path, width=80, color="never") == "  Title\n\n  body\n"

    def test_accepts_string_path(self, tmp_path) -> None:
        path = tmp_path / "doc.md"
        path.write_text("text", encoding="utf-8")

        assert parse_file(str(path), width=80, color="never") == "text\n"

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ParsingError, match="File not found"):
            parse_file(tmp_path / "missing.md", width=80, color="never")

    def test_directory_is_not_a_file(self, tmp_path) -> None:
        with pytest.raises(ParsingError, match="File not found"):
            parse_file(tmp_path)

    def test_invalid_utf8(self, tmp_path) -> None:
        path = tmp_path / "latin1.md"
        path.write_bytes("café".encode("latin-1"))

        with pytest.raises(ParsingError) as exc_info:
            parse_file(path, width=80, color="never")
        assert exc_info.value.parsing_stage == "decoding"


@pytest.mark.unit
class TestRender:
    """Tests for render()."""

    def test_renders_tree(self, plain_options) -> None:
        doc = Document(
            children=[Heading(level=3, children=[Text(value="H")]), Paragraph(children=[Text(value="p")])]
        )
        assert render(doc, plain_options) == "    H\n    p\n"

    def test_package_exports(self) -> None:
        assert termmark.__version__
        assert set(termmark.__all__) >= {"parse", "parse_file", "render"}

    def test_package_author(self) -> None:
        assert metadata("termmark")["Author"] == "termmark contributors"
