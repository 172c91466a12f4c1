#  Copyright (c) 2026 termmark contributors
#
# tests/unit/config/test_terminal_options.py
"""Unit tests for renderer and parser options."""

import dataclasses

import pytest

from termmark.constants import MARKDOWN_PLUGINS
from termmark.exceptions import ValidationError
from termmark.options import MarkdownParserOptions, TerminalRendererOptions


@pytest.mark.unit
class TestTerminalRendererOptions:
    """Tests for TerminalRendererOptions validation."""

    def test_defaults(self) -> None:
        options = TerminalRendererOptions()

        assert options.width is None
        assert options.indent == 2
        assert options.color == "auto"
        assert options.mode is None
        assert options.symbols == "unicode"
        assert options.theme == {}

    def test_frozen(self) -> None:
        options = TerminalRendererOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.width = 10  # type: ignore[misc]

    def test_create_updated(self) -> None:
        options = TerminalRendererOptions(width=80, color="never")
        updated = options.create_updated(width=40)

        assert updated.width == 40
        assert updated.color == "never"
        assert options.width == 80

    @pytest.mark.parametrize("width", [0, -5, "80", 1.5])
    def test_invalid_width(self, width) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TerminalRendererOptions(width=width)
        assert exc_info.value.parameter_name == "width"

    @pytest.mark.parametrize("indent", [0, -1])
    def test_invalid_indent(self, indent) -> None:
        with pytest.raises(ValidationError, match="indent must be a positive integer"):
            TerminalRendererOptions(indent=indent)

    def test_invalid_mode(self) -> None:
        with pytest.raises(ValidationError, match="mode"):
            TerminalRendererOptions(mode=0)

    def test_invalid_color(self) -> None:
        with pytest.raises(ValidationError, match="invalid color"):
            TerminalRendererOptions(color="rainbow")  # type: ignore[arg-type]

    def test_invalid_symbols_validated_eagerly(self) -> None:
        with pytest.raises(ValidationError, match="invalid symbol name: 'sparkle'"):
            TerminalRendererOptions(symbols={"base": "ascii", "override": {"sparkle": "*"}})

    def test_invalid_theme_validated_eagerly(self) -> None:
        with pytest.raises(ValidationError, match="invalid theme element name"):
            TerminalRendererOptions(theme={"banner": "red"})

    def test_field_metadata_has_help(self) -> None:
        """Test that every field documents itself for the command line."""
        for field in dataclasses.fields(TerminalRendererOptions):
            assert field.metadata.get("help"), field.name


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Tests for MarkdownParserOptions."""

    def test_all_plugins_enabled_by_default(self) -> None:
        assert MarkdownParserOptions().plugins() == list(MARKDOWN_PLUGINS)

    def test_disabled_plugins_are_left_out(self) -> None:
        options = MarkdownParserOptions(parse_tables=False, parse_math=False)
        plugins = options.plugins()

        assert "table" not in plugins
        assert "math" not in plugins
        assert "footnotes" in plugins
