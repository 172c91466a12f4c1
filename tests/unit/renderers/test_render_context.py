#  Copyright (c) 2026 termmark contributors
#
# tests/unit/renderers/test_render_context.py
"""Unit tests for the per-conversion render context."""

import pytest

from termmark.ast import Paragraph, Text
from termmark.renderers.context import FootnoteRegistry, RenderContext


@pytest.mark.unit
class TestScoped:
    """Tests for scoped context changes."""

    def test_values_are_restored(self) -> None:
        context = RenderContext(indent=2, margin=3)
        with context.scoped(indent=6, margin=0):
            assert context.indent == 6
            assert context.margin == 0
        assert context.indent == 2
        assert context.margin == 3

    def test_values_are_restored_after_error(self) -> None:
        context = RenderContext(indent=2)
        with pytest.raises(RuntimeError):
            with context.scoped(indent=8):
                raise RuntimeError("boom")
        assert context.indent == 2

    def test_unknown_field(self) -> None:
        with pytest.raises(AttributeError, match="no field 'depth'"):
            with RenderContext().scoped(depth=1):
                pass

    def test_consume_hanging(self) -> None:
        context = RenderContext(hanging=2)

        assert context.consume_hanging() == 2
        assert context.consume_hanging() == 0


@pytest.mark.unit
class TestVisiting:
    """Tests for sibling frames."""

    def test_frame_neighbours(self) -> None:
        parent = Paragraph()
        siblings = [Text(value="a"), Text(value="b"), Text(value="c")]
        context = RenderContext()

        with context.visiting(parent, siblings, 1) as frame:
            assert context.frame is frame
            assert context.parent is parent
            assert frame.previous is siblings[0]
            assert frame.next is siblings[2]
        assert context.frames == []

    def test_edges_have_no_neighbours(self) -> None:
        siblings = [Text(value="a")]
        with RenderContext().visiting(Paragraph(), siblings, 0) as frame:
            assert frame.previous is None
            assert frame.next is None

    def test_default_frame(self) -> None:
        assert RenderContext().parent is None


@pytest.mark.unit
class TestFootnoteRegistry:
    """Tests for FootnoteRegistry."""

    def test_numbers_follow_first_appearance(self) -> None:
        registry = FootnoteRegistry()

        assert registry.register("b", []) == 1
        assert registry.register("a", []) == 2
        assert registry.register("b", []) == 1
        assert [entry.name for entry in registry] == ["b", "a"]
        assert len(registry) == 2
        assert "a" in registry

    def test_bodies_are_copied(self) -> None:
        body = [Paragraph(children=[Text(value="note")])]
        registry = FootnoteRegistry()
        registry.register("n", body)

        body[0].children.append(Text(value=" changed"))
        entry = registry.entries()[0]

        assert len(entry.children[0].children) == 1  # type: ignore[attr-defined]

    def test_entries_from_offset(self) -> None:
        registry = FootnoteRegistry()
        for name in "xyz":
            registry.register(name, [])

        assert [entry.number for entry in registry.entries(1)] == [2, 3]


@pytest.mark.unit
class TestWarnings:
    """Tests for warning collection."""

    def test_warn_logs_and_collects(self, caplog) -> None:
        context = RenderContext()
        with caplog.at_level("WARNING", logger="termmark.renderers.context"):
            context.warn("unsupported")

        assert context.warnings == ["unsupported"]
        assert "unsupported" in caplog.text
