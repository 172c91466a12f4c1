#  Copyright (c) 2026 termmark contributors
#
# src/termmark/parsers/__init__.py
"""Parsers building termmark document trees from source text."""

from termmark.parsers.markdown import MarkdownToTreeConverter, markdown_to_tree

__all__ = ["MarkdownToTreeConverter", "markdown_to_tree"]
