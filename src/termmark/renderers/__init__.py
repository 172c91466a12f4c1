#  Copyright (c) 2026 termmark contributors
#
# src/termmark/renderers/__init__.py
"""Renderers converting termmark document trees to output text."""

from termmark.renderers.base import BaseRenderer, InlineContentMixin
from termmark.renderers.context import RenderContext
from termmark.renderers.terminal import TerminalRenderer

__all__ = ["BaseRenderer", "InlineContentMixin", "RenderContext", "TerminalRenderer"]
