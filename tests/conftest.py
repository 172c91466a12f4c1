"""Pytest configuration and shared fixtures for the termmark test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from typing import Callable

import pytest
from hypothesis import Phase, Verbosity, settings

from termmark.ast import Document
from termmark.options import TerminalRendererOptions
from termmark.parsers.markdown import MarkdownToTreeConverter
from termmark.renderers.terminal import TerminalRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=30, deadline=None)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "property: Property-based tests generated with hypothesis")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def _isolate_color_environment(monkeypatch):
    """Keep terminal environment variables from leaking into color detection."""
    for name in ("NO_COLOR", "FORCE_COLOR", "TTY_COMPATIBLE", "COLUMNS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def plain_options() -> TerminalRendererOptions:
    """Renderer options producing uncolored unicode output 80 columns wide."""
    return TerminalRendererOptions(width=80, color="never", mode=16)


@pytest.fixture
def color_options() -> TerminalRendererOptions:
    """Renderer options producing 16-color output 80 columns wide."""
    return TerminalRendererOptions(width=80, color="always", mode=16)


@pytest.fixture
def render_tree() -> Callable[..., str]:
    """Render a document tree with the given option overrides.

    Returns
    -------
    Callable
        ``render_tree(document, **options)`` returning the rendered text.
        Options default to uncolored output 80 columns wide.

    """

    def _render(document: Document, **options) -> str:
        settings_ = {"width": 80, "color": "never", "mode": 16}
        settings_.update(options)
        return TerminalRenderer(TerminalRendererOptions(**settings_)).render_to_string(document)

    return _render


@pytest.fixture
def render_markdown(render_tree) -> Callable[..., str]:
    """Parse Markdown and render it, see :func:`render_tree`."""

    def _render(text: str, **options) -> str:
        return render_tree(MarkdownToTreeConverter().parse(text), **options)

    return _render
