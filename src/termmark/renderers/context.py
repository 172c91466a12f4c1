#  Copyright (c) 2026 termmark contributors
#
# src/termmark/renderers/context.py
"""Mutable state carried through one conversion of a document tree.

A :class:`RenderContext` is created for every top-level conversion and
discarded afterwards. Indentation, blockquote margins and list bullet
hanging widths are only ever changed through :meth:`RenderContext.scoped`,
which restores the previous values once the nested subtree is done.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Optional

from termmark.ast.nodes import Node
from termmark.renderers.table_layout import TableLayout

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """Position of the node being converted among its siblings.

    Parameters
    ----------
    parent : Node or None
        The node whose children are being converted
    index : int
        Index of the current node among the siblings
    previous : Node or None
        The preceding sibling
    next : Node or None
        The following sibling

    """

    parent: Optional[Node] = None
    index: int = 0
    previous: Optional[Node] = None
    next: Optional[Node] = None


@dataclass
class TableCursor:
    """Row and column of the table cell being converted."""

    row: int = 0
    column: int = 0


@dataclass
class FootnoteEntry:
    """A registered footnote with its number and a copy of its body."""

    name: str
    number: int
    children: list[Node] = field(default_factory=list)


class FootnoteRegistry:
    """Insertion-ordered footnote store.

    The first reference to a name assigns the next number; later references
    to the same name get the number assigned first.

    Examples
    --------
        >>> registry = FootnoteRegistry()
        >>> registry.register("a", [])
        1
        >>> registry.register("b", [])
        2
        >>> registry.register("a", [])
        1

    """

    def __init__(self) -> None:
        """Create an empty registry."""
        self._entries: dict[str, FootnoteEntry] = {}
        self._counter = 0

    def register(self, name: str, children: list[Node]) -> int:
        """Return the number of footnote ``name``, registering it if new."""
        entry = self._entries.get(name)
        if entry is None:
            self._counter += 1
            entry = FootnoteEntry(name=name, number=self._counter, children=copy.deepcopy(children))
            self._entries[name] = entry
            logger.debug("Registered footnote %r as number %d", name, entry.number)
        return entry.number

    def entries(self, start: int = 0) -> list[FootnoteEntry]:
        """Return the entries in first-seen order, skipping the first ``start``."""
        return list(self._entries.values())[start:]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[FootnoteEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class RenderContext:
    """State of one conversion.

    Parameters
    ----------
    indent : int, default 0
        Current indentation in columns
    margin : int, default 0
        Columns taken by enclosing blockquote prefixes
    hanging : int, default 0
        Columns already used on the current line by a list bullet. The next
        block to start a line continues after the bullet instead of
        indenting.
    table_cursor : TableCursor or None
        Current cell, only while inside a table
    table_layout : TableLayout or None
        Layout of the enclosing table, only while inside a table
    footnotes : FootnoteRegistry
        Footnotes referenced so far
    frames : list of Frame
        Sibling frames from the root down to the current node
    warnings : list of str
        Messages about content that could not be rendered

    """

    indent: int = 0
    margin: int = 0
    hanging: int = 0
    table_cursor: Optional[TableCursor] = None
    table_layout: Optional[TableLayout] = None
    footnotes: FootnoteRegistry = field(default_factory=FootnoteRegistry)
    frames: list[Frame] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def frame(self) -> Frame:
        """Return the frame of the node being converted."""
        return self.frames[-1] if self.frames else Frame()

    @property
    def parent(self) -> Optional[Node]:
        return self.frame.parent

    @contextmanager
    def scoped(self, **changes: Any) -> Iterator[RenderContext]:
        """Temporarily change context fields for a nested subtree.

        Parameters
        ----------
        **changes : Any
            Field names and their values while the block runs

        Raises
        ------
        AttributeError
            If a name is not a context field.

        Examples
        --------
            >>> context = RenderContext(indent=2)
            >>> with context.scoped(indent=4):
            ...     context.indent
            4
            >>> context.indent
            2

        """
        for name in changes:
            if not hasattr(self, name):
                raise AttributeError(f"RenderContext has no field {name!r}")
        saved = {name: getattr(self, name) for name in changes}
        for name, value in changes.items():
            setattr(self, name, value)
        try:
            yield self
        finally:
            for name, value in saved.items():
                setattr(self, name, value)

    @contextmanager
    def visiting(self, parent: Node, siblings: list[Node], index: int) -> Iterator[Frame]:
        """Push the sibling frame of ``siblings[index]`` while it is converted."""
        frame = Frame(
            parent=parent,
            index=index,
            previous=siblings[index - 1] if index > 0 else None,
            next=siblings[index + 1] if index + 1 < len(siblings) else None,
        )
        self.frames.append(frame)
        try:
            yield frame
        finally:
            self.frames.pop()

    def consume_hanging(self) -> int:
        """Return the pending bullet width and clear it."""
        hanging, self.hanging = self.hanging, 0
        return hanging

    def warn(self, message: str) -> None:
        """Log a rendering warning and keep it with the context."""
        logger.warning(message)
        self.warnings.append(message)
