"""Test utilities for the md2tex test suite.

This module provides helpers for building document trees by hand and for
managing temporary directories.
"""

import shutil
import tempfile
from pathlib import Path

from md2tex.ast import Element, ElementKind, Node, Text


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def el(kind: ElementKind, *children: Node | str, **attributes: str) -> Element:
    """Build an element, wrapping plain strings in text leaves.

    Examples
    --------
    >>> el(ElementKind.LINK, "docs", href="https://example.com")

    """
    nodes: list[Node] = [Text(child) if isinstance(child, str) else child for child in children]
    return Element(kind, nodes, dict(attributes))


def document(*children: Node) -> Element:
    """Build a document root element."""
    return Element(ElementKind.GENERIC, list(children), tag="document")


def table(*rows: list[str]) -> Element:
    """Build a table element from rows of cell strings; the first row is the header."""
    row_nodes: list[Node] = []
    for index, cells in enumerate(rows):
        cell_tag = "th" if index == 0 else "td"
        row_nodes.append(
            Element(ElementKind.TABLE_ROW, [Element(ElementKind.TABLE_CELL, [Text(c)], tag=cell_tag) for c in cells])
        )
    return Element(ElementKind.TABLE, row_nodes)
