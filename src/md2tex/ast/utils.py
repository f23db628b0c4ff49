#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/ast/utils.py
"""Utility functions for working with tree nodes.

Functions
---------
extract_text : Concatenate every text leaf below a node
find_all : Collect descendant elements of a given kind

Examples
--------
Extract text from a heading with nested emphasis:

    >>> from md2tex.ast import Element, ElementKind, Text
    >>> from md2tex.ast.utils import extract_text
    >>>
    >>> heading = Element(ElementKind.HEADING_1, [
    ...     Text("Hello "),
    ...     Element(ElementKind.BOLD, [Text("world")]),
    ... ])
    >>> extract_text(heading)
    'Hello world'

"""

from __future__ import annotations

from typing import Union

from md2tex.ast.nodes import Element, ElementKind, Node, Text, iter_descendants


def extract_text(node_or_nodes: Union[Node, list[Node]]) -> str:
    """Extract the concatenated text of a node or list of nodes.

    Text leaves are joined with no separator, in document order, the same
    way a DOM ``textContent`` read works. No trimming is applied.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from

    Returns
    -------
    str
        Concatenated text content of all descendant ``Text`` leaves

    """
    if isinstance(node_or_nodes, list):
        return "".join(extract_text(node) for node in node_or_nodes)

    if isinstance(node_or_nodes, Text):
        return node_or_nodes.content

    return "".join(child.content for child in iter_descendants(node_or_nodes) if isinstance(child, Text))


def find_all(node: Node, kind: ElementKind) -> list[Element]:
    """Collect every descendant element of ``kind`` in document order.

    Parameters
    ----------
    node : Node
        Root of the subtree to search (not itself included)
    kind : ElementKind
        Kind to look for

    Returns
    -------
    list of Element
        Matching elements, possibly empty

    """
    return [child for child in iter_descendants(node) if isinstance(child, Element) and child.kind is kind]


__all__ = [
    "extract_text",
    "find_all",
]
