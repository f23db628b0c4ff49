#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/ast/__init__.py
"""Document tree used between the Markdown parser and the LaTeX renderer.

The module consists of:

- nodes: ``Text`` and ``Element`` node classes and the ``ElementKind`` enumeration
- visitors: visitor base class with kind-keyed dispatch
- utils: text extraction and descendant search

Examples
--------
    >>> from md2tex.ast import Element, ElementKind, Text
    >>> from md2tex.renderers.latex import LatexRenderer
    >>>
    >>> doc = Element(ElementKind.GENERIC, [
    ...     Element(ElementKind.HEADING_1, [Text("Title")]),
    ... ], tag="document")
    >>> LatexRenderer().render_to_string(doc)
    '\\\\chapter{Title}'

"""

from __future__ import annotations

from md2tex.ast.nodes import HEADING_KINDS, Element, ElementKind, Node, Text, iter_descendants
from md2tex.ast.utils import extract_text, find_all
from md2tex.ast.visitors import ELEMENT_HANDLERS, NodeVisitor

__all__ = [
    "ELEMENT_HANDLERS",
    "HEADING_KINDS",
    "Element",
    "ElementKind",
    "Node",
    "NodeVisitor",
    "Text",
    "extract_text",
    "find_all",
    "iter_descendants",
]
