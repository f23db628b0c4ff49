#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/parsers/html.py
"""HTML fragment parser.

Markdown allows raw HTML. This module turns such fragments into tree nodes
with BeautifulSoup so that an embedded ``<table>`` or ``<img>`` renders the
same way as its Markdown equivalent.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from md2tex.ast import Element, ElementKind, Node, Text
from md2tex.constants import DEFAULT_HTML_PARSER, DEPS_HTML, SKIPPED_HTML_ELEMENTS
from md2tex.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    from bs4 import Tag

logger = logging.getLogger(__name__)


class HtmlFragmentParser:
    """Convert HTML fragments into tree nodes.

    Tags map to element kinds via ``ElementKind.from_tag``. Unknown tags become
    ``GENERIC`` elements that keep their tag name. Comments, doctypes and the
    content of ``script`` and ``style`` elements are skipped.

    Examples
    --------
        >>> nodes = HtmlFragmentParser().parse('<p>See <a href="x.html">x</a></p>')
        >>> nodes[0].kind
        <ElementKind.PARAGRAPH: 'p'>

    """

    def __init__(self, parser_backend: str = DEFAULT_HTML_PARSER):
        """Initialize with the BeautifulSoup tree builder name."""
        self.parser_backend = parser_backend

    @requires_dependencies("html", DEPS_HTML)
    def parse(self, html: str) -> list[Node]:
        """Parse an HTML fragment.

        Parameters
        ----------
        html : str
            HTML markup

        Returns
        -------
        list of Node
            Top-level nodes of the fragment in document order

        """
        from bs4 import BeautifulSoup

        soup = BeautifulSoup(html, self.parser_backend)
        return self._convert_children(soup)

    def _convert_children(self, tag: Any) -> list[Node]:
        nodes: list[Node] = []
        for child in tag.children:
            node = self._convert(child)
            if node is not None:
                nodes.append(node)
        return nodes

    def _convert(self, child: Any) -> Node | None:
        from bs4 import NavigableString, Tag

        if isinstance(child, Tag):
            return self._convert_tag(child)
        # Comment, Doctype, CData and friends are NavigableString subclasses
        if type(child) is NavigableString:
            return Text(str(child))
        logger.debug(f"Skipping HTML node of type {type(child).__name__}")
        return None

    def _convert_tag(self, tag: Tag) -> Element | None:
        name = tag.name.lower()
        if name in SKIPPED_HTML_ELEMENTS:
            logger.debug(f"Skipping <{name}> element")
            return None

        kind = ElementKind.from_tag(name)
        attributes = {key: _attribute_to_str(value) for key, value in tag.attrs.items()}
        return Element(kind, self._convert_children(tag), attributes, tag=name)


def _attribute_to_str(value: Any) -> str:
    # bs4 returns class, rel and similar attributes as lists
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


def html_to_nodes(html: str) -> list[Node]:
    """Parse an HTML fragment into tree nodes with the default backend."""
    return HtmlFragmentParser().parse(html)


__all__ = ["HtmlFragmentParser", "html_to_nodes"]
