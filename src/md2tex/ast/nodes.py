#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/ast/nodes.py
"""Node classes for the parsed document tree.

The tree has exactly two node shapes:

- ``Text``: a leaf carrying raw string content
- ``Element``: a tagged node with a kind, ordered children and string
  attributes (``href``, ``src``, ``alt``, ...)

Element kinds are a closed enumeration keyed by the HTML tag name each kind
corresponds to, so any producer that thinks in tags (the Markdown adapter,
the HTML fragment parser, hand-built trees in tests) can map onto it with
``ElementKind.from_tag``. Tags without a dedicated kind become ``GENERIC``
and render as the concatenation of their children.

Children are stored in document order. Nodes are created once by a parser
and consumed once by a renderer; nothing mutates them in between.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional


class ElementKind(str, Enum):
    """Kinds of element nodes, valued by their HTML tag name."""

    HEADING_1 = "h1"
    HEADING_2 = "h2"
    HEADING_3 = "h3"
    HEADING_4 = "h4"
    UNORDERED_LIST = "ul"
    ORDERED_LIST = "ol"
    LIST_ITEM = "li"
    PARAGRAPH = "p"
    BOLD = "strong"
    ITALIC = "em"
    INLINE_CODE = "code"
    LINK = "a"
    IMAGE = "img"
    TABLE = "table"
    CODE_BLOCK = "pre"
    TABLE_ROW = "tr"
    TABLE_CELL = "td"
    MATH_INLINE = "math-inline"
    MATH_BLOCK = "math-block"
    GENERIC = "generic"

    @classmethod
    def from_tag(cls, tag: str | None) -> ElementKind:
        """Map an HTML tag name to an element kind.

        Parameters
        ----------
        tag : str or None
            Tag name, case-insensitive

        Returns
        -------
        ElementKind
            Matching kind, or ``GENERIC`` for unknown tags

        Examples
        --------
        >>> ElementKind.from_tag("B")
        <ElementKind.BOLD: 'strong'>
        >>> ElementKind.from_tag("blockquote")
        <ElementKind.GENERIC: 'generic'>

        """
        if not tag:
            return cls.GENERIC
        name = tag.lower()
        alias = _TAG_ALIASES.get(name)
        if alias is not None:
            return alias
        try:
            return cls(name)
        except ValueError:
            return cls.GENERIC


_TAG_ALIASES: dict[str, ElementKind] = {
    "b": ElementKind.BOLD,
    "i": ElementKind.ITALIC,
    "th": ElementKind.TABLE_CELL,
}

HEADING_KINDS = (
    ElementKind.HEADING_1,
    ElementKind.HEADING_2,
    ElementKind.HEADING_3,
    ElementKind.HEADING_4,
)


class Node(ABC):
    """Base class for all tree nodes.

    All nodes support the visitor pattern through ``accept``.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with ``visit_text`` and ``visit_element`` methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


@dataclass
class Text(Node):
    """Text leaf.

    Parameters
    ----------
    content : str
        Raw text, unescaped. Escaping happens at render time only.

    """

    content: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text leaf.

        Returns
        -------
        Any
            Result from ``visitor.visit_text(self)``

        """
        return visitor.visit_text(self)


@dataclass
class Element(Node):
    """Tagged element node.

    Parameters
    ----------
    kind : ElementKind
        Element kind driving render dispatch
    children : list of Node, default = empty list
        Child nodes in document order
    attributes : dict[str, str], default = empty dict
        String attributes such as ``href``, ``src`` or ``alt``
    tag : str or None, default = None
        Source tag name, kept for diagnostics and for ``GENERIC`` elements
        (``"h5"``, ``"blockquote"``, ...). Defaults to the kind's tag.

    Examples
    --------
    >>> link = Element(ElementKind.LINK, [Text("docs")], {"href": "https://example.com"})
    >>> link.get("href")
    'https://example.com'
    >>> link.get("title")
    ''

    """

    kind: ElementKind
    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    tag: Optional[str] = None

    def __post_init__(self) -> None:
        """Fill in the tag from the kind when none was given."""
        if self.tag is None:
            self.tag = self.kind.value

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this element.

        Returns
        -------
        Any
            Result from ``visitor.visit_element(self)``

        """
        return visitor.visit_element(self)

    def get(self, name: str, default: str = "") -> str:
        """Look up an attribute, returning ``default`` when it is missing or None."""
        value = self.attributes.get(name)
        if value is None:
            return default
        return value

    def element_children(self) -> Iterator[Element]:
        """Iterate over child elements, skipping text leaves."""
        for child in self.children:
            if isinstance(child, Element):
                yield child


def iter_descendants(node: Node) -> Iterator[Node]:
    """Iterate over every descendant of ``node`` in document order.

    The node itself is not included.

    """
    if not isinstance(node, Element):
        return
    for child in node.children:
        yield child
        yield from iter_descendants(child)


__all__ = [
    "ElementKind",
    "HEADING_KINDS",
    "Node",
    "Text",
    "Element",
    "iter_descendants",
]
