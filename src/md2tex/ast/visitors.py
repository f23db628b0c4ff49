#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/ast/visitors.py
"""Visitor pattern implementation for tree traversal.

Nodes only know two shapes (``Text`` and ``Element``), so ``accept`` always
lands on ``visit_text`` or ``visit_element``. ``NodeVisitor.visit_element``
then dispatches on the element kind through ``ELEMENT_HANDLERS``, a table
that names a handler for every ``ElementKind``. Kinds missing from the
table (for instance one added to the enumeration later) fall through to
``generic_visit``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from md2tex.ast.nodes import Element, ElementKind, Node, Text

ELEMENT_HANDLERS: dict[ElementKind, str] = {
    ElementKind.HEADING_1: "visit_heading",
    ElementKind.HEADING_2: "visit_heading",
    ElementKind.HEADING_3: "visit_heading",
    ElementKind.HEADING_4: "visit_heading",
    ElementKind.UNORDERED_LIST: "visit_list",
    ElementKind.ORDERED_LIST: "visit_list",
    ElementKind.LIST_ITEM: "visit_list_item",
    ElementKind.PARAGRAPH: "visit_paragraph",
    ElementKind.BOLD: "visit_bold",
    ElementKind.ITALIC: "visit_italic",
    ElementKind.INLINE_CODE: "visit_inline_code",
    ElementKind.LINK: "visit_link",
    ElementKind.IMAGE: "visit_image",
    ElementKind.TABLE: "visit_table",
    ElementKind.CODE_BLOCK: "visit_code_block",
    ElementKind.TABLE_ROW: "visit_table_row",
    ElementKind.TABLE_CELL: "visit_table_cell",
    ElementKind.MATH_INLINE: "visit_math_inline",
    ElementKind.MATH_BLOCK: "visit_math_block",
    ElementKind.GENERIC: "generic_visit",
}


class NodeVisitor(ABC):
    """Abstract base class for tree visitors.

    Subclasses implement one ``visit_*`` method per element kind they care
    about plus ``visit_text`` and ``generic_visit``. Every method receives
    the node and returns whatever the visitor accumulates (the LaTeX
    renderer returns strings).

    Examples
    --------
    Visitor that counts text leaves:

        >>> class TextCounter(NodeVisitor):
        ...     def visit_text(self, node):
        ...         return 1
        ...
        ...     def generic_visit(self, node):
        ...         return sum(child.accept(self) for child in node.children)
        ...
        ...     visit_heading = visit_list = visit_list_item = generic_visit
        ...     visit_paragraph = visit_bold = visit_italic = generic_visit
        ...     visit_inline_code = visit_link = visit_image = generic_visit
        ...     visit_table = visit_code_block = generic_visit
        ...     visit_math_inline = visit_math_block = generic_visit
        >>> from md2tex.ast.nodes import Element, ElementKind, Text
        >>> paragraph = Element(ElementKind.PARAGRAPH, [Text("a "), Element(ElementKind.BOLD, [Text("b")])])
        >>> TextCounter().visit(paragraph)
        2

    """

    def visit(self, node: Node) -> Any:
        """Visit ``node`` through its ``accept`` method."""
        return node.accept(self)

    def visit_element(self, node: Element) -> Any:
        """Dispatch an element to the handler registered for its kind.

        Parameters
        ----------
        node : Element
            The element to visit

        Returns
        -------
        Any
            Result of the kind-specific handler, or of ``generic_visit`` for
            kinds without one

        """
        handler_name = ELEMENT_HANDLERS.get(node.kind, "generic_visit")
        return getattr(self, handler_name)(node)

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text leaf."""
        pass

    @abstractmethod
    def generic_visit(self, node: Element) -> Any:
        """Visit an element that has no dedicated handler."""
        pass

    @abstractmethod
    def visit_heading(self, node: Element) -> Any:
        """Visit a heading element (levels 1 to 4)."""
        pass

    @abstractmethod
    def visit_list(self, node: Element) -> Any:
        """Visit an ordered or unordered list element."""
        pass

    @abstractmethod
    def visit_list_item(self, node: Element) -> Any:
        """Visit a list item element."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Element) -> Any:
        """Visit a paragraph element."""
        pass

    @abstractmethod
    def visit_bold(self, node: Element) -> Any:
        """Visit a bold element."""
        pass

    @abstractmethod
    def visit_italic(self, node: Element) -> Any:
        """Visit an italic element."""
        pass

    @abstractmethod
    def visit_inline_code(self, node: Element) -> Any:
        """Visit an inline code element."""
        pass

    @abstractmethod
    def visit_link(self, node: Element) -> Any:
        """Visit a link element."""
        pass

    @abstractmethod
    def visit_image(self, node: Element) -> Any:
        """Visit an image element."""
        pass

    @abstractmethod
    def visit_table(self, node: Element) -> Any:
        """Visit a table element."""
        pass

    @abstractmethod
    def visit_code_block(self, node: Element) -> Any:
        """Visit a verbatim code block element."""
        pass

    @abstractmethod
    def visit_math_inline(self, node: Element) -> Any:
        """Visit an inline math element."""
        pass

    @abstractmethod
    def visit_math_block(self, node: Element) -> Any:
        """Visit a display math element."""
        pass

    def visit_table_row(self, node: Element) -> Any:
        """Visit a table row outside of table handling."""
        return self.generic_visit(node)

    def visit_table_cell(self, node: Element) -> Any:
        """Visit a table cell outside of table handling."""
        return self.generic_visit(node)


__all__ = ["ELEMENT_HANDLERS", "NodeVisitor"]
