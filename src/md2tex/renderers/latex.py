#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/renderers/latex.py
"""LaTeX rendering from the document tree.

This module provides the LatexRenderer class which converts tree nodes to a
LaTeX body fragment. Every visit method returns the LaTeX for its node, so
rendering a node never depends on anything but the node and the options.

Headings, links and inline code use the node's *text content* (all text
leaves concatenated, trimmed, then escaped), which flattens any nested
markup. Paragraphs, list items and emphasis use the *rendered children*,
which keeps nested markup.

"""

from __future__ import annotations

import logging

from md2tex.ast import Element, ElementKind, Node, NodeVisitor, Text, extract_text, find_all
from md2tex.options.latex import LatexRendererOptions
from md2tex.renderers.base import BaseRenderer
from md2tex.utils.decorators import debug_timer
from md2tex.utils.escape import escape_latex
from md2tex.utils.math_spans import restore_math

logger = logging.getLogger(__name__)


class LatexRenderer(NodeVisitor, BaseRenderer):
    r"""Render tree nodes to LaTeX text.

    Parameters
    ----------
    options : LatexRendererOptions or None, default = None
        LaTeX rendering options

    Examples
    --------
    Basic usage:

        >>> from md2tex.ast import Element, ElementKind, Text
        >>> from md2tex.renderers.latex import LatexRenderer
        >>> renderer = LatexRenderer()
        >>> renderer.render_node(Element(ElementKind.HEADING_2, [Text("Intro")]))
        '\\section{Intro}'

    """

    HEADING_COMMANDS = {
        ElementKind.HEADING_1: "chapter",
        ElementKind.HEADING_2: "section",
        ElementKind.HEADING_3: "subsection",
        ElementKind.HEADING_4: "subsubsection",
    }

    LIST_ENVIRONMENTS = {
        ElementKind.UNORDERED_LIST: "itemize",
        ElementKind.ORDERED_LIST: "enumerate",
    }

    def __init__(self, options: LatexRendererOptions | None = None):
        """Initialize the LaTeX renderer with options."""
        BaseRenderer._validate_options_type(options, LatexRendererOptions, "latex")
        options = options or LatexRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: LatexRendererOptions = options

    def render_to_string(self, node: Node) -> str:
        """Render a tree to a LaTeX string.

        The tree is rendered depth-first, then dollar-delimited math spans in
        the complete output are restored unless ``restore_math`` is disabled.

        Parameters
        ----------
        node : Node
            Root of the tree, usually the document element

        Returns
        -------
        str
            LaTeX text

        """
        with debug_timer(logger, "Rendering (latex)"):
            latex = self.render_node(node)
            if self.options.restore_math:
                latex = restore_math(latex)
        return latex

    def render_node(self, node: Node) -> str:
        """Render a single node and its subtree, without math restoration.

        Parameters
        ----------
        node : Node
            Node to render

        Returns
        -------
        str
            LaTeX for the node

        """
        return node.accept(self)

    def _render_children(self, node: Element) -> str:
        return "".join(child.accept(self) for child in node.children)

    def _escape(self, text: str) -> str:
        """Escape special LaTeX characters unless escaping is disabled."""
        if not self.options.escape_special:
            return text
        return escape_latex(text)

    def _text_content(self, node: Node) -> str:
        """Return the escaped, trimmed text of all text leaves under ``node``."""
        return self._escape(extract_text(node).strip())

    def visit_text(self, node: Text) -> str:
        """Render a text leaf."""
        return self._escape(node.content)

    def generic_visit(self, node: Element) -> str:
        """Render an element without a dedicated rule as its children."""
        return self._render_children(node)

    def visit_heading(self, node: Element) -> str:
        """Render a heading as a sectioning command."""
        command = self.HEADING_COMMANDS.get(node.kind)
        if command is None:
            return self.generic_visit(node)
        return f"\\{command}{{{self._text_content(node)}}}"

    def visit_list(self, node: Element) -> str:
        """Render a list environment.

        Only element children are rendered; text between items is whitespace.
        """
        environment = self.LIST_ENVIRONMENTS.get(node.kind, "itemize")
        items = "\n".join(self.render_node(child) for child in node.element_children())
        return f"\\begin{{{environment}}}\n{items}\n\\end{{{environment}}}"

    def visit_list_item(self, node: Element) -> str:
        """Render a list item."""
        return f"\\item {self._render_children(node)}"

    def visit_paragraph(self, node: Element) -> str:
        """Render a paragraph followed by a blank line."""
        return f"{self._render_children(node)}\n\n"

    def visit_bold(self, node: Element) -> str:
        """Render bold text."""
        return f"\\textbf{{{self._render_children(node)}}}"

    def visit_italic(self, node: Element) -> str:
        """Render italic text."""
        return f"\\textit{{{self._render_children(node)}}}"

    def visit_inline_code(self, node: Element) -> str:
        """Render inline code."""
        return f"\\texttt{{{self._text_content(node)}}}"

    def visit_link(self, node: Element) -> str:
        """Render a hyperlink.

        A link that wraps images links the rendered figures instead of its
        text. The target is used verbatim.
        """
        href = node.get("href")
        images = find_all(node, ElementKind.IMAGE)
        if images:
            figures = "\n".join(self.render_image(image) for image in images)
            return f"\\href{{{href}}}{{{figures}}}"
        return f"\\href{{{href}}}{{{self._text_content(node)}}}"

    def visit_image(self, node: Element) -> str:
        """Render an image as a figure."""
        return self.render_image(node)

    def visit_table(self, node: Element) -> str:
        """Render a table."""
        return self.render_table(node)

    def visit_code_block(self, node: Element) -> str:
        """Render a code block as a verbatim environment with raw content."""
        return f"\\begin{{verbatim}}\n{extract_text(node)}\n\\end{{verbatim}}"

    def visit_math_inline(self, node: Element) -> str:
        """Render inline math with its source delimiters."""
        return f"${extract_text(node)}$"

    def visit_math_block(self, node: Element) -> str:
        """Render display math with its source delimiters."""
        return f"$${extract_text(node)}$$"

    def render_image(self, node: Element) -> str:
        r"""Render an image element as a centered figure.

        Parameters
        ----------
        node : Element
            Image element with ``src`` and optional ``alt`` attributes

        Returns
        -------
        str
            Figure environment. The ``\label`` line is present only when
            ``alt`` is non-empty.

        """
        lines = [
            f"\\begin{{figure}}[{self.options.figure_placement}]",
            "\\centering",
            f"\\includegraphics[width={self.options.image_width}]{{{node.get('src')}}}",
        ]
        alt = node.get("alt")
        if alt:
            lines.append(f"\\label{{{self._escape(alt)}}}")
        lines.append("\\end{figure}")
        return "\n".join(lines)

    def render_table(self, node: Element) -> str:
        r"""Render a table element as a tabular inside a table float.

        The first row found is the header. Every cell is rendered as its
        escaped, trimmed text content. The column specifier is repeated once
        per header cell; body rows with a different cell count are not
        reconciled.

        Parameters
        ----------
        node : Element
            Table element

        Returns
        -------
        str
            Table environment. A table without rows yields an empty column
            specifier and empty header and body lines.

        """
        rows = [
            [self._text_content(cell) for cell in row.element_children()]
            for row in find_all(node, ElementKind.TABLE_ROW)
        ]
        if not rows:
            logger.debug("Rendering table without rows")

        header_cells = rows[0] if rows else []
        column_spec = self.options.column_spec * len(header_cells)
        header = " & ".join(header_cells)
        body = " \\\\\n".join(" & ".join(cells) for cells in rows[1:])

        return "\n".join(
            [
                f"\\begin{{table}}[{self.options.table_placement}]",
                "\\centering",
                f"\\begin{{tabular}}{{{column_spec}}}",
                "\\hline",
                f"{header} \\\\",
                "\\hline",
                f"{body} \\\\",
                "\\hline",
                "\\end{tabular}",
                "\\end{table}",
            ]
        )


__all__ = ["LatexRenderer"]
