#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/parsers/markdown.py
"""Markdown to document tree converter.

This module parses Markdown with mistune and converts the resulting token
stream into the md2tex document tree. The tree mirrors what an HTML DOM of
the same document would look like: elements keyed by tag name, text leaves
in document order, and whitespace text between sibling blocks.

"""

from __future__ import annotations

import html
import logging
import re
from pathlib import Path
from typing import IO, Any, Union

from md2tex.ast import Element, ElementKind, Node, Text, extract_text
from md2tex.constants import DEPS_MARKDOWN, INLINE_HTML_VOID_ELEMENTS
from md2tex.options.markdown import MarkdownParserOptions
from md2tex.parsers.base import BaseParser
from md2tex.parsers.html import HtmlFragmentParser
from md2tex.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

_HTML_TAG_NAME_PATTERN = re.compile(r"^<\s*([A-Za-z][A-Za-z0-9-]*)")

_HEADING_KIND_BY_LEVEL = {
    1: ElementKind.HEADING_1,
    2: ElementKind.HEADING_2,
    3: ElementKind.HEADING_3,
    4: ElementKind.HEADING_4,
}


class MarkdownToTreeParser(BaseParser):
    r"""Convert Markdown to a document tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownToTreeParser()
        >>> root = parser.parse("# Hello\\n\\nThis is **bold**.")
        >>> [child.tag for child in root.element_children()]
        ['h1', 'p']

    Without math parsing:

        >>> options = MarkdownParserOptions(parse_math=False)
        >>> root = MarkdownToTreeParser(options).parse("Costs $5")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self._html_parser = HtmlFragmentParser()

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Element:
        """Parse Markdown input into a document tree.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Markdown input to parse. Can be:
            - File path (str or Path)
            - File-like object
            - Raw markdown bytes
            - Markdown string

        Returns
        -------
        Element
            ``GENERIC`` root element tagged ``document``

        """
        markdown_content = self._load_text_content(input_data, self.options.encoding)

        import mistune

        # Configure mistune plugins based on options
        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_math:
            plugins.append("math")

        # No renderer: we consume the token stream ourselves
        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        with debug_timer(logger, "Parsing (markdown)"):
            tokens, _state = markdown.parse(markdown_content)
            children = self._process_blocks(tokens) if isinstance(tokens, list) else []

        logger.debug(f"Parsed {len(children)} top-level nodes with plugins {plugins}")
        return Element(ElementKind.GENERIC, children, tag="document")

    def _process_blocks(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process sibling block tokens, separating them with whitespace text.

        Parameters
        ----------
        tokens : list of dict
            Mistune block token dictionaries

        Returns
        -------
        list of Node
            Block nodes with a separator text leaf between each pair

        """
        nodes: list[Node] = []

        for token in tokens:
            processed = self._process_token(token)
            if processed is None:
                continue
            if isinstance(processed, list):
                # block_text splices inline content and needs no separator
                if token.get("type") == "block_text":
                    nodes.extend(processed)
                    continue
                if not processed:
                    continue
            if nodes and self.options.block_separator:
                nodes.append(Text(self.options.block_separator))
            if isinstance(processed, list):
                nodes.extend(processed)
            else:
                nodes.append(processed)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single mistune block token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node, list of Node, or None
            Resulting node(s); None for skipped tokens

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type == "paragraph":
            return Element(ElementKind.PARAGRAPH, self._inline_children(token))
        elif token_type == "block_text":
            # Tight list item text has no paragraph wrapper
            return self._inline_children(token)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return Element(ElementKind.GENERIC, self._process_blocks(token.get("children", [])), tag="blockquote")
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return Element(ElementKind.GENERIC, tag="hr")
        elif token_type == "block_html":
            return self._process_html_block(token)
        elif token_type == "block_math":
            return Element(ElementKind.MATH_BLOCK, [Text(token.get("raw", ""))])
        elif token_type == "blank_line":
            return None

        logger.debug(f"Skipping unsupported block token: {token_type!r}")
        return None

    def _process_heading(self, token: dict[str, Any]) -> Element:
        """Process heading token.

        Levels 1-4 become heading elements; levels 5 and 6 have no LaTeX
        sectioning command and become generic ``h5``/``h6`` elements.

        """
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        children = self._inline_children(token)
        kind = _HEADING_KIND_BY_LEVEL.get(level)
        if kind is None:
            return Element(ElementKind.GENERIC, children, tag=f"h{level}")
        return Element(kind, children)

    def _process_code_block(self, token: dict[str, Any]) -> Element:
        """Process fenced or indented code block token.

        The raw code keeps its content byte for byte except for the single
        newline mistune appends after the last line.

        """
        code_content = token.get("raw", "")
        if code_content.endswith("\n"):
            code_content = code_content[:-1]

        attributes: dict[str, str] = {}
        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None
        if info_string and info_string.strip():
            attributes["language"] = info_string.strip().split(maxsplit=1)[0]

        return Element(ElementKind.CODE_BLOCK, [Text(code_content)], attributes)

    def _process_list(self, token: dict[str, Any]) -> Element:
        """Process list token into an ordered or unordered list of items."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        attributes: dict[str, str] = {}
        start = attrs.get("start")
        if ordered and isinstance(start, int) and start != 1:
            attributes["start"] = str(start)

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        items: list[Node] = []
        for child in children:
            if not isinstance(child, dict) or child.get("type") != "list_item":
                continue
            if items and self.options.block_separator:
                items.append(Text(self.options.block_separator))
            items.append(Element(ElementKind.LIST_ITEM, self._process_blocks(child.get("children", []))))

        kind = ElementKind.ORDERED_LIST if ordered else ElementKind.UNORDERED_LIST
        return Element(kind, items, attributes)

    def _process_table(self, token: dict[str, Any]) -> Element:
        """Process table token.

        The header row comes first, followed by the body rows, all as direct
        ``TABLE_ROW`` children of the table.

        """
        rows: list[Node] = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                # Header cells are direct children of table_head
                rows.append(self._process_table_row(section.get("children", []), header=True))
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    rows.append(self._process_table_row(row_token.get("children", []), header=False))

        return Element(ElementKind.TABLE, rows)

    def _process_table_row(self, cell_tokens: list[dict[str, Any]], header: bool) -> Element:
        cells: list[Node] = []
        for cell_token in cell_tokens:
            if cell_token.get("type") != "table_cell":
                continue
            attributes: dict[str, str] = {}
            align = cell_token.get("attrs", {}).get("align")
            if align:
                attributes["align"] = align
            cells.append(
                Element(
                    ElementKind.TABLE_CELL,
                    self._inline_children(cell_token),
                    attributes,
                    tag="th" if header else "td",
                )
            )
        return Element(ElementKind.TABLE_ROW, cells)

    def _process_html_block(self, token: dict[str, Any]) -> list[Node] | None:
        """Parse raw block HTML into nodes, or drop it when HTML parsing is off."""
        if not self.options.parse_html:
            logger.debug("Dropping raw HTML block (parse_html disabled)")
            return None
        content = token.get("raw", "")
        return _strip_edge_whitespace(self._html_parser.parse(content))

    def _inline_children(self, token: dict[str, Any]) -> list[Node]:
        children = token.get("children", [])
        if not isinstance(children, list):
            return []
        return self._process_inline_tokens(children)

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                if isinstance(node, list):
                    nodes.extend(node)
                else:
                    nodes.append(node)

        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        """Handle text token.

        Character references (``&amp;``, ``&lt;``, ``&#36;``) are decoded; code
        spans and code blocks keep theirs literally.
        """
        return Text(html.unescape(token.get("raw", "")))

    def _handle_strong_token(self, token: dict[str, Any]) -> Element:
        """Handle strong token."""
        return Element(ElementKind.BOLD, self._inline_children(token))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Element:
        """Handle emphasis token."""
        return Element(ElementKind.ITALIC, self._inline_children(token))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Element:
        """Handle codespan token."""
        return Element(ElementKind.INLINE_CODE, [Text(token.get("raw", ""))])

    def _handle_link_token(self, token: dict[str, Any]) -> Element:
        """Handle link token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        attributes = {"href": attrs.get("url", "")}
        if attrs.get("title"):
            attributes["title"] = attrs["title"]
        return Element(ElementKind.LINK, self._inline_children(token), attributes)

    def _handle_image_token(self, token: dict[str, Any]) -> Element:
        """Handle image token.

        The alt text lives in the token's children, as it does for links.
        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        attributes = {"src": attrs.get("url", ""), "alt": extract_text(self._inline_children(token))}
        if attrs.get("title"):
            attributes["title"] = attrs["title"]
        return Element(ElementKind.IMAGE, attributes=attributes)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> Text:
        """Handle softbreak token."""
        return Text("\n")

    def _handle_linebreak_token(self, token: dict[str, Any]) -> Element:
        """Handle hard linebreak token."""
        return Element(ElementKind.GENERIC, tag="br")

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Element:
        """Handle strikethrough token."""
        return Element(ElementKind.GENERIC, self._inline_children(token), tag="del")

    def _handle_inline_math_token(self, token: dict[str, Any]) -> Element:
        """Handle inline_math token."""
        return Element(ElementKind.MATH_INLINE, [Text(token.get("raw", ""))])

    def _handle_inline_html_token(self, token: dict[str, Any]) -> list[Node] | None:
        """Handle inline_html token.

        Inline HTML arrives one tag at a time, so only self-contained void
        elements can become nodes. Other tags are dropped and the text
        between them is kept.
        """
        if not self.options.parse_html:
            return None
        content = token.get("raw", "")
        match = _HTML_TAG_NAME_PATTERN.match(content)
        if match is None or match.group(1).lower() not in INLINE_HTML_VOID_ELEMENTS:
            logger.debug(f"Dropping inline HTML: {content!r}")
            return None
        return self._html_parser.parse(content)

    def _process_inline_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node, list of Node, or None
            Inline node(s)

        """
        token_type = token.get("type", "")

        # Dispatch to appropriate handler
        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "softbreak": self._handle_softbreak_token,
            "linebreak": self._handle_linebreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
            "inline_math": self._handle_inline_math_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug(f"Skipping unsupported inline token: {token_type!r}")
        return None


def _strip_edge_whitespace(nodes: list[Node]) -> list[Node]:
    """Drop whitespace-only text leaves at both ends of a fragment."""
    start, end = 0, len(nodes)
    while start < end and isinstance(nodes[start], Text) and not nodes[start].content.strip():  # type: ignore[attr-defined]
        start += 1
    while end > start and isinstance(nodes[end - 1], Text) and not nodes[end - 1].content.strip():  # type: ignore[attr-defined]
        end -= 1
    return nodes[start:end]


def markdown_to_tree(markdown_content: str, options: MarkdownParserOptions | None = None) -> Element:
    r"""Convert Markdown string to a document tree.

    This is a convenience function that creates a parser and parses the
    markdown in one step.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Element
        Document root

    Examples
    --------
    >>> from md2tex.parsers.markdown import markdown_to_tree
    >>> root = markdown_to_tree("# Hello\\n\\nWorld")
    >>> len(list(root.element_children()))
    2

    """
    parser = MarkdownToTreeParser(options)
    return parser.parse(markdown_content)
