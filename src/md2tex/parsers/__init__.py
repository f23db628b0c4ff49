#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/parsers/__init__.py
"""Parsers that build the md2tex document tree.

- markdown: mistune-based Markdown adapter
- html: BeautifulSoup-based parser for raw HTML fragments embedded in Markdown
"""

from md2tex.parsers.base import BaseParser
from md2tex.parsers.html import HtmlFragmentParser, html_to_nodes
from md2tex.parsers.markdown import MarkdownToTreeParser, markdown_to_tree

__all__ = [
    "BaseParser",
    "HtmlFragmentParser",
    "MarkdownToTreeParser",
    "html_to_nodes",
    "markdown_to_tree",
]
