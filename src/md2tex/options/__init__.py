#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/options/__init__.py
"""Options dataclasses for the Markdown parser and the LaTeX renderer."""

from md2tex.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2tex.options.latex import LatexRendererOptions
from md2tex.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "LatexRendererOptions",
    "MarkdownParserOptions",
]
