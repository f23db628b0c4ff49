#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/options/markdown.py
"""Configuration options for Markdown parsing.

This module defines options for turning Markdown source into the document
tree consumed by the LaTeX renderer.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field

from md2tex.constants import (
    DEFAULT_MARKDOWN_BLOCK_SEPARATOR,
    DEFAULT_MARKDOWN_ENCODING,
    DEFAULT_MARKDOWN_PARSE_HTML,
    DEFAULT_MARKDOWN_PARSE_MATH,
    DEFAULT_MARKDOWN_PARSE_STRIKETHROUGH,
    DEFAULT_MARKDOWN_PARSE_TABLES,
)
from md2tex.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-tree parsing.

    Parameters
    ----------
    encoding : str, default "utf-8"
        Encoding used to decode file paths, bytes and binary streams.
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_math : bool, default True
        Whether to parse inline ($...$) and block ($$...$$) math into
        math elements. When False, dollar signs are ordinary text.
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_html : bool, default True
        Whether raw HTML embedded in the Markdown is parsed into the tree.
        When False, raw HTML is dropped.
    block_separator : str, default "\\n"
        Text leaf inserted between sibling block nodes.

    """

    encoding: str = field(
        default=DEFAULT_MARKDOWN_ENCODING,
        metadata={"help": "Text encoding of the Markdown source", "importance": "advanced"},
    )
    parse_tables: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "cli_name": "no-parse-tables", "importance": "core"},
    )
    parse_math: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_MATH,
        metadata={
            "help": "Parse inline and block math ($...$ and $$...$$)",
            "cli_name": "no-parse-math",
            "importance": "core",
        },
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_STRIKETHROUGH,
        metadata={
            "help": "Parse strikethrough syntax (~~text~~)",
            "cli_name": "no-parse-strikethrough",
            "importance": "core",
        },
    )
    parse_html: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_HTML,
        metadata={
            "help": "Parse raw HTML embedded in the Markdown",
            "cli_name": "no-parse-html",
            "importance": "core",
        },
    )
    block_separator: str = field(
        default=DEFAULT_MARKDOWN_BLOCK_SEPARATOR,
        metadata={"help": "Text inserted between sibling block elements", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the encoding name.

        Raises
        ------
        ValueError
            If the encoding is not known to Python's codec registry.

        """
        super().__post_init__()
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from e
