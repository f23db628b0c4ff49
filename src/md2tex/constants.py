#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2tex.

This module centralizes the defaults used by the Markdown parser adapter,
the LaTeX renderer and the command-line interface.

Constants are organized by category:
1. Dependencies - package requirements checked at call time
2. Markdown Parser Defaults
3. LaTeX Renderer Defaults
4. Configuration Files
"""

from __future__ import annotations

# =============================================================================
# Dependencies - (install_name, import_name, version_spec)
# =============================================================================

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.9.0")]

# =============================================================================
# Markdown Parser Defaults
# =============================================================================

DEFAULT_MARKDOWN_ENCODING = "utf-8"
DEFAULT_MARKDOWN_PARSE_TABLES = True
DEFAULT_MARKDOWN_PARSE_MATH = True
DEFAULT_MARKDOWN_PARSE_STRIKETHROUGH = True
DEFAULT_MARKDOWN_PARSE_HTML = True
DEFAULT_MARKDOWN_BLOCK_SEPARATOR = "\n"

# Backend passed to BeautifulSoup for raw HTML fragments
DEFAULT_HTML_PARSER = "html.parser"

# HTML elements kept when they appear as inline HTML in Markdown
INLINE_HTML_VOID_ELEMENTS = frozenset({"img", "br", "hr"})

# HTML elements whose content never reaches the document tree
SKIPPED_HTML_ELEMENTS = frozenset({"script", "style"})

# =============================================================================
# LaTeX Renderer Defaults
# =============================================================================

DEFAULT_LATEX_ESCAPE_SPECIAL = True
DEFAULT_LATEX_RESTORE_MATH = True
DEFAULT_LATEX_FIGURE_PLACEMENT = "h"
DEFAULT_LATEX_IMAGE_WIDTH = "1\\textwidth"
DEFAULT_LATEX_TABLE_PLACEMENT = "h"
DEFAULT_LATEX_COLUMN_SPEC = " c "

# Extension given to output files when no output path is supplied
DEFAULT_OUTPUT_EXTENSION = ".tex"

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_FILENAMES = [".md2tex.toml", ".md2tex.yaml", ".md2tex.yml", ".md2tex.json"]
CONFIG_ENV_VAR = "MD2TEX_CONFIG"
ENV_VAR_PREFIX = "MD2TEX_"
