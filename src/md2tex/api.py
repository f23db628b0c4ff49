#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/api.py
"""Public conversion functions.

The pipeline is parse, render, restore math, write. Each step is available
on its own through the parser and renderer classes; the functions here
chain them for the common cases.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional, Union

from md2tex.ast import Element
from md2tex.constants import DEFAULT_OUTPUT_EXTENSION
from md2tex.options.latex import LatexRendererOptions
from md2tex.options.markdown import MarkdownParserOptions
from md2tex.parsers.markdown import MarkdownToTreeParser
from md2tex.renderers.latex import LatexRenderer

logger = logging.getLogger(__name__)

SourceType = Union[str, Path, IO[bytes], IO[str], bytes]
OutputType = Union[str, Path, IO[bytes], IO[str]]


def to_ast(source: SourceType, parser_options: Optional[MarkdownParserOptions] = None) -> Element:
    """Parse Markdown into a document tree.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown content, or a path or stream to read it from. A string that
        names an existing file is read as a path.
    parser_options : MarkdownParserOptions, optional
        Parser configuration

    Returns
    -------
    Element
        Document root

    Raises
    ------
    FileNotFoundError
        If a ``Path`` source does not exist
    ParsingError
        If the source cannot be decoded
    InvalidOptionsError
        If ``parser_options`` is not a ``MarkdownParserOptions``

    """
    return MarkdownToTreeParser(parser_options).parse(source)


def to_latex(
    source: SourceType,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[LatexRendererOptions] = None,
) -> str:
    r"""Convert Markdown to a LaTeX body fragment.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown source, as accepted by ``to_ast``
    parser_options : MarkdownParserOptions, optional
        Parser configuration
    renderer_options : LatexRendererOptions, optional
        Renderer configuration

    Returns
    -------
    str
        LaTeX text

    Examples
    --------
        >>> to_latex("# Title\n\nSome **bold** text.")
        '\\chapter{Title}\nSome \\textbf{bold} text.\n\n'

    """
    # Construct the renderer first so invalid options fail before parsing
    renderer = LatexRenderer(renderer_options)
    tree = to_ast(source, parser_options)
    return renderer.render_to_string(tree)


def convert(
    source: SourceType,
    output: Optional[OutputType] = None,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[LatexRendererOptions] = None,
) -> Optional[str]:
    """Convert Markdown to LaTeX and optionally write the result.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown source, as accepted by ``to_ast``
    output : str, Path, IO[bytes], or IO[str], optional
        Destination. When omitted the LaTeX is returned instead of written.
    parser_options : MarkdownParserOptions, optional
        Parser configuration
    renderer_options : LatexRendererOptions, optional
        Renderer configuration

    Returns
    -------
    str or None
        The LaTeX text when ``output`` is None, otherwise None

    Raises
    ------
    OutputWriteError
        If the output path cannot be written. Nothing is written when any
        earlier step fails.

    """
    latex = to_latex(source, parser_options=parser_options, renderer_options=renderer_options)
    if output is None:
        return latex

    LatexRenderer.write_text_output(latex, output)
    logger.debug(f"Wrote LaTeX output to {output}")
    return None


def default_output_path(input_path: Union[str, Path]) -> Path:
    """Return the output path used when none is given.

    The input suffix is replaced by ``.tex``; a suffix-less path gets ``.tex``
    appended.

    Examples
    --------
        >>> default_output_path("notes/chapter1.md")
        PosixPath('notes/chapter1.tex')

    """
    return Path(input_path).with_suffix(DEFAULT_OUTPUT_EXTENSION)


__all__ = ["to_ast", "to_latex", "convert", "default_output_path"]
