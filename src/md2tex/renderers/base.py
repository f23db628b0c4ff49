#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/renderers/base.py
"""Base classes for tree renderers.

This module defines the abstract base class that the LaTeX renderer inherits
from. It provides the options check and the output writing shared by
text-based renderers.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2tex.ast import Node
from md2tex.exceptions import InvalidOptionsError
from md2tex.options.base import BaseRendererOptions
from md2tex.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, node: Node) -> str:
        """Render a tree to a string.

        Parameters
        ----------
        node : Node
            Root of the tree to render

        Returns
        -------
        str
            Rendered output

        """
        pass

    def render(self, node: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render a tree and write the result.

        The whole tree is rendered before ``output`` is touched, so a failure
        during rendering never leaves a partially written file.

        Parameters
        ----------
        node : Node
            Root of the tree to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the output file cannot be written

        """
        text = self.render_to_string(node)
        self.write_text_output(text, output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination. Can be:
            - File path (str or Path)
            - File-like object in binary mode (IO[bytes])
            - File-like object in text mode (IO[str])

        Examples
        --------
        Write to StringIO:
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("\\\\section{Intro}", buffer)
            >>> print(buffer.getvalue())
            \\section{Intro}

        """
        write_content(text, output)
