#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that the Markdown parser adapter
inherits from. Parsers turn their input into the md2tex document tree.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

from md2tex.ast import Element
from md2tex.exceptions import InvalidOptionsError, ValidationError
from md2tex.options.base import BaseParserOptions
from md2tex.utils.io_utils import decode_text, read_text_file

logger = logging.getLogger(__name__)

# Strings longer than this, or containing a newline, are never treated as paths
_MAX_PATH_LENGTH = 260


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method should handle all supported input types:
    - str: file path when it names an existing file, Markdown content otherwise
    - Path: file path to read
    - bytes: raw document bytes
    - IO[bytes] or IO[str]: open stream

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Element:
        """Parse the input document into a tree.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            The input document to parse

        Returns
        -------
        Element
            Root element of the document tree

        Raises
        ------
        ParsingError
            If the input cannot be decoded
        DependencyError
            If required dependencies are not installed
        FileError
            If an input path cannot be read

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes], encoding: str = "utf-8") -> str:
        """Load text from the supported input types.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Input data to load
        encoding : str, default "utf-8"
            Encoding for paths, bytes and binary streams

        Returns
        -------
        str
            Document text

        Raises
        ------
        ValidationError
            If the input type is not supported

        """
        if isinstance(input_data, bytes):
            return decode_text(input_data, encoding)
        elif isinstance(input_data, Path):
            return read_text_file(input_data, encoding)
        elif isinstance(input_data, str):
            # Could be file path or content
            if len(input_data) <= _MAX_PATH_LENGTH and "\n" not in input_data:
                try:
                    path = Path(input_data)
                    if path.is_file():
                        logger.debug(f"Treating string input as file path: {path}")
                        return read_text_file(path, encoding)
                except OSError:
                    # Invalid path - treat as content
                    pass
            return input_data
        elif hasattr(input_data, "read"):
            data: Any = input_data.read()
            if isinstance(data, bytes):
                return decode_text(data, encoding)
            return str(data)
        else:
            raise ValidationError(
                f"Unsupported input type: {type(input_data).__name__}",
                parameter_name="input_data",
                parameter_value=input_data,
            )
