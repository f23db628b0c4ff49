#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/utils/io_utils.py
"""I/O utilities for reading Markdown sources and writing LaTeX output.

Reading and writing are whole-document operations: the source is read in
full before parsing starts and the output is written in one call after
rendering has finished, so a failure never leaves a partial file behind.

"""

from __future__ import annotations

import io
import logging
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from md2tex.exceptions import FileAccessError, FileNotFoundError, OutputWriteError, ParsingError

logger = logging.getLogger(__name__)


def read_text_file(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read a text file, translating OS errors into library errors.

    Parameters
    ----------
    path : str or Path
        File to read
    encoding : str, default "utf-8"
        Encoding used to decode the file

    Returns
    -------
    str
        File content

    Raises
    ------
    FileNotFoundError
        If the path does not exist
    FileAccessError
        If the path is a directory or cannot be read
    ParsingError
        If the content cannot be decoded with ``encoding``

    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(str(file_path))
    if not file_path.is_file():
        raise FileAccessError(str(file_path), message=f"Not a regular file: {file_path}")

    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise FileAccessError(str(file_path), original_error=e) from e

    logger.debug(f"Read {len(data)} bytes from {file_path}")
    return decode_text(data, encoding)


def decode_text(data: bytes, encoding: str = "utf-8") -> str:
    """Decode bytes, stripping a UTF-8 byte order mark when present.

    Raises
    ------
    ParsingError
        If the data is not valid in ``encoding``

    """
    if encoding.lower().replace("_", "-") in ("utf-8", "utf8"):
        encoding = "utf-8-sig"
    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise ParsingError(
            f"Cannot decode input as {encoding}: {e}", parsing_stage="decoding", original_error=e
        ) from e


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text content to a path or an open stream.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Can be:
        - str or Path: written as UTF-8, replacing any existing file
        - IO[bytes]: receives UTF-8 encoded bytes
        - IO[str]: receives the text as is

    Raises
    ------
    OutputWriteError
        If a file path cannot be written
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> buffer = StringIO()
        >>> write_content("\\\\chapter{Title}", buffer)
        >>> buffer.getvalue()
        '\\\\chapter{Title}'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        logger.debug(f"Wrote {len(content)} characters to {output_path}")
        return

    if hasattr(output, "write"):
        # Detect binary or text mode, most reliable checks first
        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, StringIO):
            is_binary_mode = False
        elif isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["read_text_file", "decode_text", "write_content"]
