#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/cli/builder.py
"""Argument parser construction and exit codes for the md2tex CLI.

Option flags are generated from the ``cli_name`` metadata of the options
dataclasses, so a new boolean option only needs its field declared to show
up on the command line.
"""

from __future__ import annotations

import argparse
from dataclasses import MISSING, Field, fields
from typing import Any, Type

from md2tex.cli.actions import EnvironmentAwareAction, EnvironmentAwareBooleanAction, EnvironmentAwareBooleanFalseAction
from md2tex.exceptions import (
    DependencyError,
    FileError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2tex.options.latex import LatexRendererOptions
from md2tex.options.markdown import MarkdownParserOptions

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

OPTIONS_CLASSES: dict[str, Type[Any]] = {
    "markdown": MarkdownParserOptions,
    "latex": LatexRendererOptions,
}


def _add_options_class_arguments(parser: argparse.ArgumentParser, options_class: Type[Any], group_name: str) -> None:
    """Add a ``--no-*`` flag for every boolean field that declares a ``cli_name``.

    The flag stores into the field name with a default of None, so an unset
    flag can fall back to the configuration file.
    """
    group = parser.add_argument_group(group_name)
    for field in fields(options_class):
        cli_name = field.metadata.get("cli_name")
        if not cli_name or not _is_bool_field(field):
            continue
        group.add_argument(
            f"--{cli_name}",
            action=EnvironmentAwareBooleanFalseAction,
            dest=field.name,
            default=None,
            help=f"Disable: {field.metadata.get('help', field.name)}",
        )


def _is_bool_field(field: Field) -> bool:
    return field.default is not MISSING and isinstance(field.default, bool)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns
    -------
    ArgumentParser
        Configured parser

    """
    from md2tex import __version__

    parser = argparse.ArgumentParser(
        prog="md2tex",
        description="Convert a Markdown document into a LaTeX body fragment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  md2tex notes.md                 # writes notes.tex
  md2tex notes.md chapter1.tex
  md2tex notes.md --no-restore-math
  md2tex notes.md --config md2tex.toml --rich

Environment variables:
  MD2TEX_CONFIG names a configuration file. MD2TEX_<OPTION> sets a default
  for a flag, e.g. MD2TEX_RESTORE_MATH=false or MD2TEX_LOG_LEVEL=DEBUG.
""",
    )

    parser.add_argument("input", nargs="?", help="Markdown file to convert")
    parser.add_argument(
        "output",
        nargs="?",
        help="Output LaTeX file (default: input path with a .tex extension)",
    )

    # Configuration file
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to configuration file (TOML, YAML or JSON). If not specified, searches for "
        ".md2tex.toml, .md2tex.yaml, .md2tex.yml, .md2tex.json or a [tool.md2tex] section in "
        "pyproject.toml from the current directory upwards, then in the home directory.",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help="Disable loading of configuration files. Ignores auto-discovered configs, "
        "the MD2TEX_CONFIG environment variable, and any --config flag.",
    )

    _add_options_class_arguments(parser, MarkdownParserOptions, "Markdown parsing options")
    _add_options_class_arguments(parser, LatexRendererOptions, "LaTeX rendering options")

    parser.add_argument(
        "--rich",
        action=EnvironmentAwareBooleanAction,
        dest="rich",
        default=False,
        help="Print the conversion summary with rich formatting",
    )

    # Logging and verbosity options
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        action=EnvironmentAwareAction,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        action=EnvironmentAwareAction,
        dest="log_file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with very verbose logging and per-stage timing information",
    )

    parser.add_argument("--version", "-V", action="version", version=f"md2tex {__version__}")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


__all__ = [
    "EXIT_SUCCESS",
    "EXIT_ERROR",
    "EXIT_DEPENDENCY_ERROR",
    "EXIT_VALIDATION_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_PARSING_ERROR",
    "EXIT_RENDERING_ERROR",
    "OPTIONS_CLASSES",
    "create_parser",
    "get_exit_code_for_exception",
]
