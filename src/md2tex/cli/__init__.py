"""Command-line interface for md2tex.

Convert one Markdown file into a LaTeX body fragment. The output path
defaults to the input path with a ``.tex`` extension.

Environment Variable Support
----------------------------
Flags support environment variable defaults using the pattern
MD2TEX_<OPTION_NAME>, where the option name is the uppercased field name
(``MD2TEX_RESTORE_MATH=false`` acts like ``--no-restore-math``).
MD2TEX_CONFIG names a configuration file. CLI arguments always override
environment variables, which override configuration files.

Examples
--------
Basic conversion::

    $ md2tex notes.md

Specify output file::

    $ md2tex notes.md chapter.tex

Keep dollar-delimited math as is::

    $ md2tex notes.md --no-restore-math

Use rich formatting::

    $ md2tex notes.md --rich

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys
from pathlib import Path

from md2tex.api import convert, default_output_path
from md2tex.cli.builder import (
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from md2tex.cli.config import build_options, load_config_with_priority
from md2tex.cli.output import print_error, print_success, should_use_rich_output
from md2tex.constants import CONFIG_ENV_VAR
from md2tex.exceptions import ConfigError, Md2TexError
from md2tex.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = [
    "main",
    "create_parser",
]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_config(parsed_args: argparse.Namespace) -> dict:
    if parsed_args.no_config:
        return {}
    return load_config_with_priority(explicit_path=parsed_args.config, env_var_path=os.environ.get(CONFIG_ENV_VAR))


def main(args: list[str] | None = None) -> int:
    """Execute the md2tex command.

    Parameters
    ----------
    args : list of str, optional
        Command line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.input:
        print_error("Input file is required")
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args)

    try:
        config = _load_config(parsed_args)
        parser_options, renderer_options = build_options(parsed_args, config)
    except ConfigError as e:
        print_error(str(e))
        return get_exit_code_for_exception(e)

    input_path = Path(parsed_args.input)
    output_path = Path(parsed_args.output) if parsed_args.output else default_output_path(input_path)

    if input_path.resolve() == output_path.resolve():
        print_error(f"Output path would overwrite the input file: {input_path}")
        return EXIT_VALIDATION_ERROR

    logger.info(f"Converting {input_path} to {output_path}")
    try:
        convert(input_path, output_path, parser_options=parser_options, renderer_options=renderer_options)
    except Exception as e:
        exit_code = get_exit_code_for_exception(e)
        error_msg = str(e)
        if isinstance(e, ImportError):
            error_msg = f"Missing dependency: {e}"
        elif not isinstance(e, Md2TexError):
            error_msg = f"Unexpected error: {e}"
            logger.debug("Unexpected error during conversion", exc_info=True)
        print_error(error_msg)
        return exit_code

    print_success(input_path, output_path, use_rich=should_use_rich_output(parsed_args))
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
