"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2tex/cli/output.py
import argparse
import sys
from pathlib import Path
from typing import IO, Optional


def should_use_rich_output(args: argparse.Namespace, stream: Optional[IO[str]] = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True when ``--rich`` is set and the stream is a terminal

    """
    if not getattr(args, "rich", False):
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def print_success(input_path: Path, output_path: Path, use_rich: bool = False) -> None:
    """Report a finished conversion on stdout.

    Parameters
    ----------
    input_path : Path
        Markdown file that was read
    output_path : Path
        LaTeX file that was written
    use_rich : bool, default False
        Print a rich panel instead of a plain line

    """
    message = f"Converted {input_path} to {output_path}"
    if not use_rich:
        print(message)
        return

    from rich.console import Console
    from rich.panel import Panel

    console = Console()
    console.print(
        Panel(
            f"[bold]{input_path}[/bold] -> [bold green]{output_path}[/bold green]",
            title="md2tex",
            subtitle="Converted",
            expand=False,
        )
    )


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)


__all__ = ["should_use_rich_output", "print_success", "print_error"]
