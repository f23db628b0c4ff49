#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/options/latex.py
"""Configuration options for LaTeX rendering.

This module defines options for rendering the document tree as a LaTeX
body fragment.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2tex.constants import (
    DEFAULT_LATEX_COLUMN_SPEC,
    DEFAULT_LATEX_ESCAPE_SPECIAL,
    DEFAULT_LATEX_FIGURE_PLACEMENT,
    DEFAULT_LATEX_IMAGE_WIDTH,
    DEFAULT_LATEX_RESTORE_MATH,
    DEFAULT_LATEX_TABLE_PLACEMENT,
)
from md2tex.options.base import BaseRendererOptions


@dataclass(frozen=True)
class LatexRendererOptions(BaseRendererOptions):
    r"""Configuration options for tree-to-LaTeX rendering.

    Parameters
    ----------
    escape_special : bool, default True
        Whether to escape LaTeX special characters in text leaves.
        Disable only for input that is already LaTeX-safe.
    restore_math : bool, default True
        Whether to rewrite ``$$...$$`` and ``$...$`` spans in the finished
        output as ``\[...\]`` and ``\(...\)``.
    figure_placement : str, default "h"
        Placement specifier for figure environments.
    image_width : str, default "1\\textwidth"
        Width passed to ``\includegraphics``.
    table_placement : str, default "h"
        Placement specifier for table environments.
    column_spec : str, default " c "
        Column specifier repeated once per header cell in tabular environments.

    """

    escape_special: bool = field(
        default=DEFAULT_LATEX_ESCAPE_SPECIAL,
        metadata={
            "help": "Escape special LaTeX characters",
            "cli_name": "no-escape-special",
            "importance": "core",
        },
    )
    restore_math: bool = field(
        default=DEFAULT_LATEX_RESTORE_MATH,
        metadata={
            "help": "Rewrite $$...$$ and $...$ spans as \\[...\\] and \\(...\\)",
            "cli_name": "no-restore-math",
            "importance": "core",
        },
    )
    figure_placement: str = field(
        default=DEFAULT_LATEX_FIGURE_PLACEMENT,
        metadata={"help": "Placement specifier for figure environments", "importance": "advanced"},
    )
    image_width: str = field(
        default=DEFAULT_LATEX_IMAGE_WIDTH,
        metadata={"help": "Width passed to \\includegraphics", "importance": "advanced"},
    )
    table_placement: str = field(
        default=DEFAULT_LATEX_TABLE_PLACEMENT,
        metadata={"help": "Placement specifier for table environments", "importance": "advanced"},
    )
    column_spec: str = field(
        default=DEFAULT_LATEX_COLUMN_SPEC,
        metadata={"help": "Column specifier repeated per table column", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate string fields.

        Raises
        ------
        ValueError
            If the column specifier or image width is empty.

        """
        super().__post_init__()
        if not self.column_spec.strip():
            raise ValueError("column_spec must not be empty")
        if not self.image_width.strip():
            raise ValueError("image_width must not be empty")
