#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/utils/__init__.py
"""Utility modules for the md2tex package.

This package contains LaTeX escaping, math span restoration, file I/O
helpers and dependency checking decorators.
"""

from md2tex.utils.escape import escape_latex
from md2tex.utils.math_spans import restore_math

__all__ = [
    "escape_latex",
    "restore_math",
]
