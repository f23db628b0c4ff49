#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/renderers/__init__.py
"""Renderers that turn the md2tex document tree into output text."""

from md2tex.renderers.base import BaseRenderer
from md2tex.renderers.latex import LatexRenderer

__all__ = ["BaseRenderer", "LatexRenderer"]
