#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/utils/escape.py
"""LaTeX text escaping.

Escaping is a context-free character substitution applied to literal text
destined for the LaTeX body. It is never applied to attribute values such
as link targets or image paths, which are emitted verbatim.

"""

from __future__ import annotations

# Order matters: the backslash rule runs first so later replacements that
# introduce backslashes are not re-escaped, and the dollar rule runs before
# the ``<``/``>`` rules that introduce dollars of their own.
LATEX_SPECIAL_CHARS: tuple[tuple[str, str], ...] = (
    ("\\", r"\textbackslash{}"),
    ("&", r"\&"),
    ("%", r"\%"),
    ("$", r"\$"),
    ("#", r"\#"),
    ("_", r"\_"),
    ("~", r"\textasciitilde{}"),
    ("^", r"\textasciicircum{}"),
    ("<", "$<$"),
    (">", "$>$"),
)


def escape_latex(text: str) -> str:
    r"""Escape special LaTeX characters in text content.

    Applies the ten substitutions of ``LATEX_SPECIAL_CHARS`` in order.
    Braces are left alone.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text

    Notes
    -----
    The function is not idempotent. It has no notion of text that is already
    escaped, so a second pass re-escapes the backslashes the first pass
    introduced, and input that already contains LaTeX commands comes out
    doubly escaped.

    Examples
    --------
        >>> escape_latex("50% of $10 & more")
        '50\\% of \\$10 \\& more'
        >>> escape_latex(escape_latex("\\"))
        '\\textbackslash{}textbackslash{}'

    """
    if not text:
        return text

    result = text
    for char, replacement in LATEX_SPECIAL_CHARS:
        result = result.replace(char, replacement)

    return result


__all__ = ["LATEX_SPECIAL_CHARS", "escape_latex"]
