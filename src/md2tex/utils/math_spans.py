#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/utils/math_spans.py
"""Post-render restoration of dollar-delimited math.

The renderer emits math elements with their original ``$...$`` and
``$$...$$`` delimiters and escapes every other dollar sign to ``\\$``.
``restore_math`` runs once over the finished document and turns the
surviving delimiter pairs into ``\\(...\\)`` and ``\\[...\\]``.

"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# A dollar preceded by a backslash is an escaped literal, never a delimiter.
# The ``$<$``/``$>$`` tokens from escaping are matched before any span so that
# neighbouring tokens (``$>$$>$``) never pair up as a ``$$`` delimiter.
MATH_SPAN_PATTERN = re.compile(
    r"(?<!\\)\$(?P<comparison>[<>])\$"
    r"|(?<!\\)\$\$(?P<display>.*?)(?<!\\)\$\$"
    r"|(?<!\\)\$(?P<inline>[^\n]*?)(?<!\\)\$",
    re.DOTALL,
)


def restore_math(latex: str) -> str:
    r"""Rewrite dollar-delimited math spans as LaTeX math delimiters.

    The document is scanned once from left to right. At each position an
    escaped comparison token (``$<$`` or ``$>$``) is tried first, then a
    display span (``$$...$$``), then an inline span (``$...$``). Spans use
    shortest matches, so adjacent spans stay separate. Inner content is kept
    unchanged. Display spans may cross line breaks; inline spans may not.

    Parameters
    ----------
    latex : str
        Fully rendered LaTeX document

    Returns
    -------
    str
        Document with math delimiters restored

    Notes
    -----
    The pass is context-free. Dollar pairs inside ``verbatim`` blocks are
    rewritten as well, and the ``$<$``/``$>$`` tokens produced by escaping
    become ``\(<\)``/``\(>\)``, which typeset identically.

    Examples
    --------
        >>> restore_math("$$a$$ and $$b$$")
        '\\[a\\] and \\[b\\]'
        >>> restore_math("costs \\$5, $x$")
        'costs \\$5, \\(x\\)'
        >>> restore_math("a $>$$>$ b")
        'a \\(>\\)\\(>\\) b'

    """
    counts = {"comparison": 0, "display": 0, "inline": 0}

    def _replace(match: re.Match[str]) -> str:
        if match.group("comparison") is not None:
            counts["comparison"] += 1
            return f"\\({match.group('comparison')}\\)"
        if match.group("display") is not None:
            counts["display"] += 1
            return f"\\[{match.group('display')}\\]"
        counts["inline"] += 1
        return f"\\({match.group('inline')}\\)"

    result = MATH_SPAN_PATTERN.sub(_replace, latex)

    if counts["display"] or counts["inline"]:
        logger.debug(f"Restored {counts['display']} display and {counts['inline']} inline math spans")

    return result


__all__ = ["MATH_SPAN_PATTERN", "restore_math"]
