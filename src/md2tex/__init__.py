"""md2tex - convert Markdown documents into LaTeX body fragments.

md2tex parses Markdown with mistune into a small document tree of text
leaves and tagged elements, renders that tree depth-first into LaTeX, and
finally rewrites dollar-delimited math spans as LaTeX math delimiters.

Key Features
------------
- Headings 1-4 as ``\\chapter`` to ``\\subsubsection``
- Itemize/enumerate lists, bold, italic, inline code and verbatim blocks
- Hyperlinks, images as figures, and pipe tables as tabular floats
- Inline and display math preserved through escaping
- Raw HTML fragments parsed with BeautifulSoup

Examples
--------
Convert a string:

    >>> from md2tex import to_latex
    >>> to_latex("# Title\\n\\nSome **bold** text.")
    '\\\\chapter{Title}\\nSome \\\\textbf{bold} text.\\n\\n'

Convert a file next to its source:

    >>> from md2tex import convert, default_output_path
    >>> convert("notes.md", default_output_path("notes.md"))

Work with the tree directly:

    >>> from md2tex import to_ast
    >>> from md2tex.renderers import LatexRenderer
    >>> tree = to_ast("Some *text*")
    >>> LatexRenderer().render_to_string(tree)
    'Some \\\\textit{text}\\n\\n'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from md2tex.api import convert, default_output_path, to_ast, to_latex
from md2tex.exceptions import DependencyError, Md2TexError, ParsingError, RenderingError, ValidationError
from md2tex.options import LatexRendererOptions, MarkdownParserOptions

__all__ = [
    "__version__",
    "convert",
    "default_output_path",
    "to_ast",
    "to_latex",
    "DependencyError",
    "Md2TexError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
    "LatexRendererOptions",
    "MarkdownParserOptions",
]
