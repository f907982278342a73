"""Text exporters for render models.

Organized by target format:

- markdown: GitHub pipe tables
- latex: tabular environments for papers
- html: standalone <table> fragments
- files: writing one or more formats to disk
"""

from __future__ import annotations

from tablecraft.export.files import save_table
from tablecraft.export.html import to_html
from tablecraft.export.latex import escape_latex, to_latex
from tablecraft.export.markdown import to_markdown

__all__ = [
    "escape_latex",
    "save_table",
    "to_html",
    "to_latex",
    "to_markdown",
]
