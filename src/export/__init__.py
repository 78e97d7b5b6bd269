"""Export Apple Books highlights as Markdown."""

from .frontmatter import read_preserved
from .markdown import render_book
from .writer import ExportSummary, MarkdownExport, slugify

__all__ = [
    "ExportSummary",
    "MarkdownExport",
    "read_preserved",
    "render_book",
    "slugify",
]
