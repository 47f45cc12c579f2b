"""
Report rendering module.

This module provides PaperRenderer for turning Paper lists into a
plain-text table or an HTML fragment.
"""

from arxiv_digest.reports.renderer import (
    PaperRenderer,
    format_authors,
    format_categories,
    render_html,
    render_table,
    truncate,
)

__all__ = [
    "PaperRenderer",
    "format_authors",
    "format_categories",
    "render_html",
    "render_table",
    "truncate",
]
