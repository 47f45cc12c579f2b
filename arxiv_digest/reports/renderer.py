"""
Rendering of Paper records for people and browsers.

Two independent output formats are supported:
- A fixed-width plain-text table followed by one detail block per paper
- An HTML fragment with a summary table and one abstract block per paper

Both are pure functions of their input: the same papers always produce
byte-identical output.
"""

from __future__ import annotations

import html
import logging
from typing import Sequence

from arxiv_digest.exceptions import FormattingError
from arxiv_digest.models import Paper

logger = logging.getLogger(__name__)

ELLIPSIS = "..."


def format_authors(authors: Sequence[str]) -> str:
    """
    Format an author list for a summary cell.

    More than two authors collapse to the first author plus "et al.".

    Examples:
        >>> format_authors(["Alice", "Bob"])
        'Alice, Bob'
        >>> format_authors(["Alice", "Bob", "Carol"])
        'Alice et al.'
    """
    if len(authors) > 2:
        return f"{authors[0]} et al."
    return ", ".join(authors)


def format_categories(categories: Sequence[str]) -> str:
    """Join categories with a comma-space separator."""
    return ", ".join(categories)


def truncate(text: str, width: int) -> str:
    """
    Fit text into a column of the given width.

    Text longer than ``width - 3`` characters is cut to that length and
    gets an ellipsis. Length is counted in code points.

    Examples:
        >>> truncate("short", 20)
        'short'
        >>> truncate("a" * 20, 10)
        'aaaaaaa...'
    """
    budget = width - len(ELLIPSIS)
    if len(text) > budget:
        return text[:budget] + ELLIPSIS
    return text


class PaperRenderer:
    """
    Renders paper lists as a plain-text report or an HTML fragment.

    Typical usage:
        >>> renderer = PaperRenderer()
        >>> print(renderer.render_table(papers))
        >>> page = renderer.render_html(papers)

    Attributes:
        TITLE_WIDTH: Title column width in the text table.
        AUTHORS_WIDTH: Authors column width in the text table.
        CATEGORIES_WIDTH: Categories column width in the text table.
        URL_WIDTH: URL column width in the text table.
        LINE_WIDTH: Width of banners and separator rules.
    """

    TITLE_WIDTH = 50
    AUTHORS_WIDTH = 20
    CATEGORIES_WIDTH = 15
    URL_WIDTH = 30
    LINE_WIDTH = 120

    def render_table(self, papers: Sequence[Paper]) -> str:
        """
        Render papers as a fixed-width plain-text report.

        The report has a summary table with truncated cells, then a detail
        section with every field in full.

        Args:
            papers: Papers to render, in display order.

        Returns:
            The report text.

        Raises:
            FormattingError: If a paper field cannot be formatted.
        """
        try:
            lines = [
                "",
                self._banner(" Research Papers "),
                self._row("Title", "Authors", "Categories", "URL"),
                "-" * self.LINE_WIDTH,
            ]

            for paper in papers:
                lines.append(
                    self._row(
                        truncate(paper.title, self.TITLE_WIDTH),
                        truncate(format_authors(paper.authors), self.AUTHORS_WIDTH),
                        truncate(format_categories(paper.categories), self.CATEGORIES_WIDTH),
                        truncate(paper.url, self.URL_WIDTH),
                    )
                )

            lines.append("")
            lines.append(self._banner(" Abstracts "))
            for i, paper in enumerate(papers, 1):
                lines.extend([
                    "",
                    f"{i}. {paper.title}",
                    f"Authors: {', '.join(paper.authors)}",
                    "",
                    "Abstract:",
                    paper.abstract_text,
                    "",
                    f"Categories: {format_categories(paper.categories)}",
                    "",
                    f"URL: {paper.url}",
                    "",
                    "-" * self.LINE_WIDTH,
                ])
        except (TypeError, ValueError, AttributeError) as e:
            logger.error(f"Failed to render paper table: {e}")
            raise FormattingError(str(e)) from e

        return "\n".join(lines) + "\n"

    def render_html(self, papers: Sequence[Paper]) -> str:
        """
        Render papers as an HTML fragment.

        Produces a summary table, one row per paper, followed by a list of
        abstract blocks. All interpolated text is HTML-escaped.

        Args:
            papers: Papers to render, in display order.

        Returns:
            The HTML fragment.

        Raises:
            FormattingError: If a paper field cannot be formatted.
        """
        try:
            parts = [
                '<table class="papers">',
                "<thead>",
                "<tr><th>Title</th><th>Authors</th><th>Categories</th><th>URL</th></tr>",
                "</thead>",
                "<tbody>",
            ]
            for paper in papers:
                parts.append(
                    "<tr>"
                    f"<td>{_esc(paper.title)}</td>"
                    f"<td>{_esc(format_authors(paper.authors))}</td>"
                    f"<td>{_esc(format_categories(paper.categories))}</td>"
                    f"<td>{self._link(paper.url)}</td>"
                    "</tr>"
                )
            parts.extend(["</tbody>", "</table>", '<div class="abstracts">'])

            for paper in papers:
                parts.extend([
                    '<div class="paper-abstract">',
                    f"<h3>{_esc(paper.title)}</h3>",
                    f'<p class="authors">{_esc(", ".join(paper.authors))}</p>',
                    f'<p class="abstract">{_esc(paper.abstract_text)}</p>',
                    f'<p class="categories">{_esc(format_categories(paper.categories))}</p>',
                    f"<p>{self._link(paper.url)}</p>",
                    "</div>",
                ])
            parts.append("</div>")
        except (TypeError, ValueError, AttributeError) as e:
            logger.error(f"Failed to render paper HTML: {e}")
            raise FormattingError(str(e)) from e

        return "\n".join(parts) + "\n"

    def _banner(self, title: str) -> str:
        return f"{title:-^{self.LINE_WIDTH}}"

    def _row(self, title: str, authors: str, categories: str, url: str) -> str:
        return (
            f"{title:<{self.TITLE_WIDTH}} | "
            f"{authors:<{self.AUTHORS_WIDTH}} | "
            f"{categories:<{self.CATEGORIES_WIDTH}} | "
            f"{url:<{self.URL_WIDTH}}"
        )

    @staticmethod
    def _link(url: str) -> str:
        return f'<a href="{_esc(url)}" target="_blank" rel="noopener noreferrer">View Paper</a>'


def _esc(text: str) -> str:
    return html.escape(text, quote=True)


def render_table(papers: Sequence[Paper]) -> str:
    """Render papers as a plain-text report with the default renderer."""
    return PaperRenderer().render_table(papers)


def render_html(papers: Sequence[Paper]) -> str:
    """Render papers as an HTML fragment with the default renderer."""
    return PaperRenderer().render_html(papers)
