"""
Search service tying the fetcher, parser and renderer together.

This module provides the PaperSearchService class, the single entry point
used by the HTTP API and the console demo. It owns no mutable state beyond
its collaborators, so one instance can serve concurrent requests.
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional, Sequence

from arxiv_digest.config import Config
from arxiv_digest.downloaders.arxiv_downloader import ArxivFetcher
from arxiv_digest.downloaders.base import BaseFetcher
from arxiv_digest.models import Paper
from arxiv_digest.reports.renderer import PaperRenderer

logger = logging.getLogger(__name__)


class PaperSearchService:
    """
    Orchestrates feed fetching, parsing and rendering.

    Typical usage:
        >>> config = Config.from_env()
        >>> service = PaperSearchService(config)
        >>> print(service.search_table("retrieval augmented generation"))

    Attributes:
        config: Application configuration.
        fetcher: Feed fetcher used for searches.
        renderer: Renderer for table and HTML output.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        fetcher: Optional[BaseFetcher] = None,
        renderer: Optional[PaperRenderer] = None,
    ):
        """
        Initialize the search service.

        Args:
            config: Application configuration. If None, loads from environment.
            fetcher: Feed fetcher. Defaults to an ArxivFetcher built from
                ``config.arxiv``.
            renderer: Output renderer. Defaults to PaperRenderer().
        """
        self.config = config or Config.from_env()
        self.fetcher = fetcher or ArxivFetcher(self.config.arxiv)
        self.renderer = renderer or PaperRenderer()

    def search(
        self,
        query: Optional[str] = None,
        max_results: Optional[int] = None,
    ) -> List[Paper]:
        """
        Search for papers.

        Args:
            query: Free-text search terms. Uses the configured default query
                when None or blank.
            max_results: Number of entries to request.

        Returns:
            Papers in feed order. Never empty.

        Raises:
            ArxivError: If fetching or parsing fails.
        """
        if not query or not query.strip():
            query = self.config.arxiv.default_query

        logger.info(f"Searching {self.fetcher.source_name} for '{query}'")
        papers = self.fetcher.search(query, max_results)
        logger.info(f"Search for '{query}' returned {len(papers)} papers")
        return papers

    def search_table(
        self,
        query: Optional[str] = None,
        max_results: Optional[int] = None,
    ) -> str:
        """Search and render the results as a plain-text report."""
        return self.renderer.render_table(self.search(query, max_results))

    def search_html(
        self,
        query: Optional[str] = None,
        max_results: Optional[int] = None,
    ) -> str:
        """Search and render the results as an HTML fragment."""
        return self.renderer.render_html(self.search(query, max_results))


def papers_to_json(papers: Sequence[Paper]) -> str:
    """
    Serialize papers to a JSON array.

    Args:
        papers: Papers to serialize.

    Returns:
        JSON text, one object per paper.
    """
    return json.dumps([paper.to_dict() for paper in papers], ensure_ascii=False)


def papers_from_json(text: str) -> List[Paper]:
    """
    Deserialize papers from a JSON array produced by papers_to_json().

    Args:
        text: JSON text.

    Returns:
        List of Paper objects.

    Raises:
        ValueError: If the text is not a JSON array of paper objects.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of papers")
    try:
        return [Paper.from_dict(item) for item in data]
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid paper record: {e}") from e
