"""
Base fetcher interface for paper search sources.

This module defines the abstract interface that feed fetchers implement.
A fetcher only knows how to obtain the raw feed payload; turning it into
Paper records is left to the Atom parser.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from arxiv_digest.models import Paper
from arxiv_digest.parsers import parse_feed


class BaseFetcher(ABC):
    """
    Abstract base class for feed fetchers.

    The typical workflow is:
    1. Call fetch_feed() to get the raw Atom document for a query
    2. Or call search() to fetch and parse in one step

    Example:
        >>> fetcher = ArxivFetcher(ArxivConfig())
        >>> papers = fetcher.search("diffusion models", max_results=3)
        >>> for paper in papers:
        ...     print(paper.title)
    """

    @abstractmethod
    def fetch_feed(self, query: str, max_results: Optional[int] = None) -> bytes:
        """
        Fetch the raw search-result feed for a query.

        Args:
            query: Free-text search terms.
            max_results: Number of entries to request. Implementations fall
                back to their configured default when None.

        Returns:
            The raw feed document (UTF-8 encoded bytes).

        Raises:
            ValueError: If the query is empty.
            FetchError: If the request fails.
        """
        pass

    @property
    @abstractmethod
    def source_name(self) -> str:
        """
        Return the name of this paper source.

        Returns:
            String identifier for the source (e.g., 'arxiv').
        """
        pass

    def search(self, query: str, max_results: Optional[int] = None) -> List[Paper]:
        """
        Fetch and parse the feed for a query.

        Args:
            query: Free-text search terms.
            max_results: Number of entries to request.

        Returns:
            Papers in feed order. Never empty.

        Raises:
            FetchError: If the request fails.
            ArxivError: Any parse failure raised by parse_feed().
        """
        return parse_feed(self.fetch_feed(query, max_results))
