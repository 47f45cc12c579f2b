"""
arXiv feed fetcher implementation.

This module implements the BaseFetcher interface for the arXiv query API
(http://export.arxiv.org/api/query). It issues a single GET request per
search and hands the raw Atom payload back undecoded, so the parser can
report invalid UTF-8 as a DecodingError.

There are no retries or caching; a failed request surfaces immediately as
FetchError.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from arxiv_digest.config import ArxivConfig
from arxiv_digest.downloaders.base import BaseFetcher
from arxiv_digest.exceptions import FetchError

logger = logging.getLogger(__name__)


class ArxivFetcher(BaseFetcher):
    """
    Fetcher for the arXiv Atom query API.

    Typical usage:
        >>> fetcher = ArxivFetcher(ArxivConfig.from_env())
        >>> feed = fetcher.fetch_feed("large language models", max_results=5)
        >>> papers = fetcher.search("large language models")

    Attributes:
        config: arXiv API configuration (endpoint, timeout, defaults).
        session: HTTP session used for requests.
    """

    def __init__(
        self,
        config: Optional[ArxivConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the arXiv fetcher.

        Args:
            config: arXiv API configuration. If None, loads from environment.
            session: HTTP session to reuse. If None, a new one is created.
        """
        self.config = config or ArxivConfig.from_env()
        self.session = session or requests.Session()

    @property
    def source_name(self) -> str:
        """Return 'arxiv' as the source identifier."""
        return "arxiv"

    def fetch_feed(self, query: str, max_results: Optional[int] = None) -> bytes:
        """
        Fetch the Atom feed for a query from arXiv.

        The query is matched against all fields (``search_query=all:<query>``)
        and results start at offset 0.

        Args:
            query: Free-text search terms.
            max_results: Number of entries to request. Uses
                ``config.max_results`` when None.

        Returns:
            The raw feed document (UTF-8 encoded bytes).

        Raises:
            ValueError: If the query is empty.
            FetchError: If the request fails or returns an error status.
        """
        if not query or not query.strip():
            raise ValueError("Search query must not be empty")

        params = self.config.build_params(query.strip(), max_results)
        logger.info(
            f"Querying arXiv for '{params['search_query']}' "
            f"(max_results={params['max_results']})"
        )

        try:
            response = self.session.get(
                self.config.api_url,
                params=params,
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"arXiv request failed: {e}")
            raise FetchError(str(e)) from e

        logger.debug(f"Received {len(response.content)} bytes from arXiv")
        return response.content
