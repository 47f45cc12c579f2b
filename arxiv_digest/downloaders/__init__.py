"""
Downloaders module for fetching search-result feeds.

Each fetcher implements the BaseFetcher interface and returns the raw
feed payload for a query; parsing is done by arxiv_digest.parsers.
"""

from arxiv_digest.downloaders.base import BaseFetcher
from arxiv_digest.downloaders.arxiv_downloader import ArxivFetcher

__all__ = [
    "BaseFetcher",
    "ArxivFetcher",
]
