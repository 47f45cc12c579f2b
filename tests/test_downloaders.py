"""
Unit tests for feed fetchers.

Tests the base fetcher interface and the arXiv fetcher with mocked HTTP
sessions, plus an opt-in live call against the arXiv API.
"""

import pytest
import requests
from unittest.mock import Mock

from arxiv_digest.config import ArxivConfig
from arxiv_digest.downloaders.arxiv_downloader import ArxivFetcher
from arxiv_digest.downloaders.base import BaseFetcher
from arxiv_digest.exceptions import FetchError, NoResultsError
from arxiv_digest.models import Paper
from tests.test_utils import build_feed


def _mock_session(content=b"", status_code=200, error=None):
    """Build a requests.Session stand-in returning one canned response."""
    response = Mock()
    response.content = content
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Server Error")
    else:
        response.raise_for_status.return_value = None

    session = Mock(spec=requests.Session)
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return session


class TestArxivConfig:
    """Tests for ArxivConfig query building."""

    def test_build_params(self):
        """Test query parameters for the arXiv API."""
        config = ArxivConfig(max_results=5)
        params = config.build_params("graph neural networks", 3)

        assert params == {
            "search_query": "all:graph neural networks",
            "start": 0,
            "max_results": 3,
        }

    def test_build_params_default_max_results(self):
        """Test fallback to the configured max_results."""
        config = ArxivConfig(max_results=7)

        assert config.build_params("x")["max_results"] == 7


class TestArxivFetcher:
    """Tests for ArxivFetcher."""

    def test_source_name(self):
        """Test source name property."""
        fetcher = ArxivFetcher(ArxivConfig(), session=_mock_session())
        assert fetcher.source_name == "arxiv"

    def test_is_base_fetcher(self):
        fetcher = ArxivFetcher(ArxivConfig(), session=_mock_session())
        assert isinstance(fetcher, BaseFetcher)

    def test_fetch_feed_request(self, config):
        """Test the outgoing request and returned payload."""
        session = _mock_session(content=b"<feed/>")
        fetcher = ArxivFetcher(config.arxiv, session=session)

        payload = fetcher.fetch_feed("  diffusion models ", max_results=2)

        assert payload == b"<feed/>"
        session.get.assert_called_once_with(
            "http://export.arxiv.org/api/query",
            params={"search_query": "all:diffusion models", "start": 0, "max_results": 2},
            timeout=10,
        )

    def test_fetch_feed_uses_default_max_results(self, config):
        session = _mock_session(content=b"<feed/>")
        fetcher = ArxivFetcher(config.arxiv, session=session)

        fetcher.fetch_feed("transformers")

        assert session.get.call_args.kwargs["params"]["max_results"] == 5

    def test_empty_query(self, config):
        """Test that a blank query is rejected before any request."""
        session = _mock_session()
        fetcher = ArxivFetcher(config.arxiv, session=session)

        with pytest.raises(ValueError):
            fetcher.fetch_feed("   ")
        session.get.assert_not_called()

    def test_network_error(self, config):
        """Test that connection failures become FetchError."""
        session = _mock_session(error=requests.ConnectionError("connection refused"))
        fetcher = ArxivFetcher(config.arxiv, session=session)

        with pytest.raises(FetchError) as exc_info:
            fetcher.fetch_feed("transformers")

        assert str(exc_info.value).startswith("Network error:")
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_http_error_status(self, config):
        """Test that a 5xx response becomes FetchError."""
        session = _mock_session(status_code=503)
        fetcher = ArxivFetcher(config.arxiv, session=session)

        with pytest.raises(FetchError):
            fetcher.fetch_feed("transformers")

    def test_timeout_is_not_retried(self, config):
        """Test that a timeout surfaces after a single attempt."""
        session = _mock_session(error=requests.Timeout("read timed out"))
        fetcher = ArxivFetcher(config.arxiv, session=session)

        with pytest.raises(FetchError):
            fetcher.fetch_feed("transformers")
        assert session.get.call_count == 1

    def test_search_parses_feed(self, config, two_entry_feed):
        """Test fetch followed by parse."""
        session = _mock_session(content=two_entry_feed.encode("utf-8"))
        fetcher = ArxivFetcher(config.arxiv, session=session)

        papers = fetcher.search("transformers")

        assert len(papers) == 2
        assert all(isinstance(p, Paper) for p in papers)
        assert papers[1].url == "https://arxiv.org/pdf/1810.04805v2.pdf"

    def test_search_no_results(self, config):
        """Test that an empty feed propagates NoResultsError."""
        session = _mock_session(content=build_feed().encode("utf-8"))
        fetcher = ArxivFetcher(config.arxiv, session=session)

        with pytest.raises(NoResultsError):
            fetcher.search("nothing matches this")


@pytest.mark.integration
@pytest.mark.slow
class TestArxivFetcherReal:
    """Integration tests for ArxivFetcher with real API calls."""

    def test_real_arxiv_search(self):
        """Test fetching and parsing real papers from the arXiv API."""
        fetcher = ArxivFetcher(ArxivConfig(max_results=2))

        papers = fetcher.search("large language models")

        assert 1 <= len(papers) <= 2
        for paper in papers:
            assert isinstance(paper, Paper)
            assert len(paper.title) > 0
            assert paper.url.startswith("https://")
            assert isinstance(paper.authors, list)
            assert isinstance(paper.categories, list)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
