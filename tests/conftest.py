"""
pytest configuration and fixtures for arXiv Digest tests.

This module provides shared fixtures for all test modules.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from arxiv_digest.config import ArxivConfig, Config, LogConfig, ServerConfig
from arxiv_digest.models import Paper

# Import test utilities
from tests.test_utils import (
    StubFetcher,
    build_entry,
    build_feed,
    setup_test_env,
    cleanup_test_env,
)


@pytest.fixture(scope="session", autouse=True)
def test_env_guard():
    """
    Auto-enabled environment guard that runs for all tests.

    Points logging at a temporary directory for the whole session and
    cleans up afterwards.
    """
    setup_test_env()
    yield
    cleanup_test_env()


@pytest.fixture(scope="function")
def config(tmp_path):
    """Create a test configuration that never touches the working tree."""
    return Config(
        arxiv=ArxivConfig(
            api_url="http://export.arxiv.org/api/query",
            max_results=5,
            timeout=10,
            default_query="large language models",
        ),
        server=ServerConfig(),
        log=LogConfig(log_dir=tmp_path / "logs", console_output=False),
    )


@pytest.fixture(scope="function")
def two_entry_feed():
    """A well-formed feed with two complete entries."""
    return build_feed(
        build_entry(
            title="Attention Is All You Need",
            authors=["Ashish Vaswani", "Noam Shazeer", "Niki Parmar"],
            summary="The dominant sequence transduction models are based on recurrent networks.",
            links=[
                "http://arxiv.org/abs/1706.03762v7",
                "http://arxiv.org/pdf/1706.03762v7",
            ],
            categories=["cs.CL", "cs.LG"],
        ),
        build_entry(
            title="BERT: Pre-training of Deep Bidirectional Transformers",
            authors=["Jacob Devlin", "Ming-Wei Chang"],
            summary="We introduce a new language representation model called BERT.",
            links=["http://arxiv.org/abs/1810.04805v2"],
            categories=["cs.CL"],
        ),
    )


@pytest.fixture(scope="function")
def papers():
    """Create a list of parsed-looking papers."""
    return [
        Paper(
            title="Introduction to Transformers",
            authors=["Alice", "Bob", "Carol"],
            abstract_text="A comprehensive introduction to transformer models.",
            url="https://arxiv.org/pdf/2301.00001v1.pdf",
            categories=["cs.CL", "cs.LG"],
        ),
        Paper(
            title="Attention Mechanisms Deep Dive",
            authors=["Dave"],
            abstract_text="Deep dive into attention mechanisms for NLP.",
            url="https://arxiv.org/pdf/2301.00002v1.pdf",
            categories=["cs.AI"],
        ),
    ]


@pytest.fixture(scope="function")
def stub_fetcher(two_entry_feed):
    """A fetcher that returns the two-entry feed without network access."""
    return StubFetcher(two_entry_feed.encode("utf-8"))
