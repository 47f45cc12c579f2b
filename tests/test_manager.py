"""
Unit tests for the search service and JSON helpers.
"""

import json

import pytest

from arxiv_digest.exceptions import NoResultsError
from arxiv_digest.manager import PaperSearchService, papers_from_json, papers_to_json
from arxiv_digest.reports.renderer import PaperRenderer
from tests.test_utils import StubFetcher, build_feed


class TestPaperSearchService:
    """Tests for PaperSearchService."""

    def test_search(self, config, stub_fetcher):
        service = PaperSearchService(config, fetcher=stub_fetcher)

        papers = service.search("transformers", max_results=2)

        assert [p.title for p in papers] == [
            "Attention Is All You Need",
            "BERT: Pre-training of Deep Bidirectional Transformers",
        ]
        assert stub_fetcher.calls == [("transformers", 2)]

    @pytest.mark.parametrize("query", [None, "", "   "])
    def test_search_uses_default_query(self, config, stub_fetcher, query):
        service = PaperSearchService(config, fetcher=stub_fetcher)

        service.search(query)

        assert stub_fetcher.calls == [("large language models", None)]

    def test_search_table(self, config, stub_fetcher):
        service = PaperSearchService(config, fetcher=stub_fetcher)

        output = service.search_table("transformers")

        assert " Research Papers " in output
        assert "\n1. Attention Is All You Need\n" in output
        assert "\n2. BERT: Pre-training of Deep Bidirectional Transformers\n" in output

    def test_search_html(self, config, stub_fetcher):
        service = PaperSearchService(config, fetcher=stub_fetcher)

        output = service.search_html("transformers")

        assert output.count('<div class="paper-abstract">') == 2
        assert "<td>Ashish Vaswani et al.</td>" in output

    def test_custom_renderer(self, config, stub_fetcher):
        class NarrowRenderer(PaperRenderer):
            LINE_WIDTH = 40

        service = PaperSearchService(config, fetcher=stub_fetcher, renderer=NarrowRenderer())
        output = service.search_table("transformers")

        assert output.split("\n")[1] == f"{' Research Papers ':-^40}"

    def test_no_results_propagates(self, config):
        service = PaperSearchService(config, fetcher=StubFetcher(build_feed()))

        with pytest.raises(NoResultsError):
            service.search_table("transformers")


class TestJsonHelpers:
    """Tests for papers_to_json() and papers_from_json()."""

    def test_to_json(self, papers):
        data = json.loads(papers_to_json(papers))

        assert data[0] == {
            "title": "Introduction to Transformers",
            "authors": ["Alice", "Bob", "Carol"],
            "abstract_text": "A comprehensive introduction to transformer models.",
            "url": "https://arxiv.org/pdf/2301.00001v1.pdf",
            "categories": ["cs.CL", "cs.LG"],
        }

    def test_from_json(self, papers):
        assert papers_from_json(papers_to_json(papers)) == papers

    def test_from_json_missing_lists(self):
        papers = papers_from_json('[{"title": "T", "abstract_text": "A", "url": "https://x"}]')

        assert papers[0].authors == []
        assert papers[0].categories == []

    @pytest.mark.parametrize("text", ["{}", "[{}]", "not json", '[{"title": "T"}]'])
    def test_from_json_invalid(self, text):
        with pytest.raises(ValueError):
            papers_from_json(text)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
