"""
Papers router for arXiv search endpoints.

Endpoints for searching arXiv and returning the results as JSON, a
plain-text table, or an HTML fragment.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse, PlainTextResponse

from backend.dependencies import get_search_service
from backend.models.paper import PaperListResponse, PaperResponse
from arxiv_digest.manager import PaperSearchService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/search", response_model=PaperListResponse)
def search_papers(
    query: Optional[str] = None,
    max_results: Optional[int] = Query(None, ge=1, le=100),
    service: PaperSearchService = Depends(get_search_service),
):
    """
    Search arXiv and return structured results.

    Args:
        query: Free-text search terms (defaults to the configured query)
        max_results: Number of papers to return (1-100)

    Returns:
        List of papers in feed order.
    """
    effective_query = (query or "").strip() or service.config.arxiv.default_query
    papers = service.search(effective_query, max_results)

    return PaperListResponse(
        query=effective_query,
        papers=[PaperResponse.model_validate(paper) for paper in papers],
        total=len(papers),
    )


@router.get("/table", response_class=PlainTextResponse)
def search_papers_table(
    query: Optional[str] = None,
    max_results: Optional[int] = Query(None, ge=1, le=100),
    service: PaperSearchService = Depends(get_search_service),
):
    """
    Search arXiv and return a fixed-width plain-text report.

    Args:
        query: Free-text search terms (defaults to the configured query)
        max_results: Number of papers to return (1-100)
    """
    return service.search_table(query, max_results)


@router.get("/html", response_class=HTMLResponse)
def search_papers_html(
    query: Optional[str] = None,
    max_results: Optional[int] = Query(None, ge=1, le=100),
    service: PaperSearchService = Depends(get_search_service),
):
    """
    Search arXiv and return an HTML fragment.

    Args:
        query: Free-text search terms (defaults to the configured query)
        max_results: Number of papers to return (1-100)
    """
    return service.search_html(query, max_results)
