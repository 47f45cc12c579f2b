"""
Dependency injection for FastAPI backend.

Provides configuration and the search service as dependencies so tests
can swap them out with ``app.dependency_overrides``.
"""

from fastapi import Depends

from arxiv_digest.config import Config
from arxiv_digest.manager import PaperSearchService


def get_config() -> Config:
    """
    Get application configuration.

    Loaded from the environment (and .env file) for each request.
    """
    return Config.from_env()


def get_search_service(config: Config = Depends(get_config)) -> PaperSearchService:
    """
    Get PaperSearchService instance.

    Args:
        config: Application configuration from dependency injection.

    Returns:
        PaperSearchService instance for the current request.
    """
    return PaperSearchService(config)
