"""
FastAPI routers for API endpoints.
"""

from .papers import router as papers_router

__all__ = [
    "papers_router",
]
