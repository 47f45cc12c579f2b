"""
Pydantic models for API requests and responses.
"""

from .paper import (
    PaperResponse,
    PaperListResponse,
)

__all__ = [
    "PaperResponse",
    "PaperListResponse",
]
