"""
Paper Pydantic models.
"""

from pydantic import BaseModel, Field
from typing import List


class PaperResponse(BaseModel):
    """Paper model for API responses."""

    title: str
    authors: List[str] = Field(default_factory=list)
    abstract_text: str = ""
    url: str
    categories: List[str] = Field(default_factory=list)

    class Config:
        from_attributes = True


class PaperListResponse(BaseModel):
    """Search result list response."""

    query: str
    papers: List[PaperResponse]
    total: int
