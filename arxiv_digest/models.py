"""
Paper record produced by the Atom feed parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Paper:
    """
    One arXiv entry.

    Attributes:
        title: Paper title as emitted by the feed, whitespace-trimmed.
        authors: Author names in document order. May be empty.
        abstract_text: The entry summary.
        url: Canonical link, always HTTPS and pointing at the PDF where
            the feed link allows it.
        categories: Taxonomy terms in document order. May be empty.
    """

    title: str = ""
    authors: List[str] = field(default_factory=list)
    abstract_text: str = ""
    url: str = ""
    categories: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert paper to dictionary."""
        return {
            "title": self.title,
            "authors": list(self.authors),
            "abstract_text": self.abstract_text,
            "url": self.url,
            "categories": list(self.categories),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Paper":
        """
        Create a paper from dictionary.

        Args:
            data: Dictionary containing paper fields. Missing list fields
                default to empty lists.

        Returns:
            A Paper instance.
        """
        return cls(
            title=data["title"],
            authors=list(data.get("authors", [])),
            abstract_text=data["abstract_text"],
            url=data["url"],
            categories=list(data.get("categories", [])),
        )
