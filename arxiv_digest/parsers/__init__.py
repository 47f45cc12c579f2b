"""
Parsers module for turning arXiv Atom feeds into Paper records.

This module provides a streaming, single-pass Atom parser and the URL
normalization applied to entry links.
"""

from arxiv_digest.parsers.atom_parser import (
    AtomFeedParser,
    FieldTag,
    normalize_url,
    parse_feed,
)

__all__ = [
    "AtomFeedParser",
    "FieldTag",
    "normalize_url",
    "parse_feed",
]
