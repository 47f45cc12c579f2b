"""
arXiv Digest - search arXiv and render the results.

This package provides a small pipeline for:
- Fetching Atom search-result feeds from the arXiv query API
- Parsing feeds into Paper records in a single streaming pass
- Rendering papers as a plain-text table or an HTML fragment
"""

__version__ = "0.1.0"
