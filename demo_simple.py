#!/usr/bin/env python3
"""
arXiv Digest - Console Search Demo

This script runs one search against the arXiv API and prints the results:
1. Fetch the Atom feed for a query
2. Parse it into Paper records
3. Render a plain-text report (or HTML with --html)

Usage:
    python demo_simple.py [--html] [--max-results N] [query words...]
"""

import argparse
import logging
import sys
import time

from arxiv_digest.config import Config
from arxiv_digest.logging_config import setup_logging

# Configure logging first
config = Config.from_env()
setup_logging(config.log)
logger = logging.getLogger(__name__)

from arxiv_digest.exceptions import ArxivError
from arxiv_digest.manager import PaperSearchService


def print_section(title: str, icon: str = "⚡"):
    """Print a section header."""
    print(f"\n{'=' * 80}")
    print(f"{icon}  {title}")
    print(f"{'=' * 80}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search arXiv and print the results")
    parser.add_argument(
        "query",
        nargs="*",
        help=f"Search terms (default: {config.arxiv.default_query!r})",
    )
    parser.add_argument(
        "--html",
        action="store_true",
        help="Print an HTML fragment instead of the text report",
    )
    parser.add_argument(
        "--max-results",
        type=int,
        default=None,
        help=f"Number of papers to fetch (default: {config.arxiv.max_results})",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    query = " ".join(args.query) or config.arxiv.default_query

    print_section(f"Searching arXiv: {query}", icon="🔎")

    service = PaperSearchService(config)
    start = time.time()
    try:
        papers = service.search(query, args.max_results)
        output = service.renderer.render_html(papers) if args.html else service.renderer.render_table(papers)
    except ArxivError as e:
        logger.error(f"Search failed: {e}")
        print(f"✗ Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\n⚠ Search interrupted by user")
        return 1

    print(output)
    print(f"✓ {len(papers)} papers in {time.time() - start:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
