"""
Streaming parser for arXiv Atom search-result feeds.

This module turns one Atom XML document into a list of Paper records in a
single forward pass. The XML tokenizer (defusedxml's hardened expat parser)
drives a small state machine through start/data/end callbacks; no element
tree is ever built, so memory stays bounded to the entry being read.

The feed schema is fixed, so only a handful of tags matter:
- ``entry`` delimits one paper
- ``title``, ``author`` and ``summary`` carry text
- ``link`` and ``category`` carry their values in attributes

Only Atom-namespace or un-namespaced tags count; everything else,
including same-named extension elements, is ignored. A feed cut off
mid-stream yields the entries that closed before the cut.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Union
from xml.parsers.expat import errors as expat_errors

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, XMLParser

from arxiv_digest.exceptions import DecodingError, MalformedDocumentError, NoResultsError
from arxiv_digest.models import Paper

logger = logging.getLogger(__name__)


class FieldTag(Enum):
    """Text field the next text event is written into."""

    TITLE = "title"
    AUTHOR = "author"
    ABSTRACT = "abstract"


_FIELD_TAGS = {
    "title": FieldTag.TITLE,
    "author": FieldTag.AUTHOR,
    "summary": FieldTag.ABSTRACT,
}

# Closing any of these clears the field slot
_FIELD_CLOSERS = frozenset(["title", "author", "summary", "link", "category"])

# expat errors raised only because the input stopped mid-document
_END_OF_INPUT_ERRORS = frozenset([
    expat_errors.codes[expat_errors.XML_ERROR_NO_ELEMENTS],
    expat_errors.codes[expat_errors.XML_ERROR_UNCLOSED_TOKEN],
    expat_errors.codes[expat_errors.XML_ERROR_PARTIAL_CHAR],
])


ATOM_NS = "http://www.w3.org/2005/Atom"


def _atom_name(tag: str) -> Optional[str]:
    """Return the local name of an Atom or un-namespaced tag, else None."""
    if not tag.startswith("{"):
        return tag
    namespace, _, local = tag[1:].partition("}")
    return local if namespace == ATOM_NS else None


def _force_https(url: str) -> str:
    if url.startswith("http://"):
        return "https://" + url[len("http://"):]
    if url.startswith("//"):
        return "https:" + url
    return url


def normalize_url(href: str) -> str:
    """
    Normalize a feed link to its canonical form.

    Abstract-page links are rewritten to the PDF rendition. Every link is
    forced onto HTTPS. Applying the function twice gives the same result.

    Args:
        href: The ``href`` attribute of a ``link`` element.

    Returns:
        The canonical URL.

    Examples:
        >>> normalize_url("http://arxiv.org/abs/1234")
        'https://arxiv.org/pdf/1234.pdf'
        >>> normalize_url("http://arxiv.org/pdf/1234")
        'https://arxiv.org/pdf/1234'
        >>> normalize_url("http://example.com/x")
        'https://example.com/x'
    """
    if "/abs/" in href:
        url = _force_https(href.replace("/abs/", "/pdf/", 1))
        return url if url.endswith(".pdf") else url + ".pdf"
    return _force_https(href)


class _FeedState:
    """
    Parser target holding the state of one parse run.

    Implements the ``start``/``data``/``end``/``close`` target interface of
    ElementTree's XMLParser. Character data is buffered until the next tag
    boundary so that text split by the tokenizer (around entity references,
    for instance) reaches the state machine as a single text event.
    """

    def __init__(self):
        self.papers: List[Paper] = []
        self.in_entry = False
        self.current_field: Optional[FieldTag] = None
        self.current_paper: Optional[Paper] = None
        self.current_authors: List[str] = []
        self.current_categories: List[str] = []
        self.entries_opened = 0
        self._text: List[str] = []

    def start(self, tag: str, attrib: dict) -> None:
        self._flush_text()
        name = _atom_name(tag)

        if name == "entry":
            self.in_entry = True
            self.entries_opened += 1
            self.current_paper = Paper()
            self.current_authors.clear()
            self.current_categories.clear()
            return

        if not self.in_entry:
            return

        if name in _FIELD_TAGS:
            self.current_field = _FIELD_TAGS[name]
        elif name == "link":
            href = attrib.get("href")
            if href is not None and self.current_paper is not None:
                self.current_paper.url = normalize_url(href)
        elif name == "category":
            term = attrib.get("term")
            if term is not None:
                self.current_categories.append(term)

    def data(self, text: str) -> None:
        self._text.append(text)

    def end(self, tag: str) -> None:
        self._flush_text()
        name = _atom_name(tag)

        if name == "entry":
            if self.current_paper is not None:
                paper = self.current_paper
                paper.authors = list(self.current_authors)
                paper.categories = list(self.current_categories)
                self.papers.append(paper)
                logger.debug(f"Parsed entry {len(self.papers)}: {paper.title[:50]}")
                self.current_paper = None
            self.in_entry = False
        elif name in _FIELD_CLOSERS:
            self.current_field = None

    def close(self) -> List[Paper]:
        self._flush_text()
        return self.papers

    def _flush_text(self) -> None:
        if not self._text:
            return
        text = "".join(self._text).strip()
        self._text.clear()

        if not text or self.current_field is None or self.current_paper is None:
            return

        if self.current_field is FieldTag.TITLE:
            self.current_paper.title = text
        elif self.current_field is FieldTag.AUTHOR:
            self.current_authors.append(text)
        elif self.current_field is FieldTag.ABSTRACT:
            self.current_paper.abstract_text = text


class AtomFeedParser:
    """
    Single-pass parser for arXiv Atom feeds.

    Each call to parse() owns a fresh state machine, so one parser instance
    can be shared across threads and requests.

    Typical usage:
        >>> parser = AtomFeedParser()
        >>> papers = parser.parse(feed_text)
        >>> print(papers[0].title, papers[0].url)

    Attributes:
        chunk_size: Number of bytes handed to the tokenizer per feed() call.
    """

    def __init__(self, chunk_size: int = 64 * 1024):
        self.chunk_size = chunk_size

    def parse(self, document: Union[str, bytes]) -> List[Paper]:
        """
        Parse an Atom document into Paper records.

        Args:
            document: The feed as text, or as UTF-8 encoded bytes.

        Returns:
            Papers in document order. Never empty.

        Raises:
            DecodingError: If the document is not valid UTF-8 text.
            MalformedDocumentError: If the XML has a syntax error or uses a
                forbidden construct (entity declarations, external references).
                A document that simply stops early is not an error: the
                entries closed before the cut are returned.
            NoResultsError: If no entry reached its closing tag.
        """
        data = self._encode(document)
        state = _FeedState()
        parser = XMLParser(target=state, encoding="utf-8")

        try:
            for offset in range(0, len(data), self.chunk_size):
                parser.feed(data[offset:offset + self.chunk_size])
            try:
                papers = parser.close()
            except ParseError as e:
                if e.code not in _END_OF_INPUT_ERRORS:
                    raise
                # Truncated feed: keep every entry that reached its end tag
                logger.warning(f"arXiv feed ended early ({e}), keeping {len(state.papers)} entries")
                papers = state.papers
        except ParseError as e:
            logger.error(f"Malformed arXiv feed: {e}")
            raise MalformedDocumentError(str(e)) from e
        except DefusedXmlException as e:
            logger.error(f"Rejected arXiv feed: {e!r}")
            raise MalformedDocumentError(repr(e)) from e

        if not papers:
            logger.warning(f"No completed entries in feed ({state.entries_opened} opened)")
            raise NoResultsError(entries_opened=state.entries_opened)

        logger.info(f"Parsed {len(papers)} papers from arXiv feed")
        return papers

    @staticmethod
    def _encode(document: Union[str, bytes]) -> bytes:
        try:
            if isinstance(document, bytes):
                document.decode("utf-8")
                return document
            return document.encode("utf-8")
        except UnicodeError as e:
            logger.error(f"Feed is not valid UTF-8: {e}")
            raise DecodingError(str(e)) from e


def parse_feed(document: Union[str, bytes]) -> List[Paper]:
    """
    Parse an Atom document with a default AtomFeedParser.

    Args:
        document: The feed as text or UTF-8 bytes.

    Returns:
        Papers in document order. Never empty.
    """
    return AtomFeedParser().parse(document)
