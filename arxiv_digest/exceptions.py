"""
Error types raised by the arXiv Digest core and its fetcher.

Every error derives from ArxivError so that collaborators (the HTTP API,
the console demo) can catch a single base class and turn it into a
user-facing failure.
"""


class ArxivError(Exception):
    """Base class for all arXiv Digest errors."""

    pass


class DecodingError(ArxivError):
    """Feed text or an attribute value is not valid UTF-8."""

    def __init__(self, detail: str):
        super().__init__(f"UTF-8 decoding error: {detail}")


class MalformedDocumentError(ArxivError):
    """The XML tokenizer rejected the feed."""

    def __init__(self, detail: str):
        super().__init__(f"XML parsing error: {detail}")


class NoResultsError(ArxivError):
    """
    The feed was well-formed but produced zero completed entries.

    A feed whose entries never close is not well-formed and raises
    MalformedDocumentError instead.

    Attributes:
        entries_opened: Number of entry start boundaries seen.
    """

    def __init__(self, entries_opened: int = 0):
        super().__init__("No results found")
        self.entries_opened = entries_opened


class FormattingError(ArxivError):
    """A paper record could not be rendered."""

    def __init__(self, detail: str):
        super().__init__(f"Formatting error: {detail}")


class FetchError(ArxivError):
    """The arXiv API request failed or returned an error status."""

    def __init__(self, detail: str):
        super().__init__(f"Network error: {detail}")
