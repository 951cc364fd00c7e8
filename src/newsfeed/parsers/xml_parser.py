"""XML feed parser implementation."""

from xml.etree import ElementTree

from newsfeed.exceptions import NotFeedError, ParseError
from newsfeed.models.news import ParsedFeed
from newsfeed.parsers.dialects import extract
from newsfeed.parsers.sanitizer import sanitize


class XmlFeedParser:
    """Parser for RSS 2.0, RDF and Atom documents.

    Sanitizes the markup, parses it strictly, then hands the tree to the
    dialect matchers.
    """

    def __init__(self, max_items: int = 30):
        """Initialize parser.

        Args:
            max_items: Maximum number of items kept per feed.
        """
        if max_items < 1:
            raise ValueError("max_items must be at least 1")
        self._max_items = max_items

    def parse(self, raw_content: str, url: str) -> ParsedFeed:
        """Parse feed markup into a ParsedFeed.

        Args:
            raw_content: Raw markup string from upstream.
            url: Source URL, used in error messages.

        Returns:
            ParsedFeed; its item list may be empty.

        Raises:
            ParseError: When the markup is not well-formed after sanitization.
            NotFeedError: When the document is XML but no feed dialect matches.
        """
        try:
            root = ElementTree.fromstring(sanitize(raw_content))
        except (ElementTree.ParseError, ValueError) as e:
            raise ParseError(url, str(e)) from e

        feed = extract(root, self._max_items)
        if feed is None:
            raise NotFeedError(url, raw_content[:300])
        return feed
