"""Abstract feed parser interface using Protocol."""

from typing import Protocol

from newsfeed.models.news import ParsedFeed


class FeedParser(Protocol):
    """Feed parser abstraction protocol."""

    def parse(self, raw_content: str, url: str) -> ParsedFeed:
        """Parse feed markup.

        Args:
            raw_content: Raw markup string from upstream.
            url: Source URL for error context.

        Returns:
            Parsed feed with normalized items.

        Raises:
            ParseError: When parsing fails.
            NotFeedError: When the markup is not a feed.
        """
        ...
