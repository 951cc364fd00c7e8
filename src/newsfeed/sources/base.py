"""Abstract feed fetcher interface using Protocol."""

from typing import Protocol

from newsfeed.models.feed import FetchOutcome


class FeedFetcher(Protocol):
    """Feed fetcher abstraction protocol."""

    async def fetch(self, url: str) -> FetchOutcome:
        """Fetch a feed URL.

        Returns:
            FetchOutcome: The upstream response, whatever its status code.

        Raises:
            FetchTimeoutError: When every attempt timed out.
            NetworkError: When every attempt failed at transport level.
        """
        ...
