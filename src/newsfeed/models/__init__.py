"""Models package."""

from newsfeed.models.feed import FeedSource, FetchOutcome
from newsfeed.models.news import FeedFailure, FeedItem, FeedResult, FeedSuccess, ParsedFeed

__all__ = [
    "FeedSource",
    "FetchOutcome",
    "FeedItem",
    "ParsedFeed",
    "FeedSuccess",
    "FeedFailure",
    "FeedResult",
]
