"""Sources package."""

from newsfeed.sources.base import FeedFetcher
from newsfeed.sources.fetcher import HttpFeedFetcher
from newsfeed.sources.registry import DEFAULT_SOURCES, SourceRegistry

__all__ = [
    "FeedFetcher",
    "HttpFeedFetcher",
    "SourceRegistry",
    "DEFAULT_SOURCES",
]
