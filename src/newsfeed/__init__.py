"""
newsfeed

Fetches RSS 2.0, RDF (RSS 1.0) and Atom feeds from a fixed set of news
sources and returns a normalized, bounded list of items, or a failure
carrying one of a closed set of error codes.

Pipeline: resolve source → fetch (timeout + retry) → shape check →
sanitize → parse → dialect extraction.

Example
-------
from newsfeed import Settings, create_news_service

service = create_news_service(Settings())
result = await service.run("nhk")
print(result.model_dump(by_alias=True))
"""

from newsfeed.config.settings import Settings
from newsfeed.exceptions import ErrorCode
from newsfeed.models.news import FeedFailure, FeedItem, FeedResult, FeedSuccess
from newsfeed.services.factory import create_news_service
from newsfeed.services.news_service import NewsService

__all__ = [
    "Settings",
    "ErrorCode",
    "FeedItem",
    "FeedSuccess",
    "FeedFailure",
    "FeedResult",
    "NewsService",
    "create_news_service",
]
