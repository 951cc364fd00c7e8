"""Composition root for the news service."""

import httpx

from newsfeed.config.settings import Settings
from newsfeed.parsers.xml_parser import XmlFeedParser
from newsfeed.services.news_service import NewsService
from newsfeed.sources.fetcher import HttpFeedFetcher
from newsfeed.sources.registry import SourceRegistry


def create_news_service(
    settings: Settings,
    registry: SourceRegistry | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> NewsService:
    """Build a NewsService from settings.

    Args:
        settings: Application settings.
        registry: Source registry; defaults to the built-in sources.
        transport: Optional httpx transport override, used by tests.

    Returns:
        Configured NewsService.
    """
    fetcher = HttpFeedFetcher(
        timeout=settings.feed_fetch_timeout,
        max_attempts=settings.feed_max_attempts,
        retry_delay=settings.feed_retry_delay,
        user_agent=settings.feed_user_agent,
        accept=settings.feed_accept,
        transport=transport,
    )
    parser = XmlFeedParser(max_items=settings.feed_max_items)
    return NewsService(
        registry=registry or SourceRegistry(),
        fetcher=fetcher,
        parser=parser,
    )
