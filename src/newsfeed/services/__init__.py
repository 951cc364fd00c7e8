"""Services package."""

from newsfeed.services.factory import create_news_service
from newsfeed.services.news_service import NewsService

__all__ = [
    "NewsService",
    "create_news_service",
]
