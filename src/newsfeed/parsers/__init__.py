"""Parsers package."""

from newsfeed.parsers.base import FeedParser
from newsfeed.parsers.sanitizer import sanitize
from newsfeed.parsers.shape import FeedShape, classify
from newsfeed.parsers.xml_parser import XmlFeedParser

__all__ = [
    "FeedParser",
    "XmlFeedParser",
    "FeedShape",
    "classify",
    "sanitize",
]
