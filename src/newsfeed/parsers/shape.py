"""Pre-parse shape check for upstream response bodies."""

from enum import Enum

SNIFF_LENGTH = 300

_HTML_PREFIXES = ("<!doctype html", "<html")
_MARKUP_MARKERS = ("<rss", "<?xml", "<feed", "<rdf:rdf")


class FeedShape(str, Enum):
    """Outcome of the shape check."""

    MARKUP = "markup"
    NOT_FEED = "not_feed"


def classify(body: str) -> FeedShape:
    """Decide whether a body is worth handing to the XML parser.

    Only the first few hundred characters are inspected. HTML pages are
    rejected even when they carry an XML declaration further down.
    """
    head = (body or "").lstrip("\ufeff \t\r\n")[:SNIFF_LENGTH].lower()

    if head.startswith(_HTML_PREFIXES):
        return FeedShape.NOT_FEED
    if any(marker in head for marker in _MARKUP_MARKERS):
        return FeedShape.MARKUP
    return FeedShape.NOT_FEED
