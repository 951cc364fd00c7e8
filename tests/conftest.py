"""Test configuration and fixtures."""

from collections.abc import Callable

import httpx
import pytest

from newsfeed.models.feed import FeedSource
from newsfeed.parsers.xml_parser import XmlFeedParser
from newsfeed.services.news_service import NewsService
from newsfeed.sources.fetcher import HttpFeedFetcher
from newsfeed.sources.registry import SourceRegistry

FEED_URL = "https://feeds.example.com/news.xml"


class RecordingHandler:
    """httpx.MockTransport handler replaying scripted responses.

    Each script entry is either an httpx.Response or an exception class
    to raise; the last entry repeats once the script runs out.
    """

    def __init__(self, *script):
        self.script = list(script)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.script[min(len(self.requests), len(self.script)) - 1]
        if isinstance(step, type) and issubclass(step, Exception):
            raise step("simulated failure", request=request)
        return step

    @property
    def calls(self) -> int:
        return len(self.requests)


def xml_response(body: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        text=body,
        headers={"content-type": "application/rss+xml; charset=utf-8"},
    )


def html_response(body: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        text=body,
        headers={"content-type": "text/html; charset=utf-8"},
    )


@pytest.fixture
def registry() -> SourceRegistry:
    return SourceRegistry(
        [FeedSource(key="test", title="Test Source", url=FEED_URL)]
    )


@pytest.fixture
def make_service(registry) -> Callable[..., NewsService]:
    """Build a NewsService whose fetcher talks to a RecordingHandler."""

    def _make(handler: RecordingHandler, max_items: int = 30, max_attempts: int = 2) -> NewsService:
        fetcher = HttpFeedFetcher(
            timeout=5.0,
            max_attempts=max_attempts,
            retry_delay=0,
            transport=httpx.MockTransport(handler),
        )
        return NewsService(
            registry=registry,
            fetcher=fetcher,
            parser=XmlFeedParser(max_items=max_items),
        )

    return _make


@pytest.fixture
def sample_rss_content():
    """RSS 2.0 feed with two items."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">
  <channel>
    <title>NHKニュース</title>
    <link>https://www3.nhk.or.jp/news/</link>
    <atom:link rel="self" href="https://www3.nhk.or.jp/rss/news/cat0.xml" />
    <item>
      <title>First headline</title>
      <link>https://example.com/news/1</link>
      <pubDate>Thu, 19 Dec 2024 08:00:00 +0900</pubDate>
    </item>
    <item>
      <title><![CDATA[Second <b>headline</b>]]></title>
      <link>https://example.com/news/2</link>
      <pubDate>Thu, 19 Dec 2024 09:30:00 +0900</pubDate>
    </item>
  </channel>
</rss>"""


@pytest.fixture
def sample_rdf_content():
    """RDF (RSS 1.0) feed with items as siblings of channel."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns="http://purl.org/rss/1.0/"
         xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel rdf:about="https://example.jp/">
    <title>Example RDF</title>
    <link>https://example.jp/</link>
  </channel>
  <item rdf:about="https://example.jp/a">
    <title>RDF item A</title>
    <link>https://example.jp/a</link>
    <dc:date>2024-12-19T08:00:00+09:00</dc:date>
  </item>
  <item rdf:about="https://example.jp/b">
    <title>RDF item B</title>
    <link>https://example.jp/b</link>
    <dc:date>2024-12-19T09:00:00+09:00</dc:date>
  </item>
</rdf:RDF>"""


@pytest.fixture
def sample_atom_content():
    """Atom feed with several links per entry."""
    return """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Example Atom</title>
  <updated>2024-12-19T10:00:00Z</updated>
  <entry>
    <title type="html">Atom entry one</title>
    <link rel="self" href="https://example.org/api/1" />
    <link rel="alternate" type="text/html" href="https://example.org/1" />
    <published>2024-12-19T07:00:00Z</published>
    <updated>2024-12-19T08:00:00Z</updated>
  </entry>
  <entry>
    <title>Atom entry two</title>
    <link href="https://example.org/2" />
    <published>2024-12-19T06:00:00Z</published>
  </entry>
</feed>"""
