"""Static registry of selectable feed sources."""

from collections.abc import Iterable

from newsfeed.exceptions import UnknownSourceError
from newsfeed.models.feed import FeedSource

DEFAULT_SOURCES: tuple[FeedSource, ...] = (
    FeedSource(
        key="nhk",
        title="NHK",
        url="https://www3.nhk.or.jp/rss/news/cat0.xml",
    ),
    FeedSource(
        key="kyodo",
        title="共同社",
        url="https://english.kyodonews.net/rss/all.xml",
    ),
    FeedSource(
        key="yahoo",
        title="Yahoo",
        url="https://news.yahoo.co.jp/rss/topics/top-picks.xml",
    ),
    FeedSource(
        key="cnn",
        title="CNN",
        url="http://rss.cnn.com/rss/edition.rss",
    ),
)


class SourceRegistry:
    """Read-only mapping of source keys to feed sources.

    Keys are matched case-insensitively.
    """

    def __init__(self, sources: Iterable[FeedSource] = DEFAULT_SOURCES):
        self._sources = {source.key.lower(): source for source in sources}

    def keys(self) -> list[str]:
        """Registered keys in registration order."""
        return list(self._sources)

    def sources(self) -> list[FeedSource]:
        return list(self._sources.values())

    def resolve(self, key: str) -> FeedSource:
        """Look up a source by key.

        Raises:
            UnknownSourceError: When the key is not registered.
        """
        source = self._sources.get((key or "").strip().lower())
        if source is None:
            raise UnknownSourceError(key, self.keys())
        return source
