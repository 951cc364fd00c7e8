"""News feed service - pipeline orchestration layer.

Coordinates source lookup, fetching, shape checks, parsing and
extraction, and folds every failure into a FeedFailure value.
"""

import structlog

from newsfeed.exceptions import ErrorCode, NewsFeedError, NotFeedError, UpstreamHTTPError
from newsfeed.models.news import FeedFailure, FeedResult, FeedSuccess
from newsfeed.parsers.base import FeedParser
from newsfeed.parsers.shape import FeedShape, classify
from newsfeed.sources.base import FeedFetcher
from newsfeed.sources.registry import SourceRegistry

logger = structlog.get_logger()

SAMPLE_LENGTH = 300


class NewsService:
    """Feed acquisition and normalization pipeline.

    Each run is independent; the service holds no per-request state and
    can serve concurrent callers.
    """

    def __init__(
        self,
        registry: SourceRegistry,
        fetcher: FeedFetcher,
        parser: FeedParser,
    ):
        """Initialize news service.

        Args:
            registry: Read-only source registry.
            fetcher: Fetcher owning timeout and retry policy.
            parser: Parser owning sanitization, dialects and the item cap.
        """
        self._registry = registry
        self._fetcher = fetcher
        self._parser = parser

    @property
    def registry(self) -> SourceRegistry:
        return self._registry

    async def run(self, source_key: str) -> FeedResult:
        """Fetch and normalize the feed behind `source_key`.

        Never raises for pipeline failures; they come back as FeedFailure.

        Returns:
            FeedSuccess with the feed title and items, or FeedFailure.
        """
        log = logger.bind(source=source_key)

        try:
            result = await self._run(source_key)
        except NewsFeedError as e:
            log.warning("Feed pipeline failed", code=e.code.value, error=str(e))
            return FeedFailure.from_error(e)
        except Exception as e:
            log.exception("Unexpected feed pipeline error", error=str(e))
            return FeedFailure.from_code(ErrorCode.UNKNOWN, str(e))

        log.info("Feed pipeline succeeded", item_count=len(result.items))
        return result

    async def _run(self, source_key: str) -> FeedSuccess:
        source = self._registry.resolve(source_key)
        url = str(source.url)

        outcome = await self._fetcher.fetch(url)

        # An explicit error status wins over whatever the body looks like
        if not outcome.is_success:
            raise UpstreamHTTPError(url, outcome.status_code, outcome.text[:SAMPLE_LENGTH])

        if classify(outcome.text) is FeedShape.NOT_FEED:
            raise NotFeedError(url, outcome.text[:SAMPLE_LENGTH])

        feed = self._parser.parse(outcome.text, url)

        return FeedSuccess(
            source_title=feed.title or source.title,
            items=feed.items,
        )
