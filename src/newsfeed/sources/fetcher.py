"""HTTP feed fetcher with bounded attempts."""

import asyncio

import httpx
import structlog

from newsfeed.exceptions import FetchTimeoutError, NetworkError
from newsfeed.models.feed import FetchOutcome
from newsfeed.utils.http_client import create_http_client

logger = structlog.get_logger()


class HttpFeedFetcher:
    """Fetches feed documents over HTTP.

    Every attempt gets its own client and a hard time budget covering the
    whole request, body included. Only timeouts and transport failures are
    retried; any HTTP response, 5xx included, is returned to the caller as is.
    """

    def __init__(
        self,
        timeout: float = 12.0,
        max_attempts: int = 2,
        retry_delay: float = 0.35,
        user_agent: str = "newsfeed/0.1 (+feed reader)",
        accept: str = "application/rss+xml, application/atom+xml, application/xml, text/xml",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize fetcher.

        Args:
            timeout: Time budget of a single attempt in seconds.
            max_attempts: Total attempts, first one included.
            retry_delay: Fixed pause between attempts in seconds.
            user_agent: User-Agent header for requests.
            accept: Accept header for requests.
            transport: Optional httpx transport, used by tests.
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._retry_delay = retry_delay
        self._user_agent = user_agent
        self._accept = accept
        self._transport = transport

    async def fetch(self, url: str) -> FetchOutcome:
        """Fetch a feed URL, retrying on timeout or network failure.

        Returns:
            FetchOutcome of the first attempt that got an HTTP response.

        Raises:
            FetchTimeoutError: When the last attempt timed out.
            NetworkError: When the last attempt failed at transport level.
        """
        log = logger.bind(url=url)
        attempt = 0

        while True:
            attempt += 1
            try:
                outcome = await self._fetch_once(url)
            except (FetchTimeoutError, NetworkError) as e:
                log.warning(
                    "Fetch attempt failed",
                    attempt=attempt,
                    max_attempts=self._max_attempts,
                    error=str(e),
                )
                if attempt >= self._max_attempts:
                    raise
                await asyncio.sleep(self._retry_delay)
                continue

            log.debug("Fetch attempt succeeded", attempt=attempt, status=outcome.status_code)
            return outcome

    async def _fetch_once(self, url: str) -> FetchOutcome:
        try:
            async with create_http_client(
                timeout=self._timeout,
                user_agent=self._user_agent,
                accept=self._accept,
                transport=self._transport,
            ) as client:
                response = await asyncio.wait_for(client.get(url), timeout=self._timeout)
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise FetchTimeoutError(url, f"Request timed out after {self._timeout}s") from e
        except httpx.RequestError as e:
            raise NetworkError(url, f"Request failed: {e}") from e

        return FetchOutcome(
            url=str(response.url),
            status_code=response.status_code,
            content_type=response.headers.get("content-type", ""),
            text=response.text,
        )
