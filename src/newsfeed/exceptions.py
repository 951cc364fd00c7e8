"""Custom exceptions for the news feed pipeline.

Provides a closed exception hierarchy where every failure scenario maps
to exactly one stable error code.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes consumed by the boundary layer."""

    UNKNOWN_SRC = "UNKNOWN_SRC"
    HTTP = "HTTP"
    TIMEOUT = "TIMEOUT"
    NETWORK = "NETWORK"
    NOT_RSS = "NOT_RSS"
    PARSE = "PARSE"
    UNKNOWN = "UNKNOWN"


# Human-readable category shown before any low-level diagnostic
ERROR_LABELS: dict[ErrorCode, str] = {
    ErrorCode.UNKNOWN_SRC: "Unknown news source",
    ErrorCode.HTTP: "Upstream responded with an error status",
    ErrorCode.TIMEOUT: "Upstream did not respond in time",
    ErrorCode.NETWORK: "Upstream could not be reached",
    ErrorCode.NOT_RSS: "Upstream did not return a feed",
    ErrorCode.PARSE: "Feed could not be parsed",
    ErrorCode.UNKNOWN: "Unexpected error",
}


class NewsFeedError(Exception):
    """Base exception class for all pipeline errors."""

    code: ErrorCode = ErrorCode.UNKNOWN


class UnknownSourceError(NewsFeedError):
    """Raised when a source key is not in the registry.

    Attributes:
        source_key: The key the caller supplied.
        allowed: Keys the registry does know about.
    """

    code = ErrorCode.UNKNOWN_SRC

    def __init__(self, source_key: str, allowed: list[str]):
        self.source_key = source_key
        self.allowed = allowed
        super().__init__(f"Unknown source '{source_key}', expected one of: {', '.join(allowed)}")


class FetchError(NewsFeedError):
    """Raised when a feed cannot be fetched.

    Attributes:
        url: The upstream URL that failed.
    """

    code = ErrorCode.NETWORK

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to fetch {url}: {message}")


class UpstreamHTTPError(FetchError):
    """Raised when upstream answers with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by upstream.
        sample: Leading part of the response body, for diagnostics.
    """

    code = ErrorCode.HTTP

    def __init__(self, url: str, status_code: int, sample: str = ""):
        self.status_code = status_code
        self.sample = sample
        super().__init__(url, f"HTTP {status_code}")


class FetchTimeoutError(FetchError):
    """Raised when every attempt exceeded the time budget."""

    code = ErrorCode.TIMEOUT


class NetworkError(FetchError):
    """Raised on transport level failures (DNS, TLS, connection reset)."""

    code = ErrorCode.NETWORK


class NotFeedError(NewsFeedError):
    """Raised when the response body does not look like feed markup.

    Attributes:
        url: The upstream URL.
        sample: Leading part of the response body.
    """

    code = ErrorCode.NOT_RSS

    def __init__(self, url: str, sample: str = ""):
        self.url = url
        self.sample = sample
        super().__init__(f"Response from {url} is not a feed")


class ParseError(NewsFeedError):
    """Raised when markup cannot be parsed even after sanitization.

    Attributes:
        url: The upstream URL of the document.
    """

    code = ErrorCode.PARSE

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to parse {url}: {message}")
