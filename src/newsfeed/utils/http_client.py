"""HTTP client utilities.

Provides a configured async HTTP client for feed requests.
"""

import codecs
import re

import httpx

_XML_DECLARED_ENCODING = re.compile(
    rb"""^(?:\xef\xbb\xbf)?\s*<\?xml[^>]*?\sencoding\s*=\s*["']([A-Za-z][A-Za-z0-9._-]*)["']"""
)


def sniff_xml_encoding(content: bytes) -> str:
    """Encoding named in the XML declaration, else utf-8.

    httpx calls this only when the Content-Type header carries no charset.
    """
    match = _XML_DECLARED_ENCODING.match(content[:512])
    if match:
        name = match.group(1).decode("ascii")
        try:
            return codecs.lookup(name).name
        except LookupError:
            pass
    return "utf-8"


def create_http_client(
    timeout: float,
    user_agent: str,
    accept: str,
    follow_redirects: bool = True,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a configured async HTTP client.

    Args:
        timeout: Per-operation timeout in seconds.
        user_agent: User-Agent header value.
        accept: Accept header value.
        follow_redirects: Whether to follow redirects.
        transport: Optional transport override, e.g. httpx.MockTransport.

    Returns:
        Configured httpx.AsyncClient. Use it as an async context manager
        so the connection pool is released on every exit path.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": user_agent, "Accept": accept},
        follow_redirects=follow_redirects,
        default_encoding=sniff_xml_encoding,
        transport=transport,
    )
