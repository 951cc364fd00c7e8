"""Tests for the HTTP feed fetcher."""

import asyncio

import httpx
import pytest

from conftest import FEED_URL, RecordingHandler, xml_response
from newsfeed.exceptions import FetchTimeoutError, NetworkError
from newsfeed.sources.fetcher import HttpFeedFetcher
from newsfeed.utils.http_client import sniff_xml_encoding


def _fetcher(handler, **kwargs) -> HttpFeedFetcher:
    kwargs.setdefault("retry_delay", 0)
    return HttpFeedFetcher(transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.asyncio
async def test_returns_outcome_on_first_success():
    handler = RecordingHandler(xml_response("<rss/>"))

    outcome = await _fetcher(handler).fetch(FEED_URL)

    assert handler.calls == 1
    assert outcome.is_success
    assert outcome.text == "<rss/>"
    assert outcome.content_type.startswith("application/rss+xml")


@pytest.mark.asyncio
async def test_sends_user_agent_and_accept_headers():
    handler = RecordingHandler(xml_response("<rss/>"))

    await _fetcher(handler, user_agent="test-agent/1.0", accept="application/rss+xml").fetch(FEED_URL)

    request = handler.requests[0]
    assert request.headers["User-Agent"] == "test-agent/1.0"
    assert request.headers["Accept"] == "application/rss+xml"


@pytest.mark.asyncio
async def test_retries_once_then_reports_timeout():
    handler = RecordingHandler(httpx.ReadTimeout)

    with pytest.raises(FetchTimeoutError):
        await _fetcher(handler, max_attempts=2).fetch(FEED_URL)

    assert handler.calls == 2


@pytest.mark.asyncio
async def test_second_attempt_succeeds_after_timeout():
    handler = RecordingHandler(httpx.ConnectTimeout, xml_response("<rss/>"))

    outcome = await _fetcher(handler, max_attempts=2).fetch(FEED_URL)

    assert handler.calls == 2
    assert outcome.status_code == 200


@pytest.mark.asyncio
async def test_network_failure_is_retried_then_reported():
    handler = RecordingHandler(httpx.ConnectError)

    with pytest.raises(NetworkError):
        await _fetcher(handler, max_attempts=3).fetch(FEED_URL)

    assert handler.calls == 3


@pytest.mark.asyncio
async def test_last_failure_kind_wins():
    handler = RecordingHandler(httpx.ReadTimeout, httpx.ConnectError)

    with pytest.raises(NetworkError):
        await _fetcher(handler, max_attempts=2).fetch(FEED_URL)


@pytest.mark.asyncio
async def test_http_error_status_is_not_retried():
    handler = RecordingHandler(xml_response("oops", status_code=500))

    outcome = await _fetcher(handler, max_attempts=2).fetch(FEED_URL)

    assert handler.calls == 1
    assert outcome.status_code == 500
    assert not outcome.is_success


@pytest.mark.asyncio
async def test_slow_upstream_is_cancelled_at_time_budget():
    calls = 0

    async def slow(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        await asyncio.sleep(5)
        return xml_response("<rss/>")

    fetcher = HttpFeedFetcher(
        timeout=0.05,
        max_attempts=2,
        retry_delay=0,
        transport=httpx.MockTransport(slow),
    )

    with pytest.raises(FetchTimeoutError):
        await fetcher.fetch(FEED_URL)
    assert calls == 2


def test_rejects_zero_attempts():
    with pytest.raises(ValueError):
        HttpFeedFetcher(max_attempts=0)


@pytest.mark.parametrize(
    "content, expected",
    [
        (b'<?xml version="1.0" encoding="Shift_JIS"?><rss/>', "shift_jis"),
        (b"<?xml version='1.0' encoding='EUC-JP' standalone='yes'?><rss/>", "euc_jp"),
        (b'\xef\xbb\xbf<?xml version="1.0" encoding="UTF-8"?><rss/>', "utf-8"),
        (b'<?xml version="1.0"?><rss/>', "utf-8"),
        (b'<?xml version="1.0" encoding="no-such-codec"?><rss/>', "utf-8"),
        (b"<rss/>", "utf-8"),
        (b"", "utf-8"),
    ],
)
def test_sniff_xml_encoding(content, expected):
    assert sniff_xml_encoding(content) == expected


@pytest.mark.asyncio
async def test_body_decoded_with_declared_encoding_when_header_has_no_charset():
    body = '<?xml version="1.0" encoding="Shift_JIS"?><rss><channel><title>東京</title></channel></rss>'
    handler = RecordingHandler(
        httpx.Response(200, content=body.encode("shift_jis"), headers={"content-type": "application/xml"})
    )

    outcome = await _fetcher(handler).fetch(FEED_URL)

    assert outcome.text == body


@pytest.mark.asyncio
async def test_header_charset_wins_over_declaration():
    body = '<?xml version="1.0" encoding="Shift_JIS"?><rss><channel><title>東京</title></channel></rss>'
    handler = RecordingHandler(
        httpx.Response(
            200,
            content=body.encode("utf-8"),
            headers={"content-type": "application/xml; charset=utf-8"},
        )
    )

    outcome = await _fetcher(handler).fetch(FEED_URL)

    assert outcome.text == body
