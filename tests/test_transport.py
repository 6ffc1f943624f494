import logging

import pytest
import requests

from goodreads.errors import AuthenticationError, RequestFailure
from goodreads.transport import NOT_FOUND, HttpTransport, mask_key

URL = "https://www.goodreads.com/book/isbn/1?format=xml&key=secret"


@pytest.fixture()
def transport():
    return HttpTransport("secret", user_agent="tests/1.0")


def test_success_returns_body(transport, fake_requests):
    fake_requests.queue("<GoodreadsResponse/>")
    assert transport.get(URL) == "<GoodreadsResponse/>"
    call = fake_requests.calls[0]
    assert call["url"] == URL
    assert call["headers"]["Accept"] == "application/xml"
    assert call["headers"]["User-Agent"] == "tests/1.0"


def test_no_timeout_or_retry_is_added(transport, fake_requests):
    fake_requests.queue("", status_code=503)
    with pytest.raises(RequestFailure):
        transport.get(URL)
    assert len(fake_requests.calls) == 1
    assert "timeout" not in fake_requests.calls[0]


def test_not_found_returns_sentinel(transport, fake_requests):
    fake_requests.queue("", status_code=404)
    result = transport.get(URL)
    assert result is NOT_FOUND
    assert result != ""


def test_unauthorized_raises_with_key(transport, fake_requests):
    fake_requests.queue("", status_code=401)
    with pytest.raises(AuthenticationError) as exc_info:
        transport.get(URL)
    assert exc_info.value.api_key == "secret"
    assert "secret" in str(exc_info.value)


def test_network_error_raises_request_failure(transport, fake_requests):
    fake_requests.error = requests.ConnectionError("connection reset")
    with pytest.raises(RequestFailure) as exc_info:
        transport.get(URL)
    assert exc_info.value.url == URL
    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_unexpected_status_raises_request_failure(transport, fake_requests):
    fake_requests.queue("boom", status_code=500)
    with pytest.raises(RequestFailure) as exc_info:
        transport.get(URL)
    assert exc_info.value.url == URL
    assert exc_info.value.status_code == 500
    assert URL in str(exc_info.value)


def test_mask_key_hides_only_the_key_value():
    url = "https://www.goodreads.com/review/show.xml?format=xml&key=o&id=1"
    assert mask_key(url) == "https://www.goodreads.com/review/show.xml?format=xml&key=***&id=1"


def test_mask_key_in_merge_mode_url():
    url = "https://www.goodreads.com/author/show/5?format=xml&key=secret"
    assert mask_key(url) == "https://www.goodreads.com/author/show/5?format=xml&key=***"


def test_logged_url_does_not_leak_short_key(fake_requests, caplog):
    fake_requests.queue("<GoodreadsResponse/>")
    transport = HttpTransport("o")

    with caplog.at_level(logging.DEBUG, logger="goodreads.transport"):
        transport.get("https://www.goodreads.com/review/show.xml?format=xml&key=o&id=1")

    assert "https://www.goodreads.com/review/show.xml?format=xml&key=***&id=1" in caplog.text
