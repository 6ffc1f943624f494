import pytest

import goodreads.transport as transport_module
from goodreads import GoodReads


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


class FakeRequests:
    """Stands in for ``requests.get``; replays queued responses and records calls."""

    def __init__(self):
        self.responses = []
        self.default = FakeResponse(404)
        self.error = None
        self.calls = []

    def queue(self, text="", status_code=200):
        self.responses.append(FakeResponse(status_code, text))

    def get(self, url, headers=None, **kwargs):
        self.calls.append({"url": url, "headers": headers, **kwargs})
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return self.default

    @property
    def urls(self):
        return [call["url"] for call in self.calls]


@pytest.fixture()
def fake_requests(monkeypatch):
    fake = FakeRequests()
    monkeypatch.setattr(transport_module.requests, "get", fake.get)
    return fake


@pytest.fixture()
def api_key():
    return "test-key-123"


@pytest.fixture()
def client(fake_requests, api_key):
    return GoodReads(api_key)


@pytest.fixture()
def envelope():
    """Wrap domain nodes in a GoodReads response envelope."""

    def wrap(inner: str) -> str:
        return f'<?xml version="1.0" encoding="UTF-8"?>\n<GoodreadsResponse>{inner}</GoodreadsResponse>'

    return wrap
