import logging
import re
from typing import Protocol, Union

import requests

from goodreads.config import USER_AGENT
from goodreads.errors import AuthenticationError, RequestFailure

logger = logging.getLogger(__name__)


class NotFound:
    """Marker returned by a transport when the remote resource does not exist."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()

_KEY_PARAM = re.compile(r"([?&]key=)[^&#]*")


def mask_key(url: str) -> str:
    """Hide the value of the ``key`` query parameter, for log output."""
    return _KEY_PARAM.sub(r"\g<1>***", url)


Body = Union[str, NotFound]


class Transport(Protocol):
    def get(self, url: str) -> Body:
        ...


class HttpTransport:
    """Blocking GET over ``requests``; one independent request per call."""

    def __init__(self, api_key: str, user_agent: str = USER_AGENT):
        self.api_key = api_key
        self.headers = {
            "Accept": "application/xml",
            "User-Agent": user_agent,
        }

    def get(self, url: str) -> Body:
        logger.debug("GET %s", mask_key(url))
        try:
            response = requests.get(url, headers=self.headers)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", mask_key(url), exc)
            raise RequestFailure(url) from exc

        status = response.status_code
        if status == 401:
            raise AuthenticationError(self.api_key)
        if status == 404:
            return NOT_FOUND
        if not 200 <= status < 300:
            logger.warning("Unexpected status %s from %s", status, mask_key(url))
            raise RequestFailure(url, status)
        return response.text
