from typing import Optional


class GoodReadsError(Exception):
    """Base class for every error raised by the client."""


class AuthenticationError(GoodReadsError):
    def __init__(self, api_key: str):
        self.api_key = api_key
        super().__init__(f"Invalid API key : {api_key}")


class RequestFailure(GoodReadsError):
    def __init__(self, url: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        message = f"Method failed: {url}"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        super().__init__(message)
