from dataclasses import dataclass

DOMAIN = "https://www.goodreads.com/"
USER_AGENT = "goodreads-client/1.0 (+https://www.goodreads.com/api)"


@dataclass(frozen=True)
class ClientConfig:
    """Settings fixed for the lifetime of a client.

    Frozen so the API key cannot be swapped out after construction.
    """
    api_key: str
    base_url: str = DOMAIN
    user_agent: str = USER_AGENT
