"""Python wrapper for the GoodReads XML API.

Exposes a single client, :class:`GoodReads`, plus the error types raised
by its transport.
"""

__all__ = [
    "GoodReads",
    "ClientConfig",
    "Node",
    "NOT_FOUND",
    "GoodReadsError",
    "AuthenticationError",
    "RequestFailure",
]

from .client import GoodReads  # noqa: E402
from .config import ClientConfig  # noqa: E402
from .errors import AuthenticationError, GoodReadsError, RequestFailure  # noqa: E402
from .transport import NOT_FOUND  # noqa: E402
from .tree import Node  # noqa: E402
