"""
Request URL construction
------------------------
Every GoodReads call is a GET against ``<domain><route>`` carrying the
caller's query string and a fixed ``format=xml&key=<API KEY>`` block.

Two assembly modes exist and both are kept because the remote routes were
written against them:

* append mode - ``<route>?format=xml&key=K&<query>``
* merge mode  - ``<route><query>?format=xml&key=K``

Merge mode is what the lookup-by-id routes use: the "query" there is a
single URL-encoded value that completes the path (``author/show/123``).
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Tuple, Union
from urllib.parse import quote_plus, urlencode

from goodreads.config import DOMAIN

Params = Union[Mapping[str, Any], str, int, None]


@dataclass(frozen=True)
class RequestDescriptor:
    path: str
    params: Params = field(default=None)
    append: bool = False


def _flatten(prefix: str, value: Any, out: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, out)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{prefix}[{index}]", item, out)
    elif isinstance(value, bool):
        out.append((prefix, "1" if value else "0"))
    else:
        out.append((prefix, str(value)))


def serialize_params(params: Params) -> str:
    """
    Serialize *params* into a query string without a leading separator.

    Mappings become ``key=value&key=value`` (nested mappings use bracketed
    keys, e.g. ``search[field]=title``); a scalar is URL-encoded on its own
    with no ``key=`` prefix. ``None`` and ``{}`` both yield ``""``.
    """
    if params is None:
        return ""
    if isinstance(params, Mapping):
        pairs: List[Tuple[str, str]] = []
        for key, value in params.items():
            _flatten(str(key), value, pairs)
        return urlencode(pairs)
    if isinstance(params, bool):
        return "1" if params else "0"
    return quote_plus(str(params))


class UrlBuilder:
    def __init__(self, api_key: str, base_url: str = DOMAIN):
        self.api_key = api_key
        self.base_url = base_url

    @property
    def fixed_block(self) -> str:
        return f"?format=xml&key={self.api_key}"

    def build(self, path: str, params: Params = None, append: bool = False) -> str:
        url = self.base_url + path
        query = serialize_params(params)
        if append:
            return url + self.fixed_block + "&" + query
        return url + query + self.fixed_block

    def build_request(self, request: RequestDescriptor) -> str:
        return self.build(request.path, request.params, request.append)
