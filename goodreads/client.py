"""
GoodReads API client
--------------------
Thin wrapper over the GoodReads XML API. Each public method maps to one
remote endpoint: build the URL, GET it, parse the envelope and hand back the
interesting child node (``<author>``, ``<book>``, ``<search>`` ...).

Missing resources come back as ``None``; an invalid key raises
:class:`~goodreads.errors.AuthenticationError`; anything else that goes wrong
on the wire raises :class:`~goodreads.errors.RequestFailure`.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from goodreads.config import DOMAIN, ClientConfig
from goodreads.routes import Route
from goodreads.transport import HttpTransport, Transport
from goodreads.tree import Node, expand_search_aliases, parse_xml
from goodreads.urls import Params, RequestDescriptor, UrlBuilder

logger = logging.getLogger(__name__)


class GoodReads:
    """Client for the GoodReads API"""

    def __init__(self, key: str, *, base_url: str = DOMAIN, transport: Optional[Transport] = None):
        self.config = ClientConfig(api_key=key, base_url=base_url)
        self.urls = UrlBuilder(self.config.api_key, self.config.base_url)
        if transport is None:
            transport = HttpTransport(self.config.api_key, self.config.user_agent)
        self.transport = transport

    @property
    def key(self) -> str:
        return self.config.api_key

    def parse_xml(self, url: str) -> Optional[Node]:
        """Fetch *url* and return the parsed envelope, or ``None``."""
        return parse_xml(self.transport.get(url))

    def _get_data(self, path: str, params: Params = None, append: bool = False) -> Optional[Node]:
        url = self.urls.build_request(RequestDescriptor(path, params, append))
        return self.parse_xml(url)

    @staticmethod
    def _unwrap(envelope: Optional[Node], name: str) -> Optional[Node]:
        if envelope is None:
            return None
        node = envelope.child(name)
        if node is None:
            logger.debug(f"Response envelope <{envelope.name}> has no <{name}> node")
        return node

    # Authors

    def get_author_id_by_name(self, name: str) -> Optional[int]:
        author = self._unwrap(self._get_data(Route.AUTHOR_SEARCH.path(), name), "author")
        if author is None:
            return None
        value = author.first_attribute()
        try:
            return int(value) if value is not None else None
        except ValueError:
            logger.debug(f"Author id '{value}' for '{name}' is not numeric")
            return None

    def get_author_by_id(self, id) -> Optional[Node]:
        return self._unwrap(self._get_data(Route.AUTHOR_SHOW.path(), id), "author")

    def get_author_books(self, id, page: int = 1) -> Optional[Node]:
        params = {
            "id": id,
            "page": page,
        }
        return self._unwrap(self._get_data(Route.AUTHOR_BOOKS.path(), params, True), "author")

    def get_author_by_name(self, name: str) -> Optional[Node]:
        author_id = self.get_author_id_by_name(name)
        if author_id is None:
            return None
        return self.get_author_by_id(author_id)

    # Books

    def get_book_by_isbn(self, isbn) -> Optional[Node]:
        return self._unwrap(self._get_data(Route.ISBN.path(), isbn), "book")

    def search_book(
        self,
        q: str,
        search_params: Optional[Mapping[str, Any]] = None,
        page: int = 1,
    ) -> Optional[Node]:
        """
        Search books across all fields.

        *search_params* is merged over the defaults, so it can both add
        parameters (``{"search": {"field": "title"}}``) and replace ``q`` or
        ``page``. Hyphenated fields of the result (``results-start``,
        ``total-results`` ...) are also reachable with underscores.
        """
        params: Dict[str, Any] = {
            "q": q,
            "page": page,
        }
        if search_params:
            params.update(search_params)

        search = self._unwrap(self._get_data(Route.SEARCH.path(), params, True), "search")
        if search is None:
            return None
        return expand_search_aliases(search)

    def search_book_by_name(self, name: str, page: int = 1) -> Optional[Node]:
        return self.search_book(name, {"search": {"field": "title"}}, page)

    def search_book_by_author_name(self, name: str, page: int = 1) -> Optional[Node]:
        return self.search_book(name, {"search": {"field": "author"}}, page)

    # Groups

    def groups_of_user(self, id, sort: str = "members", page: int = 1) -> Optional[Node]:
        """
        Groups a user belongs to.

        sort: one of 'my_activity', 'members', 'last_activity', 'title'.
        """
        params = {
            "sort": sort,
            "page": page,
        }
        return self._unwrap(self._get_data(Route.LIST_GROUPS.path(id=id), params, True), "groups")

    def group_members(
        self,
        id,
        search: Optional[str] = None,
        sort: Optional[str] = None,
        page: int = 1,
    ) -> Optional[Node]:
        """
        Members of a group.

        sort: one of 'last_online', 'num_comments', 'date_joined', 'num_books',
        'first_name'.
        """
        params: Dict[str, Any] = {"page": page}
        if search:
            params["search"] = search
        if sort:
            params["sort"] = sort
        return self._unwrap(self._get_data(Route.GROUP_MEMBERS.path(id=id), params, False), "group_users")

    def find_group(self, name: str, page: int = 1) -> Optional[Node]:
        params = {
            "q": name,
            "page": page,
        }
        return self._unwrap(self._get_data(Route.FIND_GROUP.path(), params, True), "groups")

    def group_info(self, id, sort: str = "title") -> Optional[Node]:
        """
        Group details.

        sort: topic order, one of 'comments_count', 'title', 'updated_at', 'views'.
        """
        params = {"sort": sort}
        return self._unwrap(self._get_data(Route.GROUP_SHOW.path(id=id), params, True), "group")

    # Reviews

    def review(self, id) -> Optional[Node]:
        params = {"id": id}
        return self._unwrap(self._get_data(Route.REVIEWS.path(), params, True), "review")

    def user_review_by_book(self, user_id, book_id) -> Optional[Node]:
        params = {
            "user_id": user_id,
            "book_id": book_id,
        }
        return self._unwrap(self._get_data(Route.REVIEW_OF_USER.path(), params, True), "review")

    # Series

    def series_by_author(self, id) -> Optional[Node]:
        return self._unwrap(self._get_data(Route.SERIES_BY_AUTHOR.path(id=id)), "series_works")

    # Users

    def user_info_by_id(self, id) -> Optional[Node]:
        params = {"id": id}
        return self._unwrap(self._get_data(Route.USER_SHOW.path(), params, True), "user")

    def user_info_by_username(self, username: str) -> Optional[Node]:
        params = {"username": username}
        return self._unwrap(self._get_data(Route.USER_SHOW.path(), params, True), "user")
