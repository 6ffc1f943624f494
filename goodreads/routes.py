from enum import Enum
from urllib.parse import quote


class Route(str, Enum):
    AUTHOR_SHOW = "author/show/"
    AUTHOR_BOOKS = "author/list/"
    AUTHOR_SEARCH = "api/author_url/"
    ISBN = "book/isbn/"
    SEARCH = "search/index.xml"
    LIST_GROUPS = "group/list/{id}.xml"
    GROUP_MEMBERS = "group/members/{id}.xml"
    FIND_GROUP = "group/search.xml"
    GROUP_SHOW = "group/show/{id}.xml"
    REVIEWS = "review/show.xml"
    REVIEW_OF_USER = "review/show_by_user_and_book.xml"
    SERIES_BY_AUTHOR = "series/list/{id}.xml"
    USER_SHOW = "user/show/"

    def path(self, **segments) -> str:
        """Fill the template's placeholders, quoting each value as a path segment."""
        quoted = {name: quote(str(value), safe="") for name, value in segments.items()}
        return self.value.format(**quoted)
