from .list_links import ListLinksQuery, ListLinksHandler
from .get_link import GetLinkQuery, GetLinkHandler
from .search_links import SearchLinksQuery, SearchLinksHandler
from .link_exists import LinkExistsQuery, LinkExistsHandler

__all__ = [
    "ListLinksQuery",
    "ListLinksHandler",
    "GetLinkQuery",
    "GetLinkHandler",
    "SearchLinksQuery",
    "SearchLinksHandler",
    "LinkExistsQuery",
    "LinkExistsHandler",
]
