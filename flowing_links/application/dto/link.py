"""Link DTOs for API request/response."""

from typing import Optional

from flowing_links.application.dto.base import CamelModel
from flowing_links.domain.value_objects.favorite_filter import FavoriteFilter
from flowing_links.domain.value_objects.link_filter import LinkFilter


class LinkDTO(CamelModel):
    """
    Link with relationships flattened to ids.

    Wire format:
    {
        "id": 3,
        "description": "Python docs",
        "url": "https://docs.python.org",
        "comments": null,
        "read": false,
        "favorite": true,
        "userId": 2,
        "labelIds": [1, 4]
    }
    """

    id: int = 0
    description: str = ""
    url: str = ""
    comments: Optional[str] = None
    read: bool = False
    favorite: bool = False
    user_id: int = 0
    label_ids: list[int] = []


class LinkFilterDTO(CamelModel):
    """Body of POST /Link/search. favorite: 0 all, 1 favorites only, 2 non-favorites only."""

    description: Optional[str] = None
    label_ids: Optional[list[int]] = None
    favorite: FavoriteFilter = FavoriteFilter.ALL

    def to_filter(self) -> LinkFilter:
        return LinkFilter(
            description=self.description,
            label_ids=tuple(self.label_ids or ()),
            favorite=self.favorite,
        )
