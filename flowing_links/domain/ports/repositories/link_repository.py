"""
Link Repository Port - Interface for link persistence.
Every lookup is scoped to the owning user.
Implementation: flowing_links/infrastructure/persistence/sqlalchemy_link_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from flowing_links.domain.entities.link import Link
from flowing_links.domain.value_objects.link_filter import LinkFilter


class LinkRepository(ABC):
    @abstractmethod
    async def list_by_user(self, user_id: int) -> list[Link]: ...

    @abstractmethod
    async def get_by_id(self, link_id: int, user_id: int) -> Optional[Link]: ...

    @abstractmethod
    async def search(self, user_id: int, link_filter: LinkFilter) -> list[Link]: ...

    @abstractmethod
    async def exists(self, link_id: int, user_id: int) -> bool: ...

    @abstractmethod
    async def url_taken(
        self, url: str, user_id: int, exclude_id: Optional[int] = None
    ) -> bool: ...

    @abstractmethod
    async def add(self, link: Link) -> Link: ...

    @abstractmethod
    async def update(self, link: Link) -> None: ...

    @abstractmethod
    async def replace_labels(self, link_id: int, label_ids: Sequence[int]) -> None:
        """Drop every label association of the link, then associate label_ids."""
        ...

    @abstractmethod
    async def set_favorite(self, link_id: int, user_id: int, favorite: bool) -> bool: ...

    @abstractmethod
    async def delete(self, link_id: int, user_id: int) -> bool: ...
