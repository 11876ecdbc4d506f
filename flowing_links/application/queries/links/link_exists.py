"""Link Exists Query."""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.domain.ports.repositories import LinkRepository


@dataclass(frozen=True)
class LinkExistsQuery(Query[bool]):
    link_id: int
    owner_id: int


class LinkExistsHandler(QueryHandler[bool]):
    def __init__(self, link_repository: LinkRepository):
        self._link_repository = link_repository

    async def execute(self, query: LinkExistsQuery) -> bool:
        return await self._link_repository.exists(query.link_id, query.owner_id)
