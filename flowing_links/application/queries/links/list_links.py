"""List Links Query."""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.application.dto.link import LinkDTO
from flowing_links.application.mapping import LINK_MAP
from flowing_links.domain.ports.repositories import LinkRepository


@dataclass(frozen=True)
class ListLinksQuery(Query[list[LinkDTO]]):
    owner_id: int


class ListLinksHandler(QueryHandler[list[LinkDTO]]):
    def __init__(self, link_repository: LinkRepository):
        self._link_repository = link_repository

    async def execute(self, query: ListLinksQuery) -> list[LinkDTO]:
        links = await self._link_repository.list_by_user(query.owner_id)
        return [LINK_MAP.to_dto(link) for link in links]
