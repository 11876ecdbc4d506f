"""Get Link Query."""

from dataclasses import dataclass
from typing import Optional

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.application.dto.link import LinkDTO
from flowing_links.application.mapping import LINK_MAP
from flowing_links.domain.ports.repositories import LinkRepository


@dataclass(frozen=True)
class GetLinkQuery(Query[Optional[LinkDTO]]):
    link_id: int
    owner_id: int


class GetLinkHandler(QueryHandler[Optional[LinkDTO]]):
    def __init__(self, link_repository: LinkRepository):
        self._link_repository = link_repository

    async def execute(self, query: GetLinkQuery) -> Optional[LinkDTO]:
        link = await self._link_repository.get_by_id(query.link_id, query.owner_id)
        return LINK_MAP.to_dto(link) if link else None
