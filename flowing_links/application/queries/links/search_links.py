"""
SearchLinks Query - Filter the caller's links.

Filter semantics:
- description: case-insensitive substring; blank means no constraint
- label_ids:   link carries at least one of the ids; empty means no constraint
- favorite:    0 all, 1 favorites only, 2 non-favorites only
"""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.application.dto.link import LinkDTO
from flowing_links.application.mapping import LINK_MAP
from flowing_links.domain.ports.repositories import LinkRepository
from flowing_links.domain.value_objects import LinkFilter


@dataclass(frozen=True)
class SearchLinksQuery(Query[list[LinkDTO]]):
    owner_id: int
    link_filter: LinkFilter


class SearchLinksHandler(QueryHandler[list[LinkDTO]]):
    def __init__(self, link_repository: LinkRepository):
        self._link_repository = link_repository

    async def execute(self, query: SearchLinksQuery) -> list[LinkDTO]:
        links = await self._link_repository.search(query.owner_id, query.link_filter)
        return [LINK_MAP.to_dto(link) for link in links]
