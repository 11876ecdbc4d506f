"""
Project Name Exists Query.

Project names are unique per owner, so the check only looks at the
caller's own projects.
"""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.domain.ports.repositories import ProjectRepository


@dataclass(frozen=True)
class ProjectNameExistsQuery(Query[bool]):
    name: str
    owner_id: int


class ProjectNameExistsHandler(QueryHandler[bool]):
    def __init__(self, project_repository: ProjectRepository):
        self._project_repository = project_repository

    async def execute(self, query: ProjectNameExistsQuery) -> bool:
        return await self._project_repository.name_taken(query.name.strip(), query.owner_id)
