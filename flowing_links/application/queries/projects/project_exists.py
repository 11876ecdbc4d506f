"""Project Exists Query."""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.domain.ports.repositories import ProjectRepository


@dataclass(frozen=True)
class ProjectExistsQuery(Query[bool]):
    project_id: int
    owner_id: int


class ProjectExistsHandler(QueryHandler[bool]):
    def __init__(self, project_repository: ProjectRepository):
        self._project_repository = project_repository

    async def execute(self, query: ProjectExistsQuery) -> bool:
        project = await self._project_repository.get_by_id(query.project_id, query.owner_id)
        return project is not None
