"""List Projects Query."""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.application.dto.project import ProjectDTO
from flowing_links.application.mapping import PROJECT_MAP
from flowing_links.domain.ports.repositories import ProjectRepository


@dataclass(frozen=True)
class ListProjectsQuery(Query[list[ProjectDTO]]):
    owner_id: int


class ListProjectsHandler(QueryHandler[list[ProjectDTO]]):
    def __init__(self, project_repository: ProjectRepository):
        self._project_repository = project_repository

    async def execute(self, query: ListProjectsQuery) -> list[ProjectDTO]:
        projects = await self._project_repository.list_by_user(query.owner_id)
        return [PROJECT_MAP.to_dto(project) for project in projects]
