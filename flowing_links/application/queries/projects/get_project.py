"""Get Project Query. Another user's project reads as missing."""

from dataclasses import dataclass
from typing import Optional

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.application.dto.project import ProjectDTO
from flowing_links.application.mapping import PROJECT_MAP
from flowing_links.domain.ports.repositories import ProjectRepository


@dataclass(frozen=True)
class GetProjectQuery(Query[Optional[ProjectDTO]]):
    project_id: int
    owner_id: int


class GetProjectHandler(QueryHandler[Optional[ProjectDTO]]):
    def __init__(self, project_repository: ProjectRepository):
        self._project_repository = project_repository

    async def execute(self, query: GetProjectQuery) -> Optional[ProjectDTO]:
        project = await self._project_repository.get_by_id(query.project_id, query.owner_id)
        return PROJECT_MAP.to_dto(project) if project else None
