"""SQLAlchemy implementation of ProjectRepository. Every read is owner-scoped."""

from typing import Optional

from sqlalchemy import delete, func, select

from flowing_links.domain.entities.project import Project
from flowing_links.domain.entities.user import User
from flowing_links.domain.ports.repositories import ProjectRepository
from flowing_links.infrastructure.persistence.models import ProjectRow
from flowing_links.infrastructure.persistence.sqlalchemy_repository import (
    SqlAlchemyRepository,
)


class SqlAlchemyProjectRepository(SqlAlchemyRepository, ProjectRepository):
    def _to_entity(self, row: ProjectRow) -> Project:
        return Project(id=row.id, name=row.name, user=User(id=row.user_id))

    async def _get_row(self, project_id: int, user_id: int) -> Optional[ProjectRow]:
        return await self._session.scalar(
            select(ProjectRow).where(ProjectRow.id == project_id, ProjectRow.user_id == user_id)
        )

    async def list_by_user(self, user_id: int) -> list[Project]:
        rows = await self._session.scalars(
            select(ProjectRow).where(ProjectRow.user_id == user_id).order_by(ProjectRow.id)
        )
        return [self._to_entity(row) for row in rows]

    async def get_by_id(self, project_id: int, user_id: int) -> Optional[Project]:
        row = await self._get_row(project_id, user_id)
        return self._to_entity(row) if row else None

    async def name_taken(
        self, name: str, user_id: int, exclude_id: Optional[int] = None
    ) -> bool:
        stmt = (
            select(func.count())
            .select_from(ProjectRow)
            .where(ProjectRow.name == name, ProjectRow.user_id == user_id)
        )
        if exclude_id:
            stmt = stmt.where(ProjectRow.id != exclude_id)
        return (await self._session.scalar(stmt)) > 0

    async def add(self, project: Project) -> Project:
        row = ProjectRow(name=project.name, user_id=project.user_id)
        self._session.add(row)
        await self._flush()
        project.id = row.id
        return project

    async def update(self, project: Project) -> None:
        row = await self._get_row(project.id, project.user_id)
        if row is None:
            return
        row.name = project.name
        await self._flush()

    async def delete(self, project_id: int, user_id: int) -> bool:
        result = await self._session.execute(
            delete(ProjectRow).where(ProjectRow.id == project_id, ProjectRow.user_id == user_id)
        )
        return result.rowcount > 0
