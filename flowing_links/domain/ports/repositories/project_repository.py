"""
Project Repository Port - Interface for project persistence.
Every lookup is scoped to the owning user.
Implementation: flowing_links/infrastructure/persistence/sqlalchemy_project_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from flowing_links.domain.entities.project import Project


class ProjectRepository(ABC):
    @abstractmethod
    async def list_by_user(self, user_id: int) -> list[Project]: ...

    @abstractmethod
    async def get_by_id(self, project_id: int, user_id: int) -> Optional[Project]: ...

    @abstractmethod
    async def name_taken(
        self, name: str, user_id: int, exclude_id: Optional[int] = None
    ) -> bool: ...

    @abstractmethod
    async def add(self, project: Project) -> Project: ...

    @abstractmethod
    async def update(self, project: Project) -> None: ...

    @abstractmethod
    async def delete(self, project_id: int, user_id: int) -> bool: ...
