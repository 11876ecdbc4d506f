"""
Save Project Command.

Project names are unique per owner: two users may both have a "Reading" project,
one user may not have two.
"""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Command, CommandHandler
from flowing_links.application.dto.project import ProjectDTO
from flowing_links.application.mapping import PROJECT_MAP
from flowing_links.domain.exceptions import DomainError, EntityNotFoundError
from flowing_links.domain.ports import UnitOfWork
from flowing_links.domain.ports.repositories import ProjectRepository, UserRepository


@dataclass(frozen=True)
class SaveProjectCommand(Command[ProjectDTO]):
    project: ProjectDTO
    owner_id: int


class SaveProjectHandler(CommandHandler[ProjectDTO]):
    def __init__(
        self,
        project_repository: ProjectRepository,
        user_repository: UserRepository,
        unit_of_work: UnitOfWork,
    ):
        self._project_repository = project_repository
        self._user_repository = user_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: SaveProjectCommand) -> ProjectDTO:
        dto = command.project
        owner_id = command.owner_id

        if not dto.name or not dto.name.strip():
            raise DomainError("Project name cannot be empty")

        if await self._user_repository.get_by_id(owner_id) is None:
            raise DomainError(f"User with ID {owner_id} not found.")

        if not dto.id:
            if await self._project_repository.name_taken(dto.name, owner_id):
                raise DomainError(f"Project '{dto.name}' already exists for this user.")

            project = PROJECT_MAP.to_entity(dto)
            project.assign_owner(owner_id)
            project = await self._project_repository.add(project)
        else:
            project = await self._project_repository.get_by_id(dto.id, owner_id)
            if project is None:
                raise EntityNotFoundError.for_id("Project", dto.id)

            if await self._project_repository.name_taken(
                dto.name, owner_id, exclude_id=dto.id
            ):
                raise DomainError(f"Project '{dto.name}' already exists for this user.")

            PROJECT_MAP.to_entity(dto, project)
            project.assign_owner(owner_id)
            await self._project_repository.update(project)

        await self._unit_of_work.commit()
        return PROJECT_MAP.to_dto(project)
