"""Delete Project Command."""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Command, CommandHandler
from flowing_links.domain.ports import UnitOfWork
from flowing_links.domain.ports.repositories import ProjectRepository


@dataclass(frozen=True)
class DeleteProjectCommand(Command[bool]):
    project_id: int
    owner_id: int


class DeleteProjectHandler(CommandHandler[bool]):
    def __init__(self, project_repository: ProjectRepository, unit_of_work: UnitOfWork):
        self._project_repository = project_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: DeleteProjectCommand) -> bool:
        deleted = await self._project_repository.delete(
            command.project_id, command.owner_id
        )
        if deleted:
            await self._unit_of_work.commit()
        return deleted
