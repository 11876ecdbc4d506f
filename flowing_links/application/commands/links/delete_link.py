"""Delete Link Command."""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Command, CommandHandler
from flowing_links.domain.ports import UnitOfWork
from flowing_links.domain.ports.repositories import LinkRepository


@dataclass(frozen=True)
class DeleteLinkCommand(Command[bool]):
    link_id: int
    owner_id: int


class DeleteLinkHandler(CommandHandler[bool]):
    def __init__(self, link_repository: LinkRepository, unit_of_work: UnitOfWork):
        self._link_repository = link_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: DeleteLinkCommand) -> bool:
        deleted = await self._link_repository.delete(command.link_id, command.owner_id)
        if deleted:
            await self._unit_of_work.commit()
        return deleted
