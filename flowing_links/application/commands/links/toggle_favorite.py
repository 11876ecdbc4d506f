"""Toggle Favorite Command. Overwrites the flag of a link owned by the caller."""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Command, CommandHandler
from flowing_links.domain.ports import UnitOfWork
from flowing_links.domain.ports.repositories import LinkRepository


@dataclass(frozen=True)
class ToggleFavoriteCommand(Command[bool]):
    link_id: int
    owner_id: int
    favorite: bool


class ToggleFavoriteHandler(CommandHandler[bool]):
    def __init__(self, link_repository: LinkRepository, unit_of_work: UnitOfWork):
        self._link_repository = link_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: ToggleFavoriteCommand) -> bool:
        found = await self._link_repository.set_favorite(
            command.link_id, command.owner_id, command.favorite
        )
        if found:
            await self._unit_of_work.commit()
        return found
