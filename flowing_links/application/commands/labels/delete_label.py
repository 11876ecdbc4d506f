"""Delete Label Command. Associations to links are removed with the label."""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Command, CommandHandler
from flowing_links.domain.ports import UnitOfWork
from flowing_links.domain.ports.repositories import LabelRepository


@dataclass(frozen=True)
class DeleteLabelCommand(Command[bool]):
    label_id: int


class DeleteLabelHandler(CommandHandler[bool]):
    def __init__(self, label_repository: LabelRepository, unit_of_work: UnitOfWork):
        self._label_repository = label_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: DeleteLabelCommand) -> bool:
        deleted = await self._label_repository.delete(command.label_id)
        if deleted:
            await self._unit_of_work.commit()
        return deleted
