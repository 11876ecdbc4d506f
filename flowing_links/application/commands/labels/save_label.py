"""Save Label Command. Label names are unique across all users."""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Command, CommandHandler
from flowing_links.application.dto.label import LabelDTO
from flowing_links.application.mapping import LABEL_MAP
from flowing_links.domain.exceptions import DomainError, EntityNotFoundError
from flowing_links.domain.ports import UnitOfWork
from flowing_links.domain.ports.repositories import LabelRepository


@dataclass(frozen=True)
class SaveLabelCommand(Command[LabelDTO]):
    label: LabelDTO


class SaveLabelHandler(CommandHandler[LabelDTO]):
    def __init__(self, label_repository: LabelRepository, unit_of_work: UnitOfWork):
        self._label_repository = label_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: SaveLabelCommand) -> LabelDTO:
        dto = command.label
        if not dto.name or not dto.name.strip():
            raise DomainError("Label name cannot be empty")

        if not dto.id:
            if await self._label_repository.name_taken(dto.name):
                raise DomainError(f"Label '{dto.name}' already exists.")
            label = await self._label_repository.add(LABEL_MAP.to_entity(dto))
        else:
            label = await self._label_repository.get_by_id(dto.id)
            if label is None:
                raise EntityNotFoundError.for_id("Label", dto.id)
            if await self._label_repository.name_taken(dto.name, exclude_id=dto.id):
                raise DomainError(f"Label '{dto.name}' already exists.")
            LABEL_MAP.to_entity(dto, label)
            await self._label_repository.update(label)

        await self._unit_of_work.commit()
        return LABEL_MAP.to_dto(label)
