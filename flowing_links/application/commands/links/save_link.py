"""
Save Link Command.

Creates or updates a link of the caller and replaces its label set in the same
transaction. URLs are unique per owner; label ids must all exist.
"""

from dataclasses import dataclass
from logging import getLogger

from flowing_links.application.common.interfaces import Command, CommandHandler
from flowing_links.application.dto.link import LinkDTO
from flowing_links.application.mapping import LINK_MAP
from flowing_links.domain.exceptions import DomainError, EntityNotFoundError
from flowing_links.domain.ports import UnitOfWork
from flowing_links.domain.ports.repositories import (
    LabelRepository,
    LinkRepository,
    UserRepository,
)

logger = getLogger(__name__)


@dataclass(frozen=True)
class SaveLinkCommand(Command[LinkDTO]):
    link: LinkDTO
    owner_id: int


class SaveLinkHandler(CommandHandler[LinkDTO]):
    def __init__(
        self,
        link_repository: LinkRepository,
        label_repository: LabelRepository,
        user_repository: UserRepository,
        unit_of_work: UnitOfWork,
    ):
        self._link_repository = link_repository
        self._label_repository = label_repository
        self._user_repository = user_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: SaveLinkCommand) -> LinkDTO:
        dto = command.link
        owner_id = command.owner_id

        if await self._user_repository.get_by_id(owner_id) is None:
            raise DomainError(f"User with ID {owner_id} not found.")

        label_ids = list(dict.fromkeys(i for i in dto.label_ids if i))
        missing = await self._label_repository.missing_ids(label_ids)
        if missing:
            raise DomainError(f"Label with ID {missing[0]} not found.")

        exclude_id = dto.id or None
        if await self._link_repository.url_taken(dto.url, owner_id, exclude_id=exclude_id):
            raise DomainError(f"Link with URL '{dto.url}' already exists.")

        if not dto.id:
            link = LINK_MAP.to_entity(dto)
            link.assign_owner(owner_id)
            link = await self._link_repository.add(link)
        else:
            link = await self._link_repository.get_by_id(dto.id, owner_id)
            if link is None:
                raise EntityNotFoundError.for_id("Link", dto.id)
            LINK_MAP.to_entity(dto, link)
            link.assign_owner(owner_id)
            await self._link_repository.update(link)

        await self._link_repository.replace_labels(link.id, label_ids)
        await self._unit_of_work.commit()

        logger.debug("Link %s saved for user %s with labels %s", link.id, owner_id, label_ids)

        result = LINK_MAP.to_dto(link)
        return result.model_copy(update={"label_ids": label_ids})
