"""
Save User Command.

Creates a user when the DTO carries no id, updates it otherwise.
Only the administrator may do either; new users receive the configured
initial password and are expected to change it through the profile.
"""

from dataclasses import dataclass
from logging import getLogger

from flowing_links.application.common.interfaces import Command, CommandHandler
from flowing_links.application.dto.user import UserDTO
from flowing_links.application.mapping import USER_MAP
from flowing_links.config.settings import AccountSettings
from flowing_links.domain.entities.user import ADMIN_USER_ID
from flowing_links.domain.exceptions import (
    AccessDeniedError,
    DomainError,
    EntityNotFoundError,
)
from flowing_links.domain.ports import PasswordHasher, UnitOfWork
from flowing_links.domain.ports.repositories import UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class SaveUserCommand(Command[UserDTO]):
    user: UserDTO
    caller_id: int


class SaveUserHandler(CommandHandler[UserDTO]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        unit_of_work: UnitOfWork,
        account_settings: AccountSettings,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._unit_of_work = unit_of_work
        self._account_settings = account_settings

    async def execute(self, command: SaveUserCommand) -> UserDTO:
        dto = command.user
        if command.caller_id != ADMIN_USER_ID:
            action = "update" if dto.id else "create"
            raise AccessDeniedError(f"Only the Admin can {action} users.")

        if not dto.username or not dto.username.strip():
            raise DomainError("Username cannot be empty")

        if not dto.id:
            if await self._user_repository.username_taken(dto.username):
                raise DomainError(f"Username '{dto.username}' already exists.")

            user = USER_MAP.to_entity(dto)
            user.password_hash = self._password_hasher.hash(
                self._account_settings.default_user_password
            )
            user = await self._user_repository.add(user)
            logger.info("User %s created with id %s", user.username, user.id)
        else:
            user = await self._user_repository.get_by_id(dto.id)
            if user is None:
                raise EntityNotFoundError.for_id("User", dto.id)

            if await self._user_repository.username_taken(
                dto.username, exclude_id=dto.id
            ):
                raise DomainError(f"Username '{dto.username}' already exists.")

            USER_MAP.to_entity(dto, user)
            await self._user_repository.update(user)

        await self._unit_of_work.commit()
        return USER_MAP.to_dto(user)
