"""Update Profile Command. A user edits their own name and username."""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Command, CommandHandler
from flowing_links.application.dto.user import UserDTO
from flowing_links.application.mapping import USER_MAP
from flowing_links.domain.exceptions import DomainError, EntityNotFoundError
from flowing_links.domain.ports import UnitOfWork
from flowing_links.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class UpdateProfileCommand(Command[UserDTO]):
    user_id: int
    name: str
    username: str


class UpdateProfileHandler(CommandHandler[UserDTO]):
    def __init__(self, user_repository: UserRepository, unit_of_work: UnitOfWork):
        self._user_repository = user_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: UpdateProfileCommand) -> UserDTO:
        if not command.username or not command.username.strip():
            raise DomainError("Username cannot be empty")

        user = await self._user_repository.get_by_id(command.user_id)
        if user is None:
            raise EntityNotFoundError.for_id("User", command.user_id)

        if await self._user_repository.username_taken(
            command.username, exclude_id=command.user_id
        ):
            raise DomainError(f"Username '{command.username}' already exists.")

        user.name = command.name
        user.username = command.username
        await self._user_repository.update(user)
        await self._unit_of_work.commit()
        return USER_MAP.to_dto(user)
