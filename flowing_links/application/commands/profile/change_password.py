"""Change Password Command."""

from dataclasses import dataclass
from logging import getLogger

from flowing_links.application.common.interfaces import Command, CommandHandler
from flowing_links.domain.exceptions import DomainError, EntityNotFoundError
from flowing_links.domain.ports import PasswordHasher, UnitOfWork
from flowing_links.domain.ports.repositories import UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class ChangePasswordCommand(Command[None]):
    user_id: int
    new_password: str


class ChangePasswordHandler(CommandHandler[None]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        unit_of_work: UnitOfWork,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._unit_of_work = unit_of_work

    async def execute(self, command: ChangePasswordCommand) -> None:
        if not command.new_password or not command.new_password.strip():
            raise DomainError("Password cannot be empty")

        user = await self._user_repository.get_by_id(command.user_id)
        if user is None:
            raise EntityNotFoundError.for_id("User", command.user_id)

        user.password_hash = self._password_hasher.hash(command.new_password)
        await self._user_repository.update(user)
        await self._unit_of_work.commit()
        logger.info("Password changed for user %s", user.id)
