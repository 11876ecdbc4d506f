"""Delete User Command."""

from dataclasses import dataclass
from logging import getLogger

from flowing_links.application.common.interfaces import Command, CommandHandler
from flowing_links.domain.entities.user import ADMIN_USER_ID
from flowing_links.domain.exceptions import AccessDeniedError, DomainError
from flowing_links.domain.ports import UnitOfWork
from flowing_links.domain.ports.repositories import UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class DeleteUserCommand(Command[bool]):
    user_id: int
    caller_id: int


class DeleteUserHandler(CommandHandler[bool]):
    def __init__(self, user_repository: UserRepository, unit_of_work: UnitOfWork):
        self._user_repository = user_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: DeleteUserCommand) -> bool:
        if command.user_id == ADMIN_USER_ID:
            raise DomainError("The admin user can't be deleted.")

        if command.user_id == command.caller_id:
            logger.warning("User %s attempted to delete themselves", command.caller_id)
            raise AccessDeniedError("You cannot delete your own account.")

        if command.caller_id != ADMIN_USER_ID:
            logger.warning(
                "User %s attempted to delete user %s",
                command.caller_id,
                command.user_id,
            )
            raise AccessDeniedError("Only the Admin can delete users.")

        # Projects, links and their label associations go with the user (FK cascade).
        deleted = await self._user_repository.delete(command.user_id)
        if deleted:
            await self._unit_of_work.commit()
        return deleted
