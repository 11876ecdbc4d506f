"""
GetUser Query - Read one account.

When caller_id is given the read is restricted to the caller's own account;
/User/me and /Profile pass the caller as user_id directly.
"""

from dataclasses import dataclass
from typing import Optional

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.application.dto.user import UserDTO
from flowing_links.application.mapping import USER_MAP
from flowing_links.domain.exceptions import AccessDeniedError
from flowing_links.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class GetUserQuery(Query[Optional[UserDTO]]):
    user_id: int
    caller_id: Optional[int] = None


class GetUserHandler(QueryHandler[Optional[UserDTO]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetUserQuery) -> Optional[UserDTO]:
        if query.caller_id is not None and query.caller_id != query.user_id:
            raise AccessDeniedError("You can only view your own account")

        user = await self._user_repository.get_by_id(query.user_id)
        return USER_MAP.to_dto(user) if user else None
