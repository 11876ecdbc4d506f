"""List Users Query."""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.application.dto.user import UserDTO
from flowing_links.application.mapping import USER_MAP
from flowing_links.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class ListUsersQuery(Query[list[UserDTO]]):
    pass


class ListUsersHandler(QueryHandler[list[UserDTO]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: ListUsersQuery) -> list[UserDTO]:
        users = await self._user_repository.list_all()
        return [USER_MAP.to_dto(user) for user in users]
