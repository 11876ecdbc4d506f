"""Username Exists Query."""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class UsernameExistsQuery(Query[bool]):
    username: str


class UsernameExistsHandler(QueryHandler[bool]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: UsernameExistsQuery) -> bool:
        return await self._user_repository.username_taken(query.username)
