"""
Authenticate Query - Resolve a user from login credentials.

Usage in presentation layer:
    handler: FromDishka[AuthenticateHandler]
    user = await handler.execute(AuthenticateQuery(username, password))
    token = token_service.issue_token(user.id, user.username)

Unknown username and wrong password fail with the same message so the
response does not reveal which usernames exist.
"""

from dataclasses import dataclass
from logging import getLogger

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.domain.entities.user import User
from flowing_links.domain.exceptions import DomainError
from flowing_links.domain.ports import PasswordHasher
from flowing_links.domain.ports.repositories import UserRepository

logger = getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


@dataclass(frozen=True)
class AuthenticateQuery(Query[User]):
    username: str
    password: str


class AuthenticateHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self._user_repository = user_repository
        self._password_hasher = password_hasher

    async def execute(self, query: AuthenticateQuery) -> User:
        username = (query.username or "").strip()
        password = query.password or ""

        if not username:
            raise DomainError("Username cannot be empty")
        if not password.strip():
            raise DomainError("Password cannot be empty")

        user = await self._user_repository.get_by_username(username)
        if user is None:
            logger.info("Login failed for unknown username %s", username)
            raise DomainError(INVALID_CREDENTIALS)

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info("Login failed for user %s: wrong password", user.id)
            raise DomainError(INVALID_CREDENTIALS)

        return user
