"""
User Repository Port - Interface for user persistence.
Implementation: flowing_links/infrastructure/persistence/sqlalchemy_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from flowing_links.domain.entities.user import User


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    async def list_all(self) -> list[User]: ...

    @abstractmethod
    async def username_taken(
        self, username: str, exclude_id: Optional[int] = None
    ) -> bool: ...

    @abstractmethod
    async def add(self, user: User) -> User: ...

    @abstractmethod
    async def update(self, user: User) -> None: ...

    @abstractmethod
    async def delete(self, user_id: int) -> bool: ...
