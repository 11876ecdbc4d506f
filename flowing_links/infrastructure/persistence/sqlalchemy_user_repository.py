"""SQLAlchemy implementation of UserRepository."""

from typing import Optional

from sqlalchemy import delete, func, select

from flowing_links.domain.entities.user import User
from flowing_links.domain.ports.repositories import UserRepository
from flowing_links.infrastructure.persistence.models import UserRow
from flowing_links.infrastructure.persistence.sqlalchemy_repository import (
    SqlAlchemyRepository,
)


class SqlAlchemyUserRepository(SqlAlchemyRepository, UserRepository):
    def _to_entity(self, row: UserRow) -> User:
        """Map table row to domain entity."""
        return User(
            id=row.id,
            name=row.name,
            username=row.username,
            password_hash=row.password,
        )

    async def get_by_id(self, user_id: int) -> Optional[User]:
        row = await self._session.get(UserRow, user_id)
        return self._to_entity(row) if row else None

    async def get_by_username(self, username: str) -> Optional[User]:
        row = await self._session.scalar(select(UserRow).where(UserRow.username == username))
        return self._to_entity(row) if row else None

    async def list_all(self) -> list[User]:
        rows = await self._session.scalars(select(UserRow).order_by(UserRow.id))
        return [self._to_entity(row) for row in rows]

    async def username_taken(self, username: str, exclude_id: Optional[int] = None) -> bool:
        stmt = select(func.count()).select_from(UserRow).where(UserRow.username == username)
        if exclude_id:
            stmt = stmt.where(UserRow.id != exclude_id)
        return (await self._session.scalar(stmt)) > 0

    async def add(self, user: User) -> User:
        row = UserRow(name=user.name, username=user.username, password=user.password_hash)
        self._session.add(row)
        await self._flush()
        user.id = row.id
        return user

    async def update(self, user: User) -> None:
        row = await self._session.get(UserRow, user.id)
        if row is None:
            return
        row.name = user.name
        row.username = user.username
        row.password = user.password_hash
        await self._flush()

    async def delete(self, user_id: int) -> bool:
        # Projects and links follow through ON DELETE CASCADE.
        result = await self._session.execute(delete(UserRow).where(UserRow.id == user_id))
        return result.rowcount > 0
