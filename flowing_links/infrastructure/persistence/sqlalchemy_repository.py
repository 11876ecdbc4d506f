"""Shared plumbing for the SQLAlchemy repositories."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from flowing_links.domain.exceptions import DomainError


class SqlAlchemyRepository:
    """Repositories flush but never commit; the unit of work owns the transaction."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _flush(self) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise DomainError("The operation violates a data constraint.") from e
