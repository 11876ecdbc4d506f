"""Unit of work over the request-scoped AsyncSession."""

from logging import getLogger

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from flowing_links.domain.exceptions import DomainError
from flowing_links.domain.ports import UnitOfWork

logger = getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning("Integrity violation on commit: %s", e.orig)
            raise DomainError("The operation violates a data constraint.") from e

    async def rollback(self) -> None:
        await self._session.rollback()
