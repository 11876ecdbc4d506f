"""
Database bootstrap: async engine, session factory, schema creation.

One Database instance lives for the whole application (APP scope);
sessions are opened per request by the DI container.
"""

from logging import getLogger

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from flowing_links.config.settings import DatabaseSettings
from flowing_links.infrastructure.persistence.models import Base

logger = getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    def __init__(self, settings: DatabaseSettings):
        self._settings = settings
        self.engine: AsyncEngine = create_async_engine(
            settings.sqlalchemy_url, echo=settings.echo
        )
        if settings.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @property
    def is_sqlite(self) -> bool:
        return self._settings.is_sqlite

    async def create_schema(self) -> None:
        """Create missing tables. Existing tables are left untouched."""
        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready (%s)", self.engine.dialect.name)

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", e)
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
