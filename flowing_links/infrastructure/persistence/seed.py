"""Startup seeding of the administrator account (id 1)."""

from logging import getLogger

from sqlalchemy import select, text

from flowing_links.config.settings import AccountSettings
from flowing_links.domain.entities.user import ADMIN_USER_ID
from flowing_links.domain.ports import PasswordHasher
from flowing_links.infrastructure.persistence.database import Database
from flowing_links.infrastructure.persistence.models import UserRow

logger = getLogger(__name__)


async def ensure_admin_user(
    database: Database, accounts: AccountSettings, password_hasher: PasswordHasher
) -> bool:
    """Insert the admin row if absent. Returns True when a row was created."""
    async with database.session_factory() as session:
        existing = await session.scalar(select(UserRow).where(UserRow.id == ADMIN_USER_ID))
        if existing is not None:
            return False

        session.add(
            UserRow(
                id=ADMIN_USER_ID,
                name=accounts.admin_name,
                username=accounts.admin_username,
                password=password_hasher.hash(accounts.admin_password),
            )
        )
        await session.flush()

        if database.engine.dialect.name == "postgresql":
            # Explicit id insert does not advance the serial sequence.
            await session.execute(
                text(
                    "SELECT setval(pg_get_serial_sequence('\"User\"', 'Id'), "
                    "(SELECT MAX(\"Id\") FROM \"User\"))"
                )
            )

        await session.commit()

    logger.info("Seeded admin user '%s'", accounts.admin_username)
    return True
