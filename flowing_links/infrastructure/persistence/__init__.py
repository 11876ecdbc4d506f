"""
Persistence Layer - Database implementations.

Contains SQLAlchemy (async) repository implementations for domain ports,
the unit of work, and database bootstrap/seeding.
"""

from flowing_links.infrastructure.persistence.database import Database
from flowing_links.infrastructure.persistence.seed import ensure_admin_user
from flowing_links.infrastructure.persistence.sqlalchemy_unit_of_work import (
    SqlAlchemyUnitOfWork,
)
from flowing_links.infrastructure.persistence.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from flowing_links.infrastructure.persistence.sqlalchemy_project_repository import (
    SqlAlchemyProjectRepository,
)
from flowing_links.infrastructure.persistence.sqlalchemy_label_repository import (
    SqlAlchemyLabelRepository,
)
from flowing_links.infrastructure.persistence.sqlalchemy_link_repository import (
    SqlAlchemyLinkRepository,
)

__all__ = [
    "Database",
    "ensure_admin_user",
    "SqlAlchemyUnitOfWork",
    "SqlAlchemyUserRepository",
    "SqlAlchemyProjectRepository",
    "SqlAlchemyLabelRepository",
    "SqlAlchemyLinkRepository",
]
