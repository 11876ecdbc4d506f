"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the application handlers need
- Does NOT commit; the UnitOfWork owns the transaction boundary

Infrastructure layer provides implementations.
"""

from flowing_links.domain.ports.repositories.user_repository import UserRepository
from flowing_links.domain.ports.repositories.project_repository import ProjectRepository
from flowing_links.domain.ports.repositories.label_repository import LabelRepository
from flowing_links.domain.ports.repositories.link_repository import LinkRepository

__all__ = [
    "UserRepository",
    "ProjectRepository",
    "LabelRepository",
    "LinkRepository",
]
