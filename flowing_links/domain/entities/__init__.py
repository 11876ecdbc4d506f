"""
ENTITIES - Business objects with identity

Each entity:
- Has an integer identifier (0 until persisted)
- References related entities as whole objects (User, Label)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from flowing_links.domain.entities.user import User, ADMIN_USER_ID
from flowing_links.domain.entities.project import Project
from flowing_links.domain.entities.label import Label
from flowing_links.domain.entities.link import Link

__all__ = [
    "User",
    "ADMIN_USER_ID",
    "Project",
    "Label",
    "Link",
]
