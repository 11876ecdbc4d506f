"""
Project Entity - A per-user named grouping.
"""

from dataclasses import dataclass
from typing import Optional

from flowing_links.domain.entities.user import User


@dataclass
class Project:
    id: int = 0
    name: str = ""
    user: Optional[User] = None

    @property
    def user_id(self) -> int:
        return self.user.id if self.user else 0

    def assign_owner(self, user_id: int) -> None:
        self.user = User(id=user_id)
