"""
Link Entity - A bookmarked URL owned by exactly one user.
"""

from dataclasses import dataclass, field
from typing import Optional

from flowing_links.domain.entities.label import Label
from flowing_links.domain.entities.user import User


@dataclass
class Link:
    id: int = 0
    description: str = ""
    url: str = ""
    comments: Optional[str] = None
    read: bool = False
    favorite: bool = False
    user: Optional[User] = None
    labels: list[Label] = field(default_factory=list)

    @property
    def user_id(self) -> int:
        return self.user.id if self.user else 0

    @property
    def label_ids(self) -> list[int]:
        """Distinct label ids in first-seen order."""
        return list(dict.fromkeys(label.id for label in self.labels if label.id))

    def assign_owner(self, user_id: int) -> None:
        self.user = User(id=user_id)
