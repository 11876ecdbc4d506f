"""
User Entity - A person who owns links and projects.
"""

from dataclasses import dataclass

# The seeded administrator always carries this identity.
ADMIN_USER_ID = 1


@dataclass
class User:
    id: int = 0
    name: str = ""
    username: str = ""
    password_hash: str = ""

    @property
    def is_admin(self) -> bool:
        return self.id == ADMIN_USER_ID
