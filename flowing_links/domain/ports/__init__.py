"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/     → Data persistence interfaces

Root files:
- unit_of_work.py   → Transaction boundary
- password_hasher.py → Password hashing
"""

from flowing_links.domain.ports.unit_of_work import UnitOfWork
from flowing_links.domain.ports.password_hasher import PasswordHasher

__all__ = [
    "UnitOfWork",
    "PasswordHasher",
]
