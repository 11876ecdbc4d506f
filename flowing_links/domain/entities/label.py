"""
Label Entity - A tag attachable to many links, unique by name across all users.
"""

from dataclasses import dataclass


@dataclass
class Label:
    id: int = 0
    name: str = ""
