"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass or enum)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from flowing_links.domain.value_objects.favorite_filter import FavoriteFilter
from flowing_links.domain.value_objects.link_filter import LinkFilter

__all__ = [
    "FavoriteFilter",
    "LinkFilter",
]
