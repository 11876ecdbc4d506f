"""
LinkFilter Value Object - Criteria for searching a user's links.
"""

from dataclasses import dataclass
from typing import Optional

from flowing_links.domain.value_objects.favorite_filter import FavoriteFilter


@dataclass(frozen=True)
class LinkFilter:
    description: Optional[str] = None
    label_ids: tuple[int, ...] = ()
    favorite: FavoriteFilter = FavoriteFilter.ALL

    def __post_init__(self):
        # Accept plain ints coming from the wire.
        object.__setattr__(self, "favorite", FavoriteFilter(self.favorite))
        object.__setattr__(self, "label_ids", tuple(self.label_ids))

    @property
    def description_term(self) -> Optional[str]:
        """Trimmed description term, or None when the filter should not apply."""
        if self.description is None:
            return None
        term = self.description.strip()
        return term or None
