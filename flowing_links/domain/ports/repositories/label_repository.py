"""
Label Repository Port - Interface for label persistence.
Labels are global, not scoped to a user.
Implementation: flowing_links/infrastructure/persistence/sqlalchemy_label_repository.py
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional
from flowing_links.domain.entities.label import Label


class LabelRepository(ABC):
    @abstractmethod
    async def list_all(self) -> list[Label]: ...

    @abstractmethod
    async def get_by_id(self, label_id: int) -> Optional[Label]: ...

    @abstractmethod
    async def missing_ids(self, label_ids: Iterable[int]) -> list[int]:
        """Return the ids from label_ids that have no stored label."""
        ...

    @abstractmethod
    async def name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool: ...

    @abstractmethod
    async def add(self, label: Label) -> Label: ...

    @abstractmethod
    async def update(self, label: Label) -> None: ...

    @abstractmethod
    async def delete(self, label_id: int) -> bool: ...
