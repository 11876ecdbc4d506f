"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class DeleteLabelCommand(Command[bool]):
        label_id: int

    class DeleteLabelHandler(CommandHandler[bool]):
        def __init__(self, label_repository: LabelRepository, unit_of_work: UnitOfWork):
            self._label_repository = label_repository
            self._unit_of_work = unit_of_work

        async def execute(self, command: DeleteLabelCommand) -> bool:
            deleted = await self._label_repository.delete(command.label_id)
            if deleted:
                await self._unit_of_work.commit()
            return deleted
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
