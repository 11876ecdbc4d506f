"""List Labels Query. Labels are shared by all users."""

from dataclasses import dataclass

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.application.dto.label import LabelDTO
from flowing_links.application.mapping import LABEL_MAP
from flowing_links.domain.ports.repositories import LabelRepository


@dataclass(frozen=True)
class ListLabelsQuery(Query[list[LabelDTO]]):
    pass


class ListLabelsHandler(QueryHandler[list[LabelDTO]]):
    def __init__(self, label_repository: LabelRepository):
        self._label_repository = label_repository

    async def execute(self, query: ListLabelsQuery) -> list[LabelDTO]:
        labels = await self._label_repository.list_all()
        return [LABEL_MAP.to_dto(label) for label in labels]
