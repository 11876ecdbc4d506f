"""Get Label Query."""

from dataclasses import dataclass
from typing import Optional

from flowing_links.application.common.interfaces import Query, QueryHandler
from flowing_links.application.dto.label import LabelDTO
from flowing_links.application.mapping import LABEL_MAP
from flowing_links.domain.ports.repositories import LabelRepository


@dataclass(frozen=True)
class GetLabelQuery(Query[Optional[LabelDTO]]):
    label_id: int


class GetLabelHandler(QueryHandler[Optional[LabelDTO]]):
    def __init__(self, label_repository: LabelRepository):
        self._label_repository = label_repository

    async def execute(self, query: GetLabelQuery) -> Optional[LabelDTO]:
        label = await self._label_repository.get_by_id(query.label_id)
        return LABEL_MAP.to_dto(label) if label else None
