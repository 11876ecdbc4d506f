"""SQLAlchemy implementation of LabelRepository."""

from typing import Iterable, Optional

from sqlalchemy import delete, func, select

from flowing_links.domain.entities.label import Label
from flowing_links.domain.ports.repositories import LabelRepository
from flowing_links.infrastructure.persistence.models import LabelRow, LinkLabelRow
from flowing_links.infrastructure.persistence.sqlalchemy_repository import (
    SqlAlchemyRepository,
)


class SqlAlchemyLabelRepository(SqlAlchemyRepository, LabelRepository):
    def _to_entity(self, row: LabelRow) -> Label:
        return Label(id=row.id, name=row.name)

    async def list_all(self) -> list[Label]:
        rows = await self._session.scalars(select(LabelRow).order_by(LabelRow.id))
        return [self._to_entity(row) for row in rows]

    async def get_by_id(self, label_id: int) -> Optional[Label]:
        row = await self._session.get(LabelRow, label_id)
        return self._to_entity(row) if row else None

    async def missing_ids(self, label_ids: Iterable[int]) -> list[int]:
        wanted = list(dict.fromkeys(label_ids))
        if not wanted:
            return []
        found = set(
            await self._session.scalars(select(LabelRow.id).where(LabelRow.id.in_(wanted)))
        )
        return [label_id for label_id in wanted if label_id not in found]

    async def name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        stmt = select(func.count()).select_from(LabelRow).where(LabelRow.name == name)
        if exclude_id:
            stmt = stmt.where(LabelRow.id != exclude_id)
        return (await self._session.scalar(stmt)) > 0

    async def add(self, label: Label) -> Label:
        row = LabelRow(name=label.name)
        self._session.add(row)
        await self._flush()
        label.id = row.id
        return label

    async def update(self, label: Label) -> None:
        row = await self._session.get(LabelRow, label.id)
        if row is None:
            return
        row.name = label.name
        await self._flush()

    async def delete(self, label_id: int) -> bool:
        await self._session.execute(delete(LinkLabelRow).where(LinkLabelRow.label_id == label_id))
        result = await self._session.execute(delete(LabelRow).where(LabelRow.id == label_id))
        return result.rowcount > 0
