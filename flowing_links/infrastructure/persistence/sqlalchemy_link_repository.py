"""
SQLAlchemy implementation of LinkRepository.

Reads load the label associations eagerly (selectinload) since lazy loading
is unavailable on an AsyncSession. Label sets are rewritten wholesale by
replace_labels within the caller's transaction.
"""

from typing import Iterable, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.orm import selectinload

from flowing_links.domain.entities.label import Label
from flowing_links.domain.entities.link import Link
from flowing_links.domain.entities.user import User
from flowing_links.domain.ports.repositories import LinkRepository
from flowing_links.domain.value_objects import FavoriteFilter, LinkFilter
from flowing_links.infrastructure.persistence.models import LinkLabelRow, LinkRow
from flowing_links.infrastructure.persistence.sqlalchemy_repository import (
    SqlAlchemyRepository,
)


class SqlAlchemyLinkRepository(SqlAlchemyRepository, LinkRepository):
    def _to_entity(self, row: LinkRow) -> Link:
        """Map table row (with its loaded label associations) to domain entity."""
        return Link(
            id=row.id,
            description=row.description,
            url=row.url,
            comments=row.comments,
            read=row.read,
            favorite=row.favorite,
            user=User(id=row.user_id),
            labels=[
                Label(id=link_label.label.id, name=link_label.label.name)
                for link_label in row.link_labels
            ],
        )

    def _select_owned(self, user_id: int):
        return (
            select(LinkRow)
            .where(LinkRow.user_id == user_id)
            .options(selectinload(LinkRow.link_labels))
            .order_by(LinkRow.id)
        )

    async def list_by_user(self, user_id: int) -> list[Link]:
        rows = await self._session.scalars(self._select_owned(user_id))
        return [self._to_entity(row) for row in rows]

    async def get_by_id(self, link_id: int, user_id: int) -> Optional[Link]:
        row = await self._session.scalar(
            self._select_owned(user_id).where(LinkRow.id == link_id)
        )
        return self._to_entity(row) if row else None

    async def search(self, user_id: int, link_filter: LinkFilter) -> list[Link]:
        stmt = self._select_owned(user_id)

        term = link_filter.description_term
        if term:
            # % and _ in the term are literal text, not wildcards
            stmt = stmt.where(LinkRow.description.icontains(term, autoescape=True))

        if link_filter.label_ids:
            labelled = select(LinkLabelRow.link_id).where(
                LinkLabelRow.label_id.in_(link_filter.label_ids)
            )
            stmt = stmt.where(LinkRow.id.in_(labelled))

        if link_filter.favorite == FavoriteFilter.FAVORITES_ONLY:
            stmt = stmt.where(LinkRow.favorite.is_(True))
        elif link_filter.favorite == FavoriteFilter.NON_FAVORITES_ONLY:
            stmt = stmt.where(LinkRow.favorite.is_(False))

        rows = await self._session.scalars(stmt)
        return [self._to_entity(row) for row in rows]

    async def exists(self, link_id: int, user_id: int) -> bool:
        count = await self._session.scalar(
            select(func.count())
            .select_from(LinkRow)
            .where(LinkRow.id == link_id, LinkRow.user_id == user_id)
        )
        return count > 0

    async def url_taken(self, url: str, user_id: int, exclude_id: Optional[int] = None) -> bool:
        stmt = (
            select(func.count())
            .select_from(LinkRow)
            .where(LinkRow.url == url, LinkRow.user_id == user_id)
        )
        if exclude_id:
            stmt = stmt.where(LinkRow.id != exclude_id)
        return (await self._session.scalar(stmt)) > 0

    async def add(self, link: Link) -> Link:
        row = LinkRow(
            description=link.description,
            url=link.url,
            comments=link.comments,
            read=link.read,
            favorite=link.favorite,
            user_id=link.user_id,
        )
        self._session.add(row)
        await self._flush()
        link.id = row.id
        return link

    async def update(self, link: Link) -> None:
        await self._session.execute(
            update(LinkRow)
            .where(LinkRow.id == link.id, LinkRow.user_id == link.user_id)
            .values(
                description=link.description,
                url=link.url,
                comments=link.comments,
                read=link.read,
                favorite=link.favorite,
            )
        )
        await self._flush()

    async def replace_labels(self, link_id: int, label_ids: Iterable[int]) -> None:
        await self._session.execute(delete(LinkLabelRow).where(LinkLabelRow.link_id == link_id))
        distinct_ids = list(dict.fromkeys(label_ids))
        if distinct_ids:
            await self._session.execute(
                insert(LinkLabelRow),
                [{"link_id": link_id, "label_id": label_id} for label_id in distinct_ids],
            )
        await self._flush()

    async def set_favorite(self, link_id: int, user_id: int, favorite: bool) -> bool:
        result = await self._session.execute(
            update(LinkRow)
            .where(LinkRow.id == link_id, LinkRow.user_id == user_id)
            .values(favorite=favorite)
        )
        return result.rowcount > 0

    async def delete(self, link_id: int, user_id: int) -> bool:
        owned = await self.exists(link_id, user_id)
        if not owned:
            return False
        await self._session.execute(delete(LinkLabelRow).where(LinkLabelRow.link_id == link_id))
        await self._session.execute(
            delete(LinkRow).where(LinkRow.id == link_id, LinkRow.user_id == user_id)
        )
        return True
