"""SQLAlchemy implementation of CategoryRepository."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.errors import NotFoundError
from catalog.domain.models.category import Category as DomainCategory
from catalog.domain.models.search import SearchParams, SearchResult
from catalog.domain.models.value_objects import Uuid
from catalog.domain.repositories.categories import CategoryRepository
from catalog.infrastructure.persistence.models.categories import Category as OrmCategory

logger = logging.getLogger(__name__)


class SqlCategoryRepository(CategoryRepository):
    """Session-bound repository; committing is the caller's responsibility."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @staticmethod
    def _to_domain(row: OrmCategory) -> DomainCategory:
        return DomainCategory(
            category_id=Uuid(str(row.category_id)),
            name=row.name,
            description=row.description,
            is_active=row.is_active,
            created_at=row.created_at,
        )

    @staticmethod
    def _to_row(entity: DomainCategory) -> OrmCategory:
        return OrmCategory(
            category_id=UUID(entity.category_id.id),
            name=entity.name,
            description=entity.description,
            is_active=entity.is_active,
            created_at=entity.created_at,
        )

    async def _get(self, category_id: UUID) -> OrmCategory | None:
        stmt = select(OrmCategory).where(OrmCategory.category_id == category_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def insert(self, entity: DomainCategory) -> None:
        self._session.add(self._to_row(entity))
        logger.debug("Inserted category %s", entity.category_id)

    async def bulk_insert(self, entities: list[DomainCategory]) -> None:
        self._session.add_all([self._to_row(entity) for entity in entities])
        logger.debug("Inserted %d categories", len(entities))

    async def update(self, entity: DomainCategory) -> None:
        category_id = UUID(entity.category_id.id)
        if await self._get(category_id) is None:
            logger.warning("Category %s not found for update", category_id)
            raise NotFoundError(entity.category_id, DomainCategory)
        stmt = (
            update(OrmCategory)
            .where(OrmCategory.category_id == category_id)
            .values(
                name=entity.name,
                description=entity.description,
                is_active=entity.is_active,
                created_at=entity.created_at,
            )
        )
        await self._session.execute(stmt)
        logger.debug("Updated category %s", category_id)

    async def delete(self, entity_id: Uuid) -> None:
        category_id = UUID(entity_id.id)
        if await self._get(category_id) is None:
            logger.warning("Category %s not found for delete", category_id)
            raise NotFoundError(entity_id, DomainCategory)
        stmt = delete(OrmCategory).where(OrmCategory.category_id == category_id)
        await self._session.execute(stmt)
        logger.debug("Deleted category %s", category_id)

    async def find_by_id(self, entity_id: Uuid) -> DomainCategory | None:
        row = await self._get(UUID(entity_id.id))
        return self._to_domain(row) if row else None

    async def find_all(self) -> list[DomainCategory]:
        result = await self._session.execute(select(OrmCategory))
        return [self._to_domain(row) for row in result.scalars()]

    async def search(self, params: SearchParams[str]) -> SearchResult[DomainCategory]:
        raise NotImplementedError("Category search is only available in memory")
