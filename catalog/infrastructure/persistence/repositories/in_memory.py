"""List-backed repository implementations.

InMemoryRepository keeps entities in insertion order and finds them by a
linear scan comparing identifier value objects, so lookups are O(n).  It is
meant for tests and local development, not for large data sets.

InMemorySearchableRepository adds search() as three pure stages applied in
a fixed order: filter, then sort, then paginate.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Callable
from typing import Any, Generic

from catalog.domain.errors import NotFoundError
from catalog.domain.models.enums import SortDirection
from catalog.domain.models.search import SearchParams, SearchResult
from catalog.domain.repositories.base import ID, E, FilterT, Repository, SearchableRepository

logger = logging.getLogger(__name__)


class InMemoryRepository(Repository[E, ID], Generic[E, ID]):
    """Repository over a plain Python list.

    entity_type is only used to build NotFoundError messages.
    """

    def __init__(self, entity_type: type[E]) -> None:
        self.entity_type = entity_type
        self.items: list[E] = []

    async def insert(self, entity: E) -> None:
        self.items.append(entity)
        logger.debug("Inserted %s %s", self.entity_type.__name__, entity.entity_id)

    async def bulk_insert(self, entities: list[E]) -> None:
        self.items.extend(entities)
        logger.debug("Inserted %d %s entities", len(entities), self.entity_type.__name__)

    async def update(self, entity: E) -> None:
        index = self._index_of(entity.entity_id)
        self.items[index] = entity
        logger.debug("Updated %s %s", self.entity_type.__name__, entity.entity_id)

    async def delete(self, entity_id: ID) -> None:
        index = self._index_of(entity_id)
        del self.items[index]
        logger.debug("Deleted %s %s", self.entity_type.__name__, entity_id)

    async def find_by_id(self, entity_id: ID) -> E | None:
        for item in self.items:
            if item.entity_id.equals(entity_id):
                return item
        return None

    async def find_all(self) -> list[E]:
        return list(self.items)

    def _index_of(self, entity_id: Any) -> int:
        """Position of the first stored entity whose id equals entity_id."""
        for index, item in enumerate(self.items):
            if item.entity_id.equals(entity_id):
                return index
        logger.warning("%s %s not found", self.entity_type.__name__, entity_id)
        raise NotFoundError(entity_id, self.entity_type)


class InMemorySearchableRepository(
    InMemoryRepository[E, ID],
    SearchableRepository[E, ID, FilterT],
    Generic[E, ID, FilterT],
):
    """In-memory repository with a filter -> sort -> paginate search().

    Subclasses implement _apply_filter() and declare sortable_fields.
    """

    sortable_fields: tuple[str, ...] = ()

    async def search(self, params: SearchParams[FilterT]) -> SearchResult[E]:
        filtered = await self._apply_filter(self.items, params.filter)
        ordered = self._apply_sort(filtered, params.sort, params.sort_dir)
        page = self._apply_paginate(ordered, params.page, params.per_page)
        return SearchResult(
            items=page,
            total=len(filtered),
            current_page=params.page,
            per_page=params.per_page,
        )

    @abstractmethod
    async def _apply_filter(self, items: list[E], filter: FilterT | None) -> list[E]:
        """Return the items matching filter; a None filter matches everything."""

    def _apply_sort(
        self,
        items: list[E],
        sort: str | None,
        sort_dir: SortDirection | str | None,
        custom_getter: Callable[[str, E], Any] | None = None,
    ) -> list[E]:
        """Return a sorted copy of items.

        Unknown or missing sort fields leave the order unchanged.  sorted() is
        stable, including with reverse=True, so ties keep their input order.
        """
        if not sort or sort not in self.sortable_fields:
            return list(items)

        def key(item: E) -> Any:
            return custom_getter(sort, item) if custom_getter else getattr(item, sort)

        return sorted(items, key=key, reverse=sort_dir != SortDirection.ASC)

    @staticmethod
    def _apply_paginate(items: list[E], page: int, per_page: int) -> list[E]:
        start = (page - 1) * per_page
        return items[start : start + per_page]
