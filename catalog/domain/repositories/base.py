"""Generic repository base interfaces.

Repository[E, ID] is the root abstraction for all data-access interfaces in
this domain layer.  Concrete implementations live in
catalog/infrastructure/persistence/ and are wired at the application boundary.

Design notes:
  - All methods are async so the in-memory and database-backed stores share
    one interface; the in-memory store never actually suspends.
  - E is the domain entity type (never an ORM row or DTO); ID is its
    identifier value object.
  - update() and delete() raise NotFoundError for unknown ids; find_by_id()
    returns None instead.
  - Searchable repositories add a filter -> sort -> paginate query whose
    filter value type is chosen per entity.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from catalog.domain.models.entity import Entity
from catalog.domain.models.search import SearchParams, SearchResult
from catalog.domain.models.value_objects import ValueObject

E = TypeVar("E", bound=Entity)
ID = TypeVar("ID", bound=ValueObject)
FilterT = TypeVar("FilterT")


class Repository(ABC, Generic[E, ID]):
    """Abstract CRUD interface for a domain aggregate."""

    @abstractmethod
    async def insert(self, entity: E) -> None:
        """Persist one entity.  No duplicate-id check is made."""

    @abstractmethod
    async def bulk_insert(self, entities: list[E]) -> None:
        """Persist many entities.  Not guaranteed to be all-or-nothing."""

    @abstractmethod
    async def update(self, entity: E) -> None:
        """Replace the stored entity with the same id.  Raises NotFoundError."""

    @abstractmethod
    async def delete(self, entity_id: ID) -> None:
        """Remove the entity with the given id.  Raises NotFoundError."""

    @abstractmethod
    async def find_by_id(self, entity_id: ID) -> E | None:
        """Return the entity with the given id, or None if not found."""

    @abstractmethod
    async def find_all(self) -> list[E]:
        """Return every stored entity."""


class SearchableRepository(Repository[E, ID], Generic[E, ID, FilterT]):
    """Repository that also supports filter + sort + paginate queries.

    sortable_fields is the allow-list of entity attributes search() may sort
    by; any other sort value is ignored.
    """

    sortable_fields: tuple[str, ...] = ()

    @abstractmethod
    async def search(self, params: SearchParams[FilterT]) -> SearchResult[E]:
        """Return one page of entities matching params."""
