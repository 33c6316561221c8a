"""In-memory implementation of CategoryRepository."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from catalog.domain.models.category import Category
from catalog.domain.models.enums import SortDirection
from catalog.domain.models.value_objects import Uuid
from catalog.domain.repositories.categories import CategoryRepository

from .in_memory import InMemorySearchableRepository


class InMemoryCategoryRepository(
    InMemorySearchableRepository[Category, Uuid, str], CategoryRepository
):
    """Filters by case-insensitive name substring.

    Without an explicit sort, results are newest first (created_at desc).
    """

    sortable_fields: tuple[str, ...] = ("name", "created_at")

    def __init__(self) -> None:
        super().__init__(Category)

    async def _apply_filter(self, items: list[Category], filter: str | None) -> list[Category]:
        if not filter:
            return list(items)
        needle = filter.lower()
        return [item for item in items if needle in item.name.lower()]

    def _apply_sort(
        self,
        items: list[Category],
        sort: str | None,
        sort_dir: SortDirection | str | None,
        custom_getter: Callable[[str, Category], Any] | None = None,
    ) -> list[Category]:
        if not sort:
            return super()._apply_sort(items, "created_at", SortDirection.DESC, custom_getter)
        return super()._apply_sort(items, sort, sort_dir, custom_getter)
