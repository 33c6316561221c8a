"""Category repository interface."""

from __future__ import annotations

from catalog.domain.models.category import Category
from catalog.domain.models.value_objects import Uuid

from .base import SearchableRepository


class CategoryRepository(SearchableRepository[Category, Uuid, str]):
    """Read/write interface for Category entities.

    search() filters by a case-insensitive substring of the category name and
    may sort by name or created_at.
    """

    sortable_fields: tuple[str, ...] = ("name", "created_at")
