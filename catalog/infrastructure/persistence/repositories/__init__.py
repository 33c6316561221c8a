"""Concrete repository implementations (SQLAlchemy and in-memory)."""

from __future__ import annotations

from .categories import SqlCategoryRepository
from .categories_in_memory import InMemoryCategoryRepository
from .in_memory import InMemoryRepository, InMemorySearchableRepository

__all__ = [
    "InMemoryRepository",
    "InMemorySearchableRepository",
    "InMemoryCategoryRepository",
    "SqlCategoryRepository",
]
