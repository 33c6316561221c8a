"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .category import Category, CategoryValidator
from .entity import Entity
from .enums import SortDirection
from .search import SearchParams, SearchResult
from .value_objects import Uuid, ValueObject

__all__ = [
    # primitives
    "ValueObject",
    "Uuid",
    "Entity",
    # enums
    "SortDirection",
    # search
    "SearchParams",
    "SearchResult",
    # category
    "Category",
    "CategoryValidator",
]
