"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in catalog/infrastructure/persistence/.

Import from this package rather than individual modules to avoid coupling
callers to specific repository module paths.
"""

from .base import Repository, SearchableRepository
from .categories import CategoryRepository

__all__ = [
    "Repository",
    "SearchableRepository",
    "CategoryRepository",
]
