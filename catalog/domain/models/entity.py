"""Entity base class.

Entities are compared by identity (their entity_id value object), never by
field equality: two Category objects with the same id but different names
are the same aggregate at different points in time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .value_objects import ValueObject


class Entity(ABC):
    """Common identity contract for every aggregate."""

    @property
    @abstractmethod
    def entity_id(self) -> ValueObject:
        """The identifier value object of this entity."""

    @abstractmethod
    def to_json(self) -> dict[str, Any]:
        """Flat dict with the identifier unwrapped to its raw string."""

    def equals(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return False
        return self.entity_id.equals(other.entity_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self.equals(other)

    def __hash__(self) -> int:
        return hash(self.entity_id)
