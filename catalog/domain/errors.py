"""Domain exceptions.

Raised by entities and by every repository backend, and propagated unchanged
to the caller.
"""

from __future__ import annotations

from typing import Any

FieldErrors = dict[str, list[str]]


class NotFoundError(LookupError):
    """No stored entity matches the given identifier."""

    def __init__(self, entity_id: Any, entity_type: type) -> None:
        self.entity_id = entity_id
        self.entity_type = entity_type
        super().__init__(f"{entity_type.__name__} Not Found using ID {entity_id}")


class EntityValidationError(ValueError):
    """One or more entity fields violate their rules.

    errors maps each invalid field to every rule it broke, not just the first.
    """

    def __init__(self, errors: FieldErrors, message: str = "Validation Error") -> None:
        self.errors = errors
        super().__init__(message)

    def count(self) -> int:
        """Number of distinct invalid fields."""
        return len(self.errors)


class InvalidUuidError(ValueError):
    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"ID must be a valid UUID, got {value!r}")
