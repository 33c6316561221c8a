"""Identity and equality primitives shared by every entity.

Value objects are frozen Pydantic models: two instances of the same class
holding the same field values are equal, regardless of identity.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.domain.errors import InvalidUuidError


class ValueObject(BaseModel):
    """Immutable wrapper compared by its contained values."""

    model_config = ConfigDict(frozen=True)

    def equals(self, other: object) -> bool:
        if other is None or type(other) is not type(self):
            return False
        return self.model_dump() == other.model_dump()  # type: ignore[union-attr]

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(sorted(self.model_dump().items()))))


class Uuid(ValueObject):
    """UUID-formatted string identifier, generated when not supplied.

    Malformed values raise InvalidUuidError at construction (not Pydantic's
    ValidationError) so callers only deal with domain exceptions.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))

    def __init__(self, id: str | UUID | None = None, **data: object) -> None:
        if id is None:
            super().__init__(**data)
            return
        if isinstance(id, UUID):
            id = str(id)
        if not _is_uuid(id):
            raise InvalidUuidError(id)
        super().__init__(id=id, **data)

    @field_validator("id")
    @classmethod
    def _lowercase(cls, value: str) -> str:
        return value.lower()

    def __str__(self) -> str:
        return self.id


def _is_uuid(value: object) -> bool:
    if not isinstance(value, str):
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    # UUID() also accepts braces/urn prefixes and un-hyphenated hex
    return len(value) == 36
