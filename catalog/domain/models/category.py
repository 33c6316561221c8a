"""Category aggregate and its field rules.

Category is a mutable dataclass rather than a frozen Pydantic model: the
entity must be able to hold an invalid value (e.g. name=None) long enough for
CategoryValidator to report every violated rule at once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from catalog.domain.errors import EntityValidationError, FieldErrors

from .entity import Entity
from .value_objects import Uuid

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 255


class CategoryValidator:
    """Explicit rule set for Category fields.

    validate() returns False and fills self.errors (field -> messages) when
    any rule fails.  Rules within a field are all evaluated; e.g. name=None
    breaks not-empty, must-be-a-string and max-length together.
    """

    def __init__(self) -> None:
        self.errors: FieldErrors = {}

    def validate(self, entity: Category) -> bool:
        errors: FieldErrors = {}
        for field_name, messages in (
            ("name", self._name_errors(entity.name)),
            ("description", self._description_errors(entity.description)),
            ("is_active", self._is_active_errors(entity.is_active)),
        ):
            if messages:
                errors[field_name] = messages
        self.errors = errors
        return not errors

    @staticmethod
    def _name_errors(value: Any) -> list[str]:
        messages = []
        if value is None or value == "":
            messages.append("name should not be empty")
        if not isinstance(value, str):
            messages.append("name must be a string")
        if not isinstance(value, str) or len(value) > NAME_MAX_LENGTH:
            messages.append(
                f"name must be shorter than or equal to {NAME_MAX_LENGTH} characters"
            )
        return messages

    @staticmethod
    def _description_errors(value: Any) -> list[str]:
        if value is not None and not isinstance(value, str):
            return ["description must be a string"]
        return []

    @staticmethod
    def _is_active_errors(value: Any) -> list[str]:
        messages = []
        if value is None:
            messages.append("is_active should not be empty")
        if not isinstance(value, bool):
            messages.append("is_active must be a boolean value")
        return messages


@dataclass(eq=False)
class Category(Entity):
    """A catalog category.

    The plain constructor does not validate (rehydration from storage trusts
    the stored row); use Category.create() for new aggregates.
    """

    name: str
    category_id: Uuid = field(default_factory=Uuid)
    description: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.category_id is None:
            self.category_id = Uuid()
        # Naive timestamps are taken as UTC.
        if isinstance(self.created_at, datetime) and self.created_at.tzinfo is None:
            self.created_at = self.created_at.replace(tzinfo=timezone.utc)

    @classmethod
    def create(
        cls,
        name: str,
        description: str | None = None,
        is_active: bool = True,
        created_at: datetime | None = None,
    ) -> Category:
        """Named constructor; validates before returning."""
        kwargs: dict[str, Any] = dict(name=name, description=description, is_active=is_active)
        if created_at is not None:
            kwargs["created_at"] = created_at
        category = cls(**kwargs)
        cls.validate(category)
        return category

    @classmethod
    def validate(cls, entity: Category) -> None:
        validator = CategoryValidator()
        if not validator.validate(entity):
            raise EntityValidationError(validator.errors)

    @property
    def entity_id(self) -> Uuid:
        return self.category_id

    def change_name(self, name: str) -> None:
        self._apply(name=name)

    def change_description(self, description: str | None) -> None:
        self._apply(description=description)

    def update(self, name: str | None = None, description: str | None = None) -> None:
        """Change name and/or description; falsy arguments are left unchanged."""
        changes: dict[str, Any] = {}
        if name:
            changes["name"] = name
        if description:
            changes["description"] = description
        self._apply(**changes)

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def _apply(self, **changes: Any) -> None:
        # On validation failure every changed field is restored.
        previous = {name: getattr(self, name) for name in changes}
        for name, value in changes.items():
            setattr(self, name, value)
        try:
            Category.validate(self)
        except EntityValidationError as exc:
            for name, value in previous.items():
                setattr(self, name, value)
            logger.debug("Rejected change to category %s: %s", self.category_id, exc.errors)
            raise

    def to_json(self) -> dict[str, Any]:
        return {
            "category_id": self.category_id.id,
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
            "created_at": self.created_at,
        }
