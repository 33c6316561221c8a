"""Search request and response models.

SearchParams is forgiving about its input: out-of-range or malformed paging
values fall back to defaults instead of raising, so query-string values can
be passed straight through.  SearchResult is the page returned by a
searchable repository.
"""

from __future__ import annotations

import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from .enums import SortDirection

FilterT = TypeVar("FilterT")
ItemT = TypeVar("ItemT")

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 15


def _positive_int(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, float):
        if not value.is_integer():
            return default
        value = int(value)
    elif isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return default
    elif not isinstance(value, int):
        return default
    return value if value > 0 else default


class SearchParams(BaseModel, Generic[FilterT]):
    """Filter, sort and paging options for SearchableRepository.search().

    page is 1-based.  sort_dir is None whenever sort is None; otherwise it is
    always asc or desc (anything unrecognised becomes asc).
    """

    model_config = ConfigDict(frozen=True)

    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE
    sort: str | None = None
    sort_dir: SortDirection | None = None
    filter: FilterT | None = None

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        data["page"] = _positive_int(data.get("page"), DEFAULT_PAGE)
        data["per_page"] = _positive_int(data.get("per_page"), DEFAULT_PER_PAGE)

        sort = data.get("sort")
        sort = None if sort is None or sort == "" else str(sort)
        data["sort"] = sort

        if sort is None:
            data["sort_dir"] = None
        else:
            sort_dir = data.get("sort_dir")
            if isinstance(sort_dir, SortDirection):
                sort_dir = sort_dir.value
            sort_dir = str(sort_dir).lower() if sort_dir is not None else None
            valid = {d.value for d in SortDirection}
            data["sort_dir"] = sort_dir if sort_dir in valid else SortDirection.ASC.value

        if data.get("filter") == "":
            data["filter"] = None
        return data


class SearchResult(BaseModel, Generic[ItemT]):
    """One page of search results.

    total counts every item that passed the filter, before pagination.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: list[ItemT]
    total: int = Field(ge=0)
    current_page: int = Field(ge=1)
    per_page: int = Field(ge=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def last_page(self) -> int:
        return math.ceil(self.total / self.per_page)

    def to_json(self, force_entity: bool = False) -> dict[str, Any]:
        """Plain dict of the page; with force_entity, items are serialised too."""
        return {
            "items": [item.to_json() for item in self.items] if force_entity else list(self.items),
            "total": self.total,
            "current_page": self.current_page,
            "per_page": self.per_page,
            "last_page": self.last_page,
        }
